"""Merge OpenAPI documents and publish them as a Swagger UI site."""

from .builder import build_document, build_site, write_outputs
from .config import BuildSettings
from .documentation import build_info, merge_servers
from .exceptions import (
    ApiDocsError,
    ConfigurationError,
    MergeError,
    NoSpecFilesFound,
    OutputWriteError,
    SpecParseError,
    SpecsDirectoryNotFound,
)
from .loader import discover_spec_files, load_spec, load_specs
from .logging import PerformanceLogger, configure_logging, get_logger
from .merge import merge
from .models import (
    BuildResult,
    DescriptionMerge,
    Dispute,
    MergeInput,
    OperationSelection,
    PathModification,
    SpecInput,
    SwaggerUrl,
)
from .swagger_ui import build_urls, render_index

__all__ = [
    "build_document",
    "build_site",
    "write_outputs",
    "BuildSettings",
    "build_info",
    "merge_servers",
    "ApiDocsError",
    "ConfigurationError",
    "MergeError",
    "NoSpecFilesFound",
    "OutputWriteError",
    "SpecParseError",
    "SpecsDirectoryNotFound",
    "discover_spec_files",
    "load_spec",
    "load_specs",
    "PerformanceLogger",
    "configure_logging",
    "get_logger",
    "merge",
    "BuildResult",
    "DescriptionMerge",
    "Dispute",
    "MergeInput",
    "OperationSelection",
    "PathModification",
    "SpecInput",
    "SwaggerUrl",
    "build_urls",
    "render_index",
]

__version__ = "0.1.0"
