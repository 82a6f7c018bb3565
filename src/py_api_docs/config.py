"""Build configuration, read from the environment."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ValidationError, field_validator

from .exceptions import ConfigurationError

DEFAULT_TITLE = "API Documentation"
DEFAULT_VERSION = "v1.0.0"
ALL_APIS_NAME = "All APIs"
SWAGGER_UI_CDN = "https://unpkg.com/swagger-ui-dist@5"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class BuildSettings(BaseModel):
    """Settings for a single documentation build."""

    specs_dir: Path = Path("specs")
    dist_dir: Path = Path("dist")
    title: str = DEFAULT_TITLE
    version: str = DEFAULT_VERSION
    all_apis_name: str = ALL_APIS_NAME
    swagger_ui_cdn: str = SWAGGER_UI_CDN
    log_level: LogLevel = "INFO"
    json_logs: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @classmethod
    def from_env(cls, **overrides) -> "BuildSettings":
        """Load settings from API_DOCS_* variables; non-None overrides win."""
        values = {
            "specs_dir": os.getenv("API_DOCS_SPECS_DIR", "specs"),
            "dist_dir": os.getenv("API_DOCS_DIST_DIR", "dist"),
            "title": os.getenv("API_DOCS_TITLE", DEFAULT_TITLE),
            "version": os.getenv("API_DOCS_VERSION", DEFAULT_VERSION),
            "all_apis_name": os.getenv("API_DOCS_ALL_APIS_NAME", ALL_APIS_NAME),
            "swagger_ui_cdn": os.getenv("API_DOCS_SWAGGER_UI_CDN", SWAGGER_UI_CDN),
            "log_level": os.getenv("API_DOCS_LOG_LEVEL", "INFO"),
            "json_logs": _env_flag("API_DOCS_JSON_LOGS"),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e

    @property
    def merged_spec_path(self) -> Path:
        return self.dist_dir / "openapi.json"

    @property
    def dist_specs_dir(self) -> Path:
        return self.dist_dir / "specs"

    @property
    def index_path(self) -> Path:
        return self.dist_dir / "index.html"
