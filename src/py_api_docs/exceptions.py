"""Errors raised while building the documentation site."""

from pathlib import Path
from typing import Optional


class ApiDocsError(Exception):
    """Base class for every build failure."""


class SpecsDirectoryNotFound(ApiDocsError):
    def __init__(self, specs_dir: Path):
        self.specs_dir = specs_dir
        super().__init__(f"Specs directory not found: {specs_dir}")


class NoSpecFilesFound(ApiDocsError):
    def __init__(self, specs_dir: Path):
        self.specs_dir = specs_dir
        super().__init__(f"No spec files found in {specs_dir}")


class SpecParseError(ApiDocsError):
    """A spec file could not be read as a JSON object."""

    def __init__(self, file: str, reason: str):
        self.file = file
        self.reason = reason
        super().__init__(f"Could not parse {file}: {reason}")


class MergeError(ApiDocsError):
    """The inputs could not be combined into one document."""

    def __init__(self, message: str, input_index: Optional[int] = None):
        self.input_index = input_index
        super().__init__(message)


class ConfigurationError(ApiDocsError):
    """Settings from the environment or flags are invalid."""


class OutputWriteError(ApiDocsError):
    """An output file could not be written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write {path}: {reason}")
