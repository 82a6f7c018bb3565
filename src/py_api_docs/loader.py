"""Discover and parse the spec files of a specs directory."""

import json
from pathlib import Path
from typing import List

import structlog

from .exceptions import NoSpecFilesFound, SpecParseError, SpecsDirectoryNotFound
from .models import SpecInput

logger = structlog.get_logger(__name__)


def discover_spec_files(specs_dir: Path) -> List[str]:
    """Return the names of the *.json files in specs_dir, sorted."""
    specs_dir = Path(specs_dir)
    if not specs_dir.is_dir():
        raise SpecsDirectoryNotFound(specs_dir)

    spec_files = sorted(
        p.name for p in specs_dir.iterdir()
        if p.is_file() and p.name.endswith(".json")
    )
    if not spec_files:
        raise NoSpecFilesFound(specs_dir)

    logger.info("spec_files_found", count=len(spec_files), files=spec_files)
    return spec_files


def load_spec(specs_dir: Path, file: str) -> SpecInput:
    path = Path(specs_dir) / file
    try:
        oas = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SpecParseError(file, str(e)) from e
    except UnicodeDecodeError as e:
        raise SpecParseError(file, f"not valid UTF-8 ({e.reason})") from e

    if not isinstance(oas, dict):
        raise SpecParseError(file, f"expected a JSON object, got {type(oas).__name__}")

    spec = SpecInput(file=file, oas=oas)
    logger.debug("spec_loaded", file=file, title=spec.title)
    return spec


def load_specs(specs_dir: Path) -> List[SpecInput]:
    """Read every spec file of specs_dir in sorted order."""
    return [load_spec(specs_dir, f) for f in discover_spec_files(specs_dir)]
