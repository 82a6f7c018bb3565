"""Build the documentation site: merged spec, spec copies, index page."""

import json
import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, List

import structlog

from .config import BuildSettings
from .documentation import apply_overrides
from .exceptions import OutputWriteError
from .loader import load_specs
from .logging import PerformanceLogger
from .merge import merge
from .models import BuildResult, SpecInput
from .swagger_ui import build_urls, render_index

logger = structlog.get_logger(__name__)


@contextmanager
def _writing(path: Path):
    """Report a failed write of path as OutputWriteError."""
    try:
        yield
    except OSError as e:
        raise OutputWriteError(path, str(e)) from e


def build_document(inputs: List[SpecInput], settings: BuildSettings) -> Dict[str, Any]:
    """Merge the inputs and apply the site-wide info and servers."""
    document = merge(inputs)
    logger.info(
        "merge_completed",
        inputs=len(inputs),
        paths=len(document.get("paths", {})),
    )
    return apply_overrides(document, inputs, settings)


def write_outputs(
    document: Dict[str, Any],
    inputs: List[SpecInput],
    settings: BuildSettings,
) -> BuildResult:
    merged_path = settings.merged_spec_path
    with _writing(settings.dist_specs_dir):
        settings.dist_specs_dir.mkdir(parents=True, exist_ok=True)
    with _writing(merged_path):
        merged_path.write_text(
            json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8"
        )
    logger.info("merged_spec_written", path=str(merged_path))

    for spec in inputs:
        target = settings.dist_specs_dir / spec.file
        with _writing(target):
            shutil.copyfile(Path(settings.specs_dir) / spec.file, target)
        logger.debug("spec_copied", file=spec.file, target=str(target))

    urls = build_urls(inputs, settings.all_apis_name)
    with _writing(settings.index_path):
        settings.index_path.write_text(render_index(urls, settings), encoding="utf-8")
    logger.info("swagger_ui_written", path=str(settings.index_path), entries=len(urls))

    return BuildResult(
        spec_files=[spec.file for spec in inputs],
        merged_spec_path=str(merged_path),
        index_path=str(settings.index_path),
        path_count=len(document.get("paths", {})),
        server_count=len(document.get("servers", [])),
        urls=urls,
    )


def build_site(settings: BuildSettings) -> BuildResult:
    """Run the whole build; stops at the first error."""
    with PerformanceLogger("build_site", specs_dir=str(settings.specs_dir)):
        inputs = load_specs(settings.specs_dir)
        document = build_document(inputs, settings)
        return write_outputs(document, inputs, settings)
