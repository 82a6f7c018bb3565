"""Command line entry point: api-docs-merge."""

import argparse
import sys
from typing import List, Optional

import structlog

from .builder import build_site
from .config import LOG_LEVELS, BuildSettings
from .exceptions import ApiDocsError, ConfigurationError
from .logging import configure_logging

logger = structlog.get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="api-docs-merge",
        description="Merge OpenAPI JSON specs and generate a Swagger UI site",
    )
    parser.add_argument("--specs-dir", help="Directory holding the *.json specs (default: specs)")
    parser.add_argument("--dist-dir", help="Output directory (default: dist)")
    parser.add_argument("--title", help="Title of the merged document")
    parser.add_argument("--version", dest="doc_version", help="Version of the merged document")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (default: INFO)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Emit logs as JSON lines",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = BuildSettings.from_env(
            specs_dir=args.specs_dir,
            dist_dir=args.dist_dir,
            title=args.title,
            version=args.doc_version,
            log_level=args.log_level,
            json_logs=args.json_logs,
        )
    except ConfigurationError as e:
        configure_logging()
        logger.error("build_failed", error_type=type(e).__name__, error_message=str(e))
        return 1
    configure_logging(log_level=settings.log_level, json_logs=settings.json_logs)

    try:
        result = build_site(settings)
    except ApiDocsError as e:
        logger.error("build_failed", error_type=type(e).__name__, error_message=str(e))
        return 1

    logger.info(
        "build_completed",
        specs=len(result.spec_files),
        paths=result.path_count,
        servers=result.server_count,
        dist_dir=str(settings.dist_dir),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
