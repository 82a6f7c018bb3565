"""
Structured logging for the documentation build

This module provides:
- JSON or console formatting
- Build context on every entry
- Timing of build steps
"""
import os
import sys
import time
import logging
import structlog
from typing import Optional


def configure_logging(
    service_name: str = "api-docs",
    log_level: str = "INFO",
    json_logs: bool = False,
):
    """Configure structured logging for the build"""

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_context(service_name),
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper())
        ),
        logger_factory=structlog.WriteLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def add_service_context(service_name: str):
    """Add service context to all log entries"""
    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        event_dict["environment"] = os.getenv("ENVIRONMENT", "development")
        return event_dict
    return processor


class PerformanceLogger:
    """Context manager for performance logging"""

    def __init__(self, operation: str, **context):
        self.operation = operation
        self.context = context
        self.logger = structlog.get_logger()
        self.start_time = None

    def __enter__(self):
        self.start_time = time.time()
        self.logger.debug(
            "operation_started",
            operation=self.operation,
            **self.context
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.time() - self.start_time

        if exc_type is None:
            self.logger.info(
                "operation_completed",
                operation=self.operation,
                duration_ms=round(duration * 1000, 2),
                **self.context
            )
        else:
            self.logger.error(
                "operation_failed",
                operation=self.operation,
                duration_ms=round(duration * 1000, 2),
                error_type=exc_type.__name__,
                error_message=str(exc_val),
                **self.context
            )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)
