import logging

from structlog.testing import capture_logs

from py_api_docs import PerformanceLogger, configure_logging


def test_configure_logging_leaves_stdlib_root_alone():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    configure_logging(log_level="DEBUG", json_logs=True)

    assert root.handlers == handlers
    assert root.level == level


def test_performance_logger_reports_failure():
    with capture_logs() as logs:
        try:
            with PerformanceLogger("step", file="a.json"):
                raise ValueError("boom")
        except ValueError:
            pass

    failed = [entry for entry in logs if entry["event"] == "operation_failed"]
    assert failed[0]["error_type"] == "ValueError"
    assert failed[0]["file"] == "a.json"
