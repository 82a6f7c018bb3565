from pathlib import Path

import pytest

from py_api_docs import BuildSettings, ConfigurationError


def test_defaults(monkeypatch):
    for name in ("API_DOCS_SPECS_DIR", "API_DOCS_DIST_DIR", "API_DOCS_TITLE", "API_DOCS_JSON_LOGS"):
        monkeypatch.delenv(name, raising=False)

    settings = BuildSettings.from_env()

    assert settings.specs_dir == Path("specs")
    assert settings.merged_spec_path == Path("dist") / "openapi.json"
    assert settings.index_path == Path("dist") / "index.html"
    assert settings.title == "API Documentation"
    assert settings.json_logs is False


def test_environment_and_overrides(monkeypatch):
    monkeypatch.setenv("API_DOCS_TITLE", "From Env")
    monkeypatch.setenv("API_DOCS_DIST_DIR", "/tmp/site")
    monkeypatch.setenv("API_DOCS_JSON_LOGS", "true")

    settings = BuildSettings.from_env(title="From Flag", version=None)

    assert settings.title == "From Flag"
    assert settings.version == "v1.0.0"
    assert settings.dist_specs_dir == Path("/tmp/site/specs")
    assert settings.json_logs is True


def test_log_level_is_normalised():
    assert BuildSettings(log_level=" debug ").log_level == "DEBUG"


def test_unknown_log_level_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("API_DOCS_LOG_LEVEL", "verbose")

    with pytest.raises(ConfigurationError, match="log_level"):
        BuildSettings.from_env()
