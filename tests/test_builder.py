import json

import pytest
from structlog.testing import capture_logs

from py_api_docs import BuildSettings, MergeError, NoSpecFilesFound, OutputWriteError, build_site


def test_build_site_writes_all_outputs(settings, specs_dir):
    result = build_site(settings)

    dist = settings.dist_dir
    merged = json.loads((dist / "openapi.json").read_text(encoding="utf-8"))
    assert set(merged["paths"]) == {"/users", "/orders"}
    assert merged["info"] == {
        "title": "API Documentation",
        "description": "- Orders API\n- Users API",
        "version": "v1.0.0",
    }
    assert [s["url"] for s in merged["servers"]] == [
        "https://api.example.com",
        "https://orders.example.com",
        "https://staging.example.com",
    ]

    for name in ("orders.json", "users.json"):
        assert (dist / "specs" / name).read_bytes() == (specs_dir / name).read_bytes()

    index = (dist / "index.html").read_text(encoding="utf-8")
    assert "./specs/orders.json" in index
    assert result.spec_files == ["orders.json", "users.json"]
    assert result.path_count == 2
    assert result.server_count == 3


def test_merged_spec_is_indented_json(settings):
    build_site(settings)

    text = settings.merged_spec_path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "openapi": "3.0.3"')


def test_build_logs_each_step(settings):
    with capture_logs() as logs:
        build_site(settings)

    events = [entry["event"] for entry in logs]
    for event in (
        "spec_files_found",
        "merge_completed",
        "servers_deduplicated",
        "merged_spec_written",
        "swagger_ui_written",
        "operation_completed",
    ):
        assert event in events


def test_build_stops_on_merge_error(settings, write_spec, users_spec):
    write_spec("users-copy.json", users_spec)

    with capture_logs() as logs:
        with pytest.raises(MergeError):
            build_site(settings)

    assert not settings.merged_spec_path.exists()
    assert any(entry["event"] == "operation_failed" for entry in logs)


def test_build_with_empty_directory(tmp_path, settings):
    for spec in settings.specs_dir.iterdir():
        spec.unlink()

    with pytest.raises(NoSpecFilesFound):
        build_site(settings)


def test_write_failure_is_reported(specs_dir):
    same_place = BuildSettings(specs_dir=specs_dir, dist_dir=specs_dir.parent)

    with pytest.raises(OutputWriteError) as exc_info:
        build_site(same_place)

    assert exc_info.value.path == specs_dir / "orders.json"
