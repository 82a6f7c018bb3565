import json

import pytest
import structlog

from py_api_docs import BuildSettings


@pytest.fixture(autouse=True)
def reset_structlog():
    """main() configures structlog globally; undo it between tests"""
    yield
    structlog.reset_defaults()


@pytest.fixture
def users_spec():
    return {
        "openapi": "3.0.3",
        "info": {"title": "Users API", "version": "1.2.0", "description": "Manage users"},
        "servers": [
            {"url": "https://api.example.com", "description": "Production"},
            {"url": "https://staging.example.com"},
        ],
        "tags": [{"name": "users"}],
        "paths": {
            "/users": {
                "get": {
                    "tags": ["users"],
                    "responses": {
                        "200": {
                            "description": "OK",
                            "content": {
                                "application/json": {
                                    "schema": {
                                        "type": "array",
                                        "items": {"$ref": "#/components/schemas/User"},
                                    }
                                }
                            },
                        }
                    },
                }
            }
        },
        "components": {
            "schemas": {
                "User": {"type": "object", "properties": {"id": {"type": "integer"}}},
                "Error": {"type": "object", "properties": {"message": {"type": "string"}}},
            }
        },
    }


@pytest.fixture
def orders_spec():
    return {
        "openapi": "3.0.3",
        "info": {"title": "Orders API", "version": "0.3.0"},
        "servers": [
            {"url": "https://api.example.com", "description": "Shared gateway"},
            {"url": "https://orders.example.com"},
        ],
        "tags": [{"name": "orders"}, {"name": "users", "description": "duplicate"}],
        "paths": {
            "/orders": {
                "post": {
                    "tags": ["orders"],
                    "requestBody": {
                        "content": {
                            "application/json": {"schema": {"$ref": "#/components/schemas/Order"}}
                        }
                    },
                    "responses": {"201": {"description": "Created"}},
                }
            }
        },
        "components": {
            "schemas": {
                "Order": {"type": "object", "properties": {"total": {"type": "number"}}},
                "Error": {"type": "object", "properties": {"message": {"type": "string"}}},
            }
        },
    }


@pytest.fixture
def write_spec(tmp_path):
    specs_dir = tmp_path / "specs"
    specs_dir.mkdir()

    def _write(name, document):
        path = specs_dir / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def specs_dir(tmp_path, write_spec, users_spec, orders_spec):
    write_spec("users.json", users_spec)
    write_spec("orders.json", orders_spec)
    return tmp_path / "specs"


@pytest.fixture
def settings(tmp_path, specs_dir):
    return BuildSettings(specs_dir=specs_dir, dist_dir=tmp_path / "dist")
