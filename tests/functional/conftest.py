"""Functional test bootstrap.

Builds the FastAPI app with an explicit configuration so tests do not
depend on environment variables or config files in the working directory.
"""

from __future__ import annotations

import json
import pathlib

import jsonschema
import pytest
from fastapi.testclient import TestClient

from app.config import ApiConfig, AppConfig, LogConfig, OrderMapConfig
from app.main import create_app

_ROOT = pathlib.Path(__file__).resolve().parents[2]
SCHEMAS_DIR = _ROOT / "schemas"


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(
        api=ApiConfig(prefix="/api/v1"),
        order_map=OrderMapConfig(max_entries=5),
        log=LogConfig(level="DEBUG"),
    )


@pytest.fixture()
def client(app_config: AppConfig) -> TestClient:
    return TestClient(create_app(app_config))


@pytest.fixture()
def validate_schema():
    """Return a callable validating a payload against schemas/<name>."""

    def _validate(payload: dict, name: str) -> None:
        schema = json.loads((SCHEMAS_DIR / name).read_text(encoding="utf-8"))
        jsonschema.validate(payload, schema)

    return _validate
