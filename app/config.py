"""Configuration utilities for the Order Map Service.

This module loads application configuration with the following rules:
- Primary source: `order_map_config.json` at the project root.
- Overrides: environment variables, then optional text files under `config/`.
- Validation: Pydantic models enforce required fields and value constraints.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator


CONFIG_DIR = Path("config")
ROOT_CONFIG = Path("order_map_config.json")
logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _read_config_file(rel_path: str) -> Optional[str]:
    path = CONFIG_DIR / rel_path
    try:
        if path.exists():
            return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        # Recoverable: log and ignore unreadable override
        logger.warning("Failed to read override %s: %s", path, e)
        return None
    return None


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)


class ApiConfig(BaseModel):
    prefix: str = "/api/v1"
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator("prefix")
    @classmethod
    def prefix_must_be_absolute(cls, v: str) -> str:
        if not v.startswith("/") or v.endswith("/"):
            raise ValueError("api.prefix must start with '/' and not end with '/'")
        return v


class OrderMapConfig(BaseModel):
    max_entries: int = Field(default=1000, gt=0)


class LogConfig(BaseModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        v = v.upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"log.level must be one of {sorted(_LOG_LEVELS)}")
        return v


class AppConfig(BaseModel):
    api: ApiConfig
    order_map: OrderMapConfig
    log: LogConfig


def _read_json_file(path: Path) -> dict:
    try:
        if path.exists():
            return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:  # pragma: no cover - defensive
        logger.error("Failed to read JSON config %s: %s", path, e)
    return {}


def load_config() -> AppConfig:
    """Load configuration with validation.

    Precedence (highest first):
    1) Environment variables
    2) Text files in `config/` (optional)
    3) order_map_config.json at project root (primary base)
    4) Safe defaults for development
    """

    base = _read_json_file(ROOT_CONFIG)

    def _base(path: str, default: Optional[str] = None) -> Optional[str]:
        cur: object = base
        for key in path.split("."):
            if not isinstance(cur, dict) or key not in cur:
                return default
            cur = cur[key]
        if isinstance(cur, list):
            return ",".join(str(v) for v in cur)
        return str(cur) if cur is not None else default

    prefix = _env("ORDER_MAP_API_PREFIX") or _read_config_file("api.prefix") or _base("api.prefix", "/api/v1")
    origins_text = _env("CORS_ALLOW_ORIGINS") or _read_config_file("cors.allow_origins") or _base("api.cors_allow_origins", "*")
    max_entries_text = _env("ORDER_MAP_MAX_ENTRIES") or _read_config_file("order_map.max_entries") or _base("order_map.max_entries", "1000")
    level = _env("LOG_LEVEL") or _read_config_file("log.level") or _base("log.level", "INFO")

    origins = [o.strip() for o in str(origins_text).split(",") if o.strip()]

    try:
        max_entries = int(str(max_entries_text).strip())
    except ValueError:
        logger.error("order_map.max_entries must be an integer, got %r", max_entries_text)
        raise

    try:
        return AppConfig(
            api=ApiConfig(prefix=str(prefix).strip(), cors_allow_origins=origins or ["*"]),
            order_map=OrderMapConfig(max_entries=max_entries),
            log=LogConfig(level=str(level).strip()),
        )
    except PydanticValidationError as e:
        # Surface actionable message
        logger.error("Invalid application configuration: %s", e)
        raise


__all__ = [
    "AppConfig",
    "ApiConfig",
    "OrderMapConfig",
    "LogConfig",
    "load_config",
]
