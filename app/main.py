"""FastAPI application factory for the Order Map Service."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from app.config import AppConfig, load_config
from app.http.problem import (
    handle_http_exception,
    handle_request_validation_error,
    handle_unexpected_error,
)
from app.http.request_id import RequestIdMiddleware
from app.logging_setup import configure_logging
from app.middleware.cors import apply_cors
from app.routes import api_router

logger = logging.getLogger(__name__)


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Build the application.

    ``config`` defaults to ``load_config()``; tests pass their own.
    """
    cfg = config or load_config()
    configure_logging(cfg.log.level)
    app = FastAPI(title="Order Map Service")
    app.state.config = cfg

    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
    apply_cors(app, origins=cfg.api.cors_allow_origins)
    app.add_middleware(RequestIdMiddleware)

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    app.include_router(api_router, prefix=cfg.api.prefix)
    logger.info(
        "app.created prefix=%s max_entries=%s",
        cfg.api.prefix,
        cfg.order_map.max_entries,
    )
    return app


__all__ = ["create_app"]
