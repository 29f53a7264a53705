"""FastAPI application package for the Order Map Service.

Exposes the application factory. Order map and product collection
order-by logic lives in `app/logic/`; route handlers in `app/routes/`.
"""

from __future__ import annotations

from app.main import create_app

__all__ = ["create_app"]
