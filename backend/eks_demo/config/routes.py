"""Route table for the FastAPI application."""
from __future__ import annotations

from typing import TYPE_CHECKING

from eks_demo.core.logging import get_logger
from eks_demo.routers.health import router as health_router
from eks_demo.routers.info import router as info_router
from eks_demo.routers.landing import router as landing_router

if TYPE_CHECKING:
    from fastapi import FastAPI

# Fixed at import time; nothing registers routes after startup
ROUTERS = (health_router, landing_router, info_router)


def attach_routes(app: FastAPI) -> None:
    """Attach the fixed route table.

    Args:
        app: FastAPI application instance
    """
    log = get_logger("eks_demo.config.routes")

    for router in ROUTERS:
        app.include_router(router)

    paths = sorted(
        f"{','.join(sorted(getattr(r, 'methods', None) or ()))} {r.path}"
        for r in app.routes
        if getattr(r, "path", None)
    )
    log.info("[startup] Registered routes: %s", paths)
