"""FastAPI application factory.

This module provides the create_app() function that creates and configures
the FastAPI application instance. The app.py file uses this to expose the
app instance for ASGI servers.
"""
from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from eks_demo.core.config import Settings, get_settings
from eks_demo.core.system_info import HostSystemInfo, SystemInfoProvider
from eks_demo.routers.info import APP_VERSION


def create_app(
    settings: Optional[Settings] = None,
    system_info: Optional[SystemInfoProvider] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    1. Logging and Sentry configuration
    2. FastAPI app instantiation (docs endpoints off)
    3. Exception handlers
    4. Route table
    5. System info provider on app.state

    Args:
        settings: Resolved settings; defaults to the process-wide instance.
        system_info: Host facts provider; defaults to HostSystemInfo.

    Returns:
        FastAPI: Configured application instance ready for use by ASGI server.
    """
    settings = settings or get_settings()

    # Step 1: Configure logging and Sentry
    from eks_demo.config.logging import configure_logging, setup_sentry
    configure_logging(settings.log_level)
    setup_sentry(environment=settings.APP_ENV, dsn=settings.SENTRY_DSN)

    from eks_demo.core.logging import get_logger
    log = get_logger("eks_demo.main")

    # Step 2: Create FastAPI app. Only the three fixed routes exist, so the
    # generated docs/openapi routes are disabled and 404 like any other path.
    app = FastAPI(
        title="EKS Demo API",
        version=APP_VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Step 3: Exception handlers
    from eks_demo.exceptions import install_exception_handlers
    install_exception_handlers(app)

    # Step 4: Attach routes
    from eks_demo.config.routes import attach_routes
    attach_routes(app)

    # Step 5: Host facts for the handlers
    app.state.system_info = system_info or HostSystemInfo()

    log.info("[startup] Application configured (env=%s)", settings.APP_ENV)
    return app


__all__ = ["create_app"]
