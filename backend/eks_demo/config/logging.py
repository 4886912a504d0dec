"""Logging and Sentry configuration for the application."""
from __future__ import annotations

import logging
import os

from eks_demo.core.logging import get_logger

_NO_SENTRY_ENVS = ("dev", "development", "test", "testing", "local")


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging.

    Delegates to the core stdout configuration, then lowers the noise from
    libraries that log every detail at INFO.
    """
    from eks_demo.core.logging import configure_logging as core_configure_logging
    core_configure_logging(level)

    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def setup_sentry(environment: str, dsn: str | None = None) -> bool:
    """Initialize Sentry error tracking.

    Sentry captures unhandled request errors (FastAPI integration) and
    WARNING+ log records as events. It stays off without a DSN and in
    dev/test environments.

    Args:
        environment: Current environment name (development, production, ...)
        dsn: Sentry DSN. If None, reads from SENTRY_DSN env var.

    Returns:
        True when Sentry was initialized.
    """
    log = get_logger("eks_demo.config.logging")

    sentry_dsn = dsn or os.getenv("SENTRY_DSN")
    if not sentry_dsn or environment.strip().lower() in _NO_SENTRY_ENVS:
        log.debug("[startup] Sentry disabled (missing DSN or dev/test env)")
        return False

    try:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration
        from sentry_sdk.integrations.logging import LoggingIntegration

        def before_send(event, hint):
            # 404s are routine for a probe target, not errors
            if event.get("tags", {}).get("status_code") == 404:
                return None
            return event

        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[
                FastApiIntegration(),
                LoggingIntegration(level=logging.INFO, event_level=logging.WARNING),
            ],
            traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0")),
            environment=environment,
            send_default_pii=False,
            before_send=before_send,
        )
        log.info("[startup] Sentry initialized for env=%s", environment)
        return True
    except Exception as se:
        log.warning("[startup] Sentry init failed: %s", se)
        return False
