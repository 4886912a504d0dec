from __future__ import annotations
import logging
import sys
from typing import Optional

_configured = False
_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


class _OneLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        # Container log collectors split on newlines; keep tracebacks in one record
        base = super().format(record)
        return base.replace("\n", " | ")


def configure_logging(level: int = logging.INFO) -> None:
    global _configured
    logger = logging.getLogger()
    logger.setLevel(level)

    # Replace our own handler on reconfigure, leave foreign ones (pytest caplog) alone
    for h in list(logger.handlers):
        if getattr(h, "_eks_demo", False):
            logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_OneLineFormatter(_FORMAT))
    handler._eks_demo = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    _configured = True

    # Quiet access lines only when running above INFO
    logging.getLogger("uvicorn.access").setLevel(logging.INFO if level <= logging.INFO else logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        name = __name__
    if not _configured:
        configure_logging()
    return logging.getLogger(name)
