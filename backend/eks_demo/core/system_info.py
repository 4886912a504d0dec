"""Host and process facts sampled on demand.

Handlers never call the OS directly; they receive a ``SystemInfoProvider``
through the ``get_system_info`` dependency so tests can swap in a fake.
"""
from __future__ import annotations

import math
import platform as _platform
import socket
import sys
import time
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

import psutil
from fastapi import Request

_BYTES_PER_MB = 1024 * 1024


@runtime_checkable
class SystemInfoProvider(Protocol):
    def hostname(self) -> str: ...

    def platform(self) -> str: ...

    def runtime_version(self) -> str: ...

    def total_memory(self) -> int: ...

    def free_memory(self) -> int: ...

    def uptime(self) -> float: ...

    def now(self) -> datetime: ...


class HostSystemInfo:
    """Reads facts from the running host. Nothing is cached between calls."""

    def __init__(self) -> None:
        # Uptime runs on the monotonic clock, anchored at process creation
        try:
            started_ago = max(0.0, time.time() - psutil.Process().create_time())
        except psutil.Error:
            started_ago = 0.0
        self._monotonic_base = time.monotonic() - started_ago

    def hostname(self) -> str:
        return socket.gethostname()

    def platform(self) -> str:
        return sys.platform

    def runtime_version(self) -> str:
        return _platform.python_version()

    def total_memory(self) -> int:
        return psutil.virtual_memory().total

    def free_memory(self) -> int:
        return psutil.virtual_memory().available

    def uptime(self) -> float:
        return time.monotonic() - self._monotonic_base

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def bytes_to_megabytes(n: int) -> str:
    """Render a byte count as ``"<int>MB"``, rounding halves up."""
    return f"{int(math.floor(n / _BYTES_PER_MB + 0.5))}MB"


def isoformat_utc(dt: datetime) -> str:
    """``2024-05-01T12:00:00.123Z`` (millisecond precision, UTC)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def get_system_info(request: Request) -> SystemInfoProvider:
    return request.app.state.system_info


__all__ = [
    "SystemInfoProvider",
    "HostSystemInfo",
    "bytes_to_megabytes",
    "isoformat_utc",
    "get_system_info",
]
