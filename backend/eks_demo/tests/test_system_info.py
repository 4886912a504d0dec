import re
import sys
from datetime import datetime, timedelta, timezone

import pytest

from eks_demo.core.system_info import (
    HostSystemInfo,
    SystemInfoProvider,
    bytes_to_megabytes,
    isoformat_utc,
)

MB = 1024 * 1024


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, "0MB"),
        (MB, "1MB"),
        (MB // 2 - 1, "0MB"),
        (MB // 2, "1MB"),  # halves round up
        (int(2.5 * MB), "3MB"),
        (16 * 1024 * MB - 1, "16384MB"),
    ],
)
def test_bytes_to_megabytes(n, expected):
    assert bytes_to_megabytes(n) == expected


def test_isoformat_utc_millisecond_z_suffix():
    dt = datetime(2024, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)
    assert isoformat_utc(dt) == "2024-01-02T03:04:05.678Z"


def test_isoformat_utc_converts_offsets():
    dt = datetime(2024, 1, 2, 5, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert isoformat_utc(dt) == "2024-01-02T03:00:00.000Z"


def test_isoformat_utc_treats_naive_as_utc():
    assert isoformat_utc(datetime(2024, 1, 2)) == "2024-01-02T00:00:00.000Z"


def test_host_provider_reads_live_facts():
    info = HostSystemInfo()
    assert isinstance(info, SystemInfoProvider)
    assert info.hostname()
    assert info.platform() == sys.platform
    assert re.match(r"^\d+\.\d+", info.runtime_version())
    assert info.total_memory() > 0
    assert 0 <= info.free_memory() <= info.total_memory()
    assert info.now().tzinfo is not None


def test_host_uptime_counts_from_process_start():
    info = HostSystemInfo()
    first = info.uptime()
    second = info.uptime()
    assert first >= 0
    assert second >= first
