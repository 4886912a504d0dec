from typing import Any, Dict

from fastapi import APIRouter, Depends

from eks_demo.core.system_info import SystemInfoProvider, get_system_info, isoformat_utc

router = APIRouter(tags=["health"])


@router.api_route("/health", methods=["GET", "HEAD"])
def health(info: SystemInfoProvider = Depends(get_system_info)) -> Dict[str, Any]:
    """Liveness/readiness probe target. Always 200."""
    return {
        "status": "healthy",
        "timestamp": isoformat_utc(info.now()),
        "uptime": info.uptime(),
    }
