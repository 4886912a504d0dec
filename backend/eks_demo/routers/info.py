"""
System info endpoint
Reports which host/pod answered and how much memory it has
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends

from eks_demo.core.system_info import SystemInfoProvider, bytes_to_megabytes, get_system_info

APP_NAME = "Python EKS Deployment"
APP_VERSION = "1.0.0"

router = APIRouter(prefix="/api", tags=["info"])


@router.api_route("/info", methods=["GET", "HEAD"])
def get_info(info: SystemInfoProvider = Depends(get_system_info)) -> Dict[str, Any]:
    """
    Returns:
        - app / version: fixed identifiers of this build
        - hostname, platform: the answering host
        - nodeVersion: runtime version (name kept for existing dashboards)
        - memory.total / memory.free: "<n>MB"
    """
    return {
        "app": APP_NAME,
        "version": APP_VERSION,
        "hostname": info.hostname(),
        "platform": info.platform(),
        "nodeVersion": info.runtime_version(),
        "memory": {
            "total": bytes_to_megabytes(info.total_memory()),
            "free": bytes_to_megabytes(info.free_memory()),
        },
    }
