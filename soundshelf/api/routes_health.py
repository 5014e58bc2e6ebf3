"""
Soundshelf Health Check API
"""

from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Request
from pydantic import BaseModel

from .deps import get_api_version, get_config

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    version: str
    serverVersion: str
    apiVersions: List[str]
    serverTime: str


def _utc_now_iso() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Service liveness

    The catalog is in memory and read-only, so a responding process is healthy.
    """
    config = get_config(request)
    version = get_api_version(request)

    return HealthResponse(
        status="healthy",
        version=version,
        serverVersion=config.APP_VERSION,
        apiVersions=[config.API_VERSION],
        serverTime=_utc_now_iso()
    )
