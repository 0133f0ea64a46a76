"""
NoteKeeper Backend — Health Check Route
=========================================

What:  Liveness probe for Docker health checks and load balancers.

The service has no external dependencies (no database, no upstream API), so
"the process answered" is the whole check: the endpoint is unauthenticated
and always returns 200.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from notekeeper.schemas.note import HealthResponse

router = APIRouter(prefix="/api", tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="OK", timestamp=datetime.now(timezone.utc))
