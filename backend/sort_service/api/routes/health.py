"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 {"status": "ok"} if the process is up
    - No dependency checks: the service has no external dependencies
"""

from fastapi import APIRouter, status

from sort_service.schemas.probes import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check() -> HealthResponse:
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse()
