"""GET /api/v1/health -- simple health check."""

from fastapi import APIRouter

from ga_eats.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()
