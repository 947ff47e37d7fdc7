from fastapi import APIRouter

from monkey_lens.api.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe."""
    return HealthResponse()
