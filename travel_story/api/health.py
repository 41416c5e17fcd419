from fastapi import APIRouter

from travel_story.schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness check."""
    return HealthResponse()
