from fastapi import APIRouter, Depends

from api.dependencies import get_stats
from api.schemas import HealthResponse
from api.stats import ServiceStats

router = APIRouter(tags=["Health"])

@router.get("/", response_model=HealthResponse)
async def health_check(stats: ServiceStats = Depends(get_stats)):
    """
    Liveness probe with process-lifetime request counters.
    """
    counters = stats.get_stats()
    return HealthResponse(
        status="Up",
        totalSuccessfulAnalyses=counters["successful_analyses"],
        hookedRequests=counters["hooked_requests"],
    )
