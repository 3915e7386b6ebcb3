import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_orchestrator, get_stats
from api.schemas import ErrorResponse, TaskRequestBody
from api.stats import ServiceStats
from sentiment import HookPipelineError, TaskOrchestrator, TaskRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Task"])

@router.post(
    "/task",
    responses={500: {"model": ErrorResponse}},
)
async def run_task(
    body: TaskRequestBody,
    orchestrator: TaskOrchestrator = Depends(get_orchestrator),
    stats: ServiceStats = Depends(get_stats),
):
    """
    Fetch text through a hook and score it.

    Returns the flat analysis for text hooks, or ``timed`` plus
    ``metadata`` for time-bucket hooks. An unknown hookId is a 500.
    """
    request = TaskRequest(record_id=body.recordingId, hook_id=body.hookId)
    try:
        payload = await orchestrator.run(request)
    except HookPipelineError as e:
        logger.error(f"Task failed: {e.to_dict()}")
        return JSONResponse(status_code=500, content=e.to_dict())

    stats.record_hooked_request()
    return payload
