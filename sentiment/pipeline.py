"""
Task Orchestrator - Runs one task request through the hook pipeline.

    RECEIVED -> HOOK_RESOLVED -> FETCHED -> INTERPRETED -> MERGED

Failure exits: HOOK_NOT_FOUND, FETCH_FAILED, DECODE_FAILED, SHAPE_INVALID.
There are no retries between states and no state kept between requests.
Errors leave this module tagged with the hook id and the failed stage.
"""

import logging
from typing import Any

from .exceptions import (
    DecodeError,
    FetchError,
    HookNotFoundError,
    HookPipelineError,
    ShapeError,
)
from .fetcher import RemoteFetcher
from .interpreter import interpret
from .merger import SentimentMerger
from .models import TaskRequest, TaskStage
from .registry import HookRegistry


logger = logging.getLogger(__name__)


_FAILURE_STAGES: dict[type, TaskStage] = {
    HookNotFoundError: TaskStage.HOOK_NOT_FOUND,
    FetchError: TaskStage.FETCH_FAILED,
    DecodeError: TaskStage.DECODE_FAILED,
    ShapeError: TaskStage.SHAPE_INVALID,
}


class TaskOrchestrator:
    """
    Composes registry, fetcher, interpreter and merger per task request.

    Usage:
        orchestrator = TaskOrchestrator(registry, RemoteFetcher(), merger)
        payload = await orchestrator.run(TaskRequest(record_id="1"))
    """

    def __init__(
        self,
        registry: HookRegistry,
        fetcher: RemoteFetcher,
        merger: SentimentMerger,
    ) -> None:
        self.registry = registry
        self.fetcher = fetcher
        self.merger = merger

    async def run(self, request: TaskRequest) -> dict[str, Any]:
        """
        Resolve, fetch, interpret and merge.

        Raises:
            HookNotFoundError, FetchError, DecodeError, ShapeError
        """
        stage = TaskStage.RECEIVED
        hook_id = request.hook_id or self.registry.default_hook_id

        try:
            hook = self.registry.lookup(request.hook_id)
            stage = TaskStage.HOOK_RESOLVED

            url = hook.url_template.render(request.record_id)
            logger.debug(f"[{hook_id}] Fetching record {request.record_id}")
            result = await self.fetcher.fetch(url, hook.header_items())
            stage = TaskStage.FETCHED

            content = interpret(hook, result.body)
            stage = TaskStage.INTERPRETED

            payload = self.merger.merge(content)
            stage = TaskStage.MERGED

        except HookPipelineError as e:
            failed = _FAILURE_STAGES.get(type(e))
            e.hook_id = e.hook_id or hook_id
            e.stage = failed.value if failed else stage.value
            logger.warning(
                f"[{hook_id}] Task for record {request.record_id} failed "
                f"after {stage.value}: {e.message}"
            )
            raise

        logger.info(f"[{hook_id}] Task for record {request.record_id} {stage.value}")
        return payload
