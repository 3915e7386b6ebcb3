"""
Hooked Sentiment - Fetch text from caller-registered hooks and score it.

This package provides:
- HookRegistry: read-only hook configurations with a default hook
- UrlTemplate: single-placeholder URL templates
- RemoteFetcher: single-attempt aiohttp GET
- interpret: plain text / keyed text / keyed time-bucket parsing
- SentimentMerger: scoring and reshaping into flat or timed output
- TaskOrchestrator: the task pipeline end to end

Usage:
    from sentiment import (
        RemoteFetcher, SentimentMerger, SentimentScorer,
        TaskOrchestrator, TaskRequest, load_registry,
    )

    orchestrator = TaskOrchestrator(
        load_registry("config/hooks.yaml"),
        RemoteFetcher(timeout=30),
        SentimentMerger(SentimentScorer()),
    )
    payload = await orchestrator.run(TaskRequest(record_id="1", hook_id="post"))

Output Schema:
- flat:  {"score": float, "words": [{"word": str, "score": float}, ...]}
- timed: {"timed": [{"start", "end", "score"}, ...],
          "metadata": [{"index": int, "words": [...]}, ...]}
"""

from .config import ServiceSettings, load_hooks, load_registry
from .exceptions import (
    ConfigurationError,
    DecodeError,
    FetchError,
    HookNotFoundError,
    HookPipelineError,
    ShapeError,
    TemplateError,
)
from .fetcher import FetchResult, RemoteFetcher
from .interpreter import interpret
from .merger import SentimentMerger
from .models import (
    AnalysisResult,
    Content,
    Hook,
    HookMode,
    KeyedText,
    KeyedTimeBuckets,
    PlainText,
    TaskRequest,
    TaskStage,
    TimeBucket,
    TimedAnalysisResult,
    WordSentiment,
)
from .pipeline import TaskOrchestrator
from .registry import HookRegistry
from .scorer import SentimentScorer
from .templating import UrlTemplate, render


__all__ = [
    # Config
    "ServiceSettings",
    "load_hooks",
    "load_registry",

    # Pipeline components
    "HookRegistry",
    "UrlTemplate",
    "render",
    "RemoteFetcher",
    "FetchResult",
    "interpret",
    "SentimentScorer",
    "SentimentMerger",
    "TaskOrchestrator",

    # Models
    "Hook",
    "HookMode",
    "TaskRequest",
    "TaskStage",
    "TimeBucket",
    "WordSentiment",
    "AnalysisResult",
    "TimedAnalysisResult",
    "Content",
    "PlainText",
    "KeyedText",
    "KeyedTimeBuckets",

    # Exceptions
    "HookPipelineError",
    "ConfigurationError",
    "TemplateError",
    "HookNotFoundError",
    "FetchError",
    "DecodeError",
    "ShapeError",
]


# Version
__version__ = "1.0.0"
