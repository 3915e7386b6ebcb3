"""
Hook Pipeline Data Models - Hook configuration, requests and results.

Hooks are created once at startup and never change. Everything else is
request-scoped and never shared across requests.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from .exceptions import ConfigurationError
from .templating import UrlTemplate


class HookMode(Enum):
    """Shape a hook's remote response is interpreted under."""
    PLAIN_TEXT = "plain_text"
    KEYED_TEXT = "keyed_text"
    KEYED_TIME_BUCKETS = "keyed_time_buckets"


class TaskStage(Enum):
    """States a task request moves through."""
    RECEIVED = "received"
    HOOK_RESOLVED = "hook_resolved"
    FETCHED = "fetched"
    INTERPRETED = "interpreted"
    MERGED = "merged"

    # Failure exits
    HOOK_NOT_FOUND = "hook_not_found"
    FETCH_FAILED = "fetch_failed"
    DECODE_FAILED = "decode_failed"
    SHAPE_INVALID = "shape_invalid"


@dataclass(frozen=True)
class Hook:
    """
    Remote source configuration for one hook id.

    key:       JSON key holding the text. Absent means plain text body.
    time_mode: value at ``key`` is a list of time buckets.
    headers:   header name -> ordered values, sent on every fetch.
    """
    hook_id: str
    url_template: UrlTemplate
    headers: dict[str, tuple[str, ...]] = field(default_factory=dict)
    key: Optional[str] = None
    time_mode: bool = False

    def __post_init__(self) -> None:
        if self.time_mode and not self.key:
            raise ConfigurationError(
                f"Hook '{self.hook_id}' enables time mode without a key",
                hook_id=self.hook_id,
                stage="configuration",
            )

    @property
    def mode(self) -> HookMode:
        if not self.key:
            return HookMode.PLAIN_TEXT
        if self.time_mode:
            return HookMode.KEYED_TIME_BUCKETS
        return HookMode.KEYED_TEXT

    def header_items(self) -> list[tuple[str, str]]:
        """Flatten headers into (name, value) pairs, one per value."""
        return [
            (name, value)
            for name, values in self.headers.items()
            for value in values
        ]


@dataclass(frozen=True)
class TaskRequest:
    """Fetch-then-score request; ``hook_id=None`` selects the default hook."""
    record_id: str
    hook_id: Optional[str] = None


@dataclass(frozen=True)
class TimeBucket:
    start: float
    end: float
    text: str


@dataclass(frozen=True)
class WordSentiment:
    word: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {"word": self.word, "score": self.score}


@dataclass(frozen=True)
class AnalysisResult:
    """Overall score plus per-word contributions in input order."""
    score: float
    words: list[WordSentiment] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "words": [w.to_dict() for w in self.words],
        }


@dataclass(frozen=True)
class TimedAnalysisResult:
    start: float
    end: float
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start, "end": self.end, "score": self.score}


# ─────────────────────────────────────────────────────────────
# Interpreted content variants
# ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class KeyedText:
    text: str


@dataclass(frozen=True)
class KeyedTimeBuckets:
    buckets: list[TimeBucket] = field(default_factory=list)


Content = Union[PlainText, KeyedText, KeyedTimeBuckets]
