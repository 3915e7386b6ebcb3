"""
Sentiment Merger - Score interpreted content and reshape the output.

Flat content (plain or keyed text) produces the same payload as a direct
analysis. Time-bucket content produces a ``timed`` list aligned 1:1 with
the input buckets (start, end, score only) and a ``metadata`` list that
carries the per-word detail stripped out of ``timed``.
"""

import logging
from typing import Any

from .models import (
    Content,
    KeyedText,
    KeyedTimeBuckets,
    PlainText,
    TimedAnalysisResult,
)
from .scorer import SentimentScorer


logger = logging.getLogger(__name__)


class SentimentMerger:

    def __init__(self, scorer: SentimentScorer) -> None:
        self.scorer = scorer

    def merge(self, content: Content) -> dict[str, Any]:
        if isinstance(content, (PlainText, KeyedText)):
            return self.scorer.score(content.text).to_dict()
        if isinstance(content, KeyedTimeBuckets):
            return self._merge_buckets(content)
        raise TypeError(f"Unsupported content type: {type(content).__name__}")

    def _merge_buckets(self, content: KeyedTimeBuckets) -> dict[str, Any]:
        timed = []
        metadata = []

        # Each bucket scored on its own, in the order supplied
        for index, bucket in enumerate(content.buckets):
            analysis = self.scorer.score(bucket.text)
            timed.append(
                TimedAnalysisResult(
                    start=bucket.start,
                    end=bucket.end,
                    score=analysis.score,
                ).to_dict()
            )
            metadata.append({
                "index": index,
                "words": [w.to_dict() for w in analysis.words],
            })

        logger.debug(f"Merged {len(timed)} time buckets")
        return {"timed": timed, "metadata": metadata}
