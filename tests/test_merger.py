"""
Tests for the Sentiment Scorer and Sentiment Merger.

Tests cover:
- Per-word detail in input order
- Flat output for plain and keyed text
- Timed output aligned 1:1 with input buckets
- Metadata split for time buckets
"""

import pytest
from unittest.mock import MagicMock

from sentiment import (
    AnalysisResult,
    KeyedText,
    KeyedTimeBuckets,
    PlainText,
    SentimentMerger,
    SentimentScorer,
    TimeBucket,
    WordSentiment,
)


@pytest.fixture(scope="module")
def scorer():
    return SentimentScorer()


@pytest.fixture
def merger(scorer):
    return SentimentMerger(scorer)


# ============================================================
# SCORER TESTS
# ============================================================

class TestSentimentScorer:
    """Tests for the VADER-backed scorer."""

    def test_positive_text(self, scorer):
        result = scorer.score("This is some great text!")
        assert result.score > 0

    def test_negative_text(self, scorer):
        result = scorer.score("I really hate this sentence, it is terrible.")
        assert result.score < 0

    def test_score_range(self, scorer):
        result = scorer.score("good good good great amazing wonderful")
        assert -1.0 <= result.score <= 1.0

    def test_words_in_input_order(self, scorer):
        result = scorer.score("I love rainy days, honestly!")
        assert [w.word for w in result.words] == ["I", "love", "rainy", "days", "honestly"]

    def test_word_scores_from_lexicon(self, scorer):
        words = {w.word: w.score for w in scorer.score("love the table").words}
        assert words["love"] > 0
        assert words["table"] == 0.0

    def test_punctuation_tokens_dropped(self, scorer):
        assert [w.word for w in scorer.score("wait -- what ?!").words] == ["wait", "what"]

    def test_empty_text(self, scorer):
        result = scorer.score("")
        assert result.score == 0.0
        assert result.words == []

    def test_to_dict(self):
        result = AnalysisResult(score=0.5, words=[WordSentiment("good", 0.44)])
        assert result.to_dict() == {"score": 0.5, "words": [{"word": "good", "score": 0.44}]}


# ============================================================
# MERGER TESTS
# ============================================================

class TestFlatMerge:
    """Plain and keyed text produce the direct-analysis payload."""

    @pytest.mark.parametrize("content_type", [PlainText, KeyedText])
    def test_flat_payload_equals_direct_score(self, merger, scorer, content_type):
        text = "The food was great but the service was awful."
        payload = merger.merge(content_type(text))
        assert payload == scorer.score(text).to_dict()

    def test_scores_once(self):
        scorer = MagicMock()
        scorer.score.return_value = AnalysisResult(score=1.0)
        SentimentMerger(scorer).merge(KeyedText("hello"))
        scorer.score.assert_called_once_with("hello")

    def test_unknown_content_raises(self, merger):
        with pytest.raises(TypeError):
            merger.merge("just a string")


class TestTimedMerge:
    """Time buckets produce timed + metadata payloads."""

    @pytest.fixture
    def buckets(self):
        return [
            TimeBucket(start=0.0, end=16.016, text="This is some great text!"),
            TimeBucket(start=16.016, end=24.014, text="I really hate this sentence though..."),
            TimeBucket(start=24.014, end=30.5, text="The table is brown."),
        ]

    def test_timed_aligned_with_buckets(self, merger, scorer, buckets):
        payload = merger.merge(KeyedTimeBuckets(buckets))

        assert set(payload) == {"timed", "metadata"}
        assert len(payload["timed"]) == len(buckets)
        for entry, bucket in zip(payload["timed"], buckets):
            assert entry == {
                "start": bucket.start,
                "end": bucket.end,
                "score": scorer.score(bucket.text).score,
            }

    def test_timed_entries_have_no_word_detail(self, merger, buckets):
        payload = merger.merge(KeyedTimeBuckets(buckets))
        for entry in payload["timed"]:
            assert set(entry) == {"start", "end", "score"}

    def test_metadata_per_bucket(self, merger, scorer, buckets):
        payload = merger.merge(KeyedTimeBuckets(buckets))

        assert [m["index"] for m in payload["metadata"]] == [0, 1, 2]
        for meta, bucket in zip(payload["metadata"], buckets):
            expected = [w.to_dict() for w in scorer.score(bucket.text).words]
            assert meta["words"] == expected

    def test_scored_in_order_independently(self, buckets):
        scorer = MagicMock()
        scorer.score.side_effect = lambda text: AnalysisResult(score=float(len(text)))

        payload = SentimentMerger(scorer).merge(KeyedTimeBuckets(buckets))

        assert [c.args[0] for c in scorer.score.call_args_list] == [b.text for b in buckets]
        assert [t["score"] for t in payload["timed"]] == [float(len(b.text)) for b in buckets]

    def test_empty_buckets(self, merger):
        assert merger.merge(KeyedTimeBuckets([])) == {"timed": [], "metadata": []}
