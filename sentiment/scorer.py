"""
Sentiment Scorer - thin wrapper around vaderSentiment.

The overall score is VADER's compound score in [-1, 1]. Per-word scores
come straight from the VADER lexicon, normalised to the same range, one
entry per whitespace token in input order.
"""

import string
from typing import Optional

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer, normalize

from .models import AnalysisResult, WordSentiment


class SentimentScorer:
    """Scores a unit of text. Stateless between calls."""

    def __init__(self, analyzer: Optional[SentimentIntensityAnalyzer] = None) -> None:
        self._analyzer = analyzer or SentimentIntensityAnalyzer()

    def score(self, text: str) -> AnalysisResult:
        compound = float(self._analyzer.polarity_scores(text)["compound"])
        return AnalysisResult(score=compound, words=self.words(text))

    def words(self, text: str) -> list[WordSentiment]:
        lexicon = self._analyzer.lexicon
        result = []
        for token in text.split():
            word = token.strip(string.punctuation)
            if not word:
                continue
            valence = lexicon.get(word.lower(), 0.0)
            result.append(WordSentiment(word=word, score=round(normalize(valence), 4)))
        return result
