from __future__ import annotations

from typing import Iterable, Tuple

POSITIVE_WORDS: Tuple[str, ...] = (
    "good", "great", "excellent", "amazing", "love",
    "awesome", "fantastic", "wonderful", "perfect", "best",
)
NEGATIVE_WORDS: Tuple[str, ...] = (
    "bad", "terrible", "awful", "hate", "worst",
    "horrible", "disappointing", "boring", "stupid", "useless",
)


class SentimentScorer:
    def count(self, comments: Iterable[str]) -> tuple[int, int]:
        """
        Returns: (positive_hits, negative_hits)
        Each keyword counts at most once per comment; one comment may hit
        several keywords of either polarity.
        """
        positive = 0
        negative = 0
        for c in comments:
            text = (c or "").lower()
            positive += sum(1 for w in POSITIVE_WORDS if w in text)
            negative += sum(1 for w in NEGATIVE_WORDS if w in text)
        return positive, negative

    def score(self, comments: Iterable[str]) -> float:
        positive, negative = self.count(comments)
        total = positive + negative
        if total == 0:
            return 0.0
        return (positive - negative) / total
