from __future__ import annotations

from typing import Iterable, List

from yt_ranker.config import DEFAULT_ALPHA, DEFAULT_BETA
from yt_ranker.models import RankedResult

SUSPICIOUS_PENALTY = 0.5
SENTIMENT_SCALE = 100


class Ranker:
    """
    Scoring/sorting policy lives here.
    Sentiment is scaled x100 so a [-1, 1] signal is commensurable with
    engagement, which is routinely in the hundreds or thousands.
    """

    def __init__(self, alpha: float = DEFAULT_ALPHA, beta: float = DEFAULT_BETA) -> None:
        self.alpha = alpha
        self.beta = beta

    def composite_score(self, engagement: float, sentiment: float, suspicious: bool) -> float:
        penalty = SUSPICIOUS_PENALTY if suspicious else 1.0
        return penalty * (self.alpha * engagement + self.beta * (sentiment * SENTIMENT_SCALE))

    def sort(self, results: Iterable[RankedResult]) -> List[RankedResult]:
        # sorted() is stable, ties keep arrival order
        return sorted(results, key=lambda r: r.composite_score, reverse=True)
