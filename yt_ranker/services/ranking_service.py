from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from yt_ranker.config import DEFAULT_DURATION, DEFAULT_MAX_COMMENTS, DEFAULT_MAX_RESULTS, DEFAULT_WORKERS
from yt_ranker.models import Candidate, RankedResult
from yt_ranker.services.engagement import engagement_score
from yt_ranker.services.ranker import Ranker
from yt_ranker.services.sentiment import SentimentScorer
from yt_ranker.services.spam_filter import SpamFilter
from yt_ranker.youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


class RankingService:
    """
    search -> per-candidate fetch-and-score (thread pool) -> join -> sort.

    Candidates whose statistics cannot be fetched are dropped. Sorting only
    happens once every candidate has finished.
    """

    def __init__(
        self,
        yt: YouTubeClient,
        ranker: Ranker | None = None,
        spam_filter: SpamFilter | None = None,
        sentiment: SentimentScorer | None = None,
        max_workers: int = DEFAULT_WORKERS,
        max_comments: int = DEFAULT_MAX_COMMENTS,
        duration: str = DEFAULT_DURATION,
    ) -> None:
        self._yt = yt
        self._ranker = ranker or Ranker()
        self._spam_filter = spam_filter or SpamFilter()
        self._sentiment = sentiment or SentimentScorer()
        self._max_workers = max(1, max_workers)
        self._max_comments = max_comments
        self._duration = duration

    def rank(self, topic: str, max_results: int = DEFAULT_MAX_RESULTS) -> List[RankedResult]:
        candidates = self._yt.search(topic, max_results=max_results, duration=self._duration)
        if not candidates:
            logger.info(f"No candidates for {topic!r}")
            return []

        workers = min(self._max_workers, len(candidates))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in submission order, so ties stay in candidate order
            scored = list(executor.map(self._score_candidate, candidates))

        results = [r for r in scored if r is not None]
        logger.info(f"Scored {len(results)}/{len(candidates)} candidates for {topic!r}")
        return self._ranker.sort(results)

    def _score_candidate(self, candidate: Candidate) -> Optional[RankedResult]:
        stats = self._yt.fetch_statistics(candidate.video_id)
        if stats is None:
            logger.debug(f"Dropping {candidate.video_id}: no statistics")
            return None

        comments = self._yt.fetch_comments(candidate.video_id, max_comments=self._max_comments)
        kept = self._spam_filter.filter(comments)
        sentiment = self._sentiment.score(kept)
        engagement = engagement_score(stats)
        composite = self._ranker.composite_score(engagement, sentiment, stats.suspicious)

        logger.debug(
            f"{candidate.video_id}: engagement={engagement:.2f} sentiment={sentiment:.2f} "
            f"suspicious={stats.suspicious} comments={len(kept)}/{len(comments)}"
        )

        return RankedResult(
            video_id=candidate.video_id,
            title=stats.title or candidate.title,
            engagement=engagement,
            sentiment=sentiment,
            suspicious=stats.suspicious,
            composite_score=composite,
            views=stats.views,
            likes=stats.likes,
        )
