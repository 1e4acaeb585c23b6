from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from yt_ranker.models import Candidate, ItemStatistics
from yt_ranker.services.suspicion import is_suspicious


class FakeYouTubeClient:
    """In-memory stand-in for YouTubeClient."""

    def __init__(
        self,
        candidates: List[Candidate],
        stats: Dict[str, Optional[dict]],
        comments: Optional[Dict[str, List[str]]] = None,
    ) -> None:
        self.candidates = candidates
        self.stats = stats
        self.comments = comments or {}
        self.search_calls = []

    def search(self, topic, max_results=5, duration="medium"):
        self.search_calls.append((topic, max_results, duration))
        return self.candidates[:max_results]

    def fetch_statistics(self, video_id):
        raw = self.stats.get(video_id)
        if raw is None:
            return None
        return ItemStatistics(
            video_id=video_id,
            title=raw.get("title", ""),
            views=raw.get("views", 0),
            likes=raw.get("likes", 0),
            comment_count=raw.get("comments", 0),
            suspicious=is_suspicious(raw.get("views", 0), raw.get("likes", 0)),
        )

    def fetch_comments(self, video_id, max_comments=50):
        return self.comments.get(video_id, [])[:max_comments]


@pytest.fixture
def make_client():
    return FakeYouTubeClient
