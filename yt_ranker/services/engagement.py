from __future__ import annotations

from yt_ranker.models import ItemStatistics

# views are typically 1-3 orders of magnitude above likes/comments
VIEWS_DIVISOR = 1000


def engagement_score(stats: ItemStatistics) -> float:
    return (stats.views / VIEWS_DIVISOR + stats.likes + stats.comment_count) / 3
