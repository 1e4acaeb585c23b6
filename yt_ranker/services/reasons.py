from __future__ import annotations

from typing import List

from yt_ranker.models import RankedResult


def recommendation_reasons(result: RankedResult) -> List[str]:
    reasons: List[str] = []

    if result.views > 1_000_000:
        reasons.append("over 1M views")
    elif result.views > 100_000:
        reasons.append("over 100K views")

    if result.likes > 10_000:
        reasons.append("high like count")

    if result.sentiment > 0.5:
        reasons.append("very positive audience feedback")
    elif result.sentiment > 0:
        reasons.append("positive audience feedback")

    if result.suspicious:
        reasons.append("low traction")

    return reasons


def recommendation_reason(result: RankedResult) -> str:
    reasons = recommendation_reasons(result)
    if not reasons:
        return "Good educational content"
    return "Recommended for: " + ", ".join(reasons)
