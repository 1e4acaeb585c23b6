from __future__ import annotations

SUSPICIOUS_MAX_VIEWS = 10_000
SUSPICIOUS_MAX_LIKES = 50


def is_suspicious(views: int, likes: int) -> bool:
    """
    Low-traction items (both few views AND few likes) are likely inflated or
    fraudulent. Either counter alone never flags an item.
    """
    return views < SUSPICIOUS_MAX_VIEWS and likes < SUSPICIOUS_MAX_LIKES
