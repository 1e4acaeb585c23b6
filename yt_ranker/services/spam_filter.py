from __future__ import annotations

from typing import Iterable, List, Tuple

SPAM_KEYWORDS: Tuple[str, ...] = (
    "subscribe",
    "like",
    "follow",
    "click here",
    "buy now",
    "free money",
    "win cash",
)


class SpamFilter:
    """
    Drops promotional comments. Plain substring match on lower-cased text, so
    "likely" is caught by "like" too.
    """

    def __init__(self, keywords: Iterable[str] = SPAM_KEYWORDS) -> None:
        self._keywords = tuple(k.lower() for k in keywords if k)

    def is_spam(self, comment: str) -> bool:
        text = (comment or "").lower()
        return any(k in text for k in self._keywords)

    def filter(self, comments: Iterable[str]) -> List[str]:
        return [c for c in comments if not self.is_spam(c)]


def filter_spam(comments: Iterable[str]) -> List[str]:
    return SpamFilter().filter(comments)
