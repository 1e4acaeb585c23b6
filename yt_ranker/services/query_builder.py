from __future__ import annotations

from typing import Iterable

_SKILL_SUFFIX = ("tutorial", "guide", "tips")


def build_skill_query(skill: str, keywords: Iterable[str] = ()) -> str:
    """
    "python", ["async"] -> "python async tutorial guide tips"
    """
    parts = [(skill or "").strip()]
    parts.extend((k or "").strip() for k in keywords)
    parts.extend(_SKILL_SUFFIX)
    return " ".join(p for p in parts if p)
