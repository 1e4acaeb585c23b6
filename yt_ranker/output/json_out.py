from __future__ import annotations

import json
from typing import List

from yt_ranker.models import RankedResult


class JsonPrinter:
    def print(self, results: List[RankedResult]) -> None:
        payload = [r.to_dict() for r in results]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
