from __future__ import annotations

from typing import List

from yt_ranker.models import RankedResult
from yt_ranker.services.reasons import recommendation_reason


class TablePrinter:
    def print(self, results: List[RankedResult], reasons_for: int = 3) -> None:
        if not results:
            print("No results.")
            return

        rows = []
        for i, r in enumerate(results, start=1):
            rows.append(
                [
                    str(i),
                    _truncate(r.title, 60),
                    f"{r.composite_score:,.2f}",
                    f"{r.engagement:,.2f}",
                    f"{r.sentiment:+.2f}",
                    "!" if r.suspicious else "",
                    r.url,
                ]
            )

        headers = ["#", "title", "score", "engagement", "sentiment", "sus", "url"]
        _print_table(headers, rows)

        for r in results[:reasons_for]:
            print("\n---")
            print(r.title)
            print(f"- {recommendation_reason(r)}")


def _truncate(text: str, max_len: int) -> str:
    t = (text or "").strip()
    return t if len(t) <= max_len else t[: max_len - 1] + "…"


def _print_table(headers: List[str], rows: List[List[str]]) -> None:
    # column width = widest of header and cells
    widths = [max(map(len, column)) for column in zip(headers, *rows)]

    def fmt_row(cells: List[str]) -> str:
        return " | ".join(cell.ljust(w) for cell, w in zip(cells, widths))

    lines = [fmt_row(headers), "-+-".join("-" * w for w in widths)]
    lines.extend(fmt_row(row) for row in rows)
    print("\n".join(lines))
