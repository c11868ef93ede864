"""集計結果やパターンを文字列へ整形するモジュール"""

from __future__ import annotations

from typing import List

from .constants import GRID_SIZE, POINT_COUNT, TOTAL_FROM_LENGTH, TOTAL_TO_LENGTH
from .keypad_types import LengthCounts, Pattern
from .step_engine import total_for_lengths
from .validator import validate_pattern


def format_length_line(length: int, count: int) -> str:
    return f"{length} point swiped: {count} possibilities"


def format_total_line(total: int) -> str:
    return f"total of possible combination: {total}"


def format_report(
    counts: LengthCounts,
    start: int = TOTAL_FROM_LENGTH,
    end: int = TOTAL_TO_LENGTH,
) -> str:
    """長さごとの行と合計行をまとめた出力文字列を作る"""

    lines = [format_length_line(k, counts[k]) for k in sorted(counts)]
    lines.append(format_total_line(total_for_lengths(counts, start, end)))
    return "\n".join(lines)


def pattern_to_ascii(points: Pattern) -> str:
    """パターンを 3x3 の盤面へ描く

    なぞった点には順番 (1 始まり) を、未訪問の点には ``.`` を表示する。
    """

    validate_pattern(points)
    cells = ["."] * POINT_COUNT
    for order, point in enumerate(points, start=1):
        cells[point] = str(order)

    lines: List[str] = []
    for r in range(GRID_SIZE):
        row = cells[r * GRID_SIZE : (r + 1) * GRID_SIZE]
        lines.append(" ".join(row))
    return "\n".join(lines)


__all__ = [
    "format_length_line",
    "format_total_line",
    "format_report",
    "pattern_to_ascii",
]
