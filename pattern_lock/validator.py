"""実際のなぞり順がロック規則を満たすか確認するモジュール

中間点の判定は ``SKIP_RULES`` を使わず、格子座標の中点から
幾何的に求める。状態遷移表の独立した検算にも利用する。
"""

from __future__ import annotations

from typing import Optional, Tuple

from .constants import GRID_SIZE, MAX_PATTERN_LENGTH, POINT_COUNT
from .keypad_types import Pattern, Point


def point_to_coord(point: Point) -> Tuple[int, int]:
    """点番号を (行, 列) に変換する"""
    if not 0 <= point < POINT_COUNT:
        raise ValueError(f"点番号が範囲外です: {point}")
    return divmod(point, GRID_SIZE)


def _midpoint(a: Point, b: Point) -> Optional[Point]:
    """a と b を結ぶ線分がちょうど通過する格子点を返す

    行差・列差がともに偶数のときだけ中点が格子上に乗る。
    """

    ar, ac = point_to_coord(a)
    br, bc = point_to_coord(b)
    if a == b or (ar - br) % 2 or (ac - bc) % 2:
        return None
    return ((ar + br) // 2) * GRID_SIZE + (ac + bc) // 2


def validate_pattern(points: Pattern) -> None:
    """なぞり順が規則を満たさなければ ``ValueError`` を送出する"""

    if len(points) == 0:
        raise ValueError("パターンが空です")
    if len(points) > MAX_PATTERN_LENGTH:
        raise ValueError(f"パターンが長すぎます: {len(points)} 点")

    visited: set[int] = set()
    prev: Optional[int] = None
    for point in points:
        point_to_coord(point)
        if point in visited:
            raise ValueError(f"同じ点を 2 回なぞっています: {point}")
        if prev is not None:
            middle = _midpoint(prev, point)
            if middle is not None and middle not in visited:
                raise ValueError(
                    f"{prev} -> {point} が未訪問の点 {middle} を飛び越えています"
                )
        visited.add(point)
        prev = point


def is_valid_pattern(points: Pattern) -> bool:
    try:
        validate_pattern(points)
    except ValueError:
        return False
    return True


__all__ = ["validate_pattern", "is_valid_pattern", "point_to_coord", "_midpoint"]
