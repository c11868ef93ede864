# なぞり順を総当たりで列挙する検算用モジュール

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from .constants import MAX_PATTERN_LENGTH, POINT_COUNT
from .validator import _midpoint


def _can_move(prev: int, point: int, visited: List[bool]) -> bool:
    if visited[point]:
        return False
    middle = _midpoint(prev, point)
    return middle is None or visited[middle]


def enumerate_patterns(length: int) -> Iterator[Tuple[int, ...]]:
    """長さ ``length`` の有効なパターンを辞書順に列挙する"""

    if not 1 <= length <= MAX_PATTERN_LENGTH:
        raise ValueError(
            f"length は 1 以上 {MAX_PATTERN_LENGTH} 以下を指定してください: {length}"
        )

    visited = [False] * POINT_COUNT
    path: List[int] = []

    def dfs() -> Iterator[Tuple[int, ...]]:
        if len(path) == length:
            yield tuple(path)
            return
        for point in range(POINT_COUNT):
            if path and not _can_move(path[-1], point, visited):
                continue
            visited[point] = True
            path.append(point)
            yield from dfs()
            path.pop()
            visited[point] = False

    yield from dfs()


def count_by_enumeration(
    max_length: int = MAX_PATTERN_LENGTH,
    *,
    return_stats: bool = False,
) -> Dict[int, int] | tuple[Dict[int, int], Dict[str, int]]:
    """深さ優先探索で長さごとのパターン数を数える

    ``count_patterns`` とは独立した実装なので検算に使う。
    9 点全列挙でも 40 万通り程度のため数秒で終わる。
    """

    if not 1 <= max_length <= MAX_PATTERN_LENGTH:
        raise ValueError(
            f"max_length は 1 以上 {MAX_PATTERN_LENGTH} 以下を指定してください: {max_length}"
        )

    counts = {length: 0 for length in range(1, max_length + 1)}
    visited = [False] * POINT_COUNT
    steps = 0
    max_depth = 0

    def dfs(prev: int, depth: int) -> None:
        nonlocal steps, max_depth
        steps += 1
        if depth > max_depth:
            max_depth = depth
        counts[depth] += 1
        if depth == max_length:
            return
        for point in range(POINT_COUNT):
            if not _can_move(prev, point, visited):
                continue
            visited[point] = True
            dfs(point, depth + 1)
            visited[point] = False

    for start in range(POINT_COUNT):
        visited[start] = True
        dfs(start, 1)
        visited[start] = False

    if return_stats:
        return counts, {"steps": steps, "max_depth": max_depth}
    return counts


__all__ = ["enumerate_patterns", "count_by_enumeration"]
