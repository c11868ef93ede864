"""パターン長ごとの到達数を動的計画法で求めるモジュール"""

from __future__ import annotations

import logging
import time
from typing import Iterator, Tuple

import numpy as np
from numba import njit

from .constants import (
    MAX_PATTERN_LENGTH,
    POINT_COUNT,
    STATE_COUNT,
    TOTAL_FROM_LENGTH,
    TOTAL_TO_LENGTH,
)
from .keypad_types import Distribution, LengthCounts
from .state import (
    SKIP_TABLE,
    PatternState,
    _try_extend_index,
    decode,
    encode_state,
    from_single_point,
    visited_count,
)

logger = logging.getLogger(__name__)

# マスク (0--511) ごとの立っているビット数
_POPCOUNT = np.array(
    [visited_count(PatternState(mask, 0)) for mask in range(1 << POINT_COUNT)],
    dtype=np.int64,
)


def _empty_distribution() -> Distribution:
    return np.zeros(STATE_COUNT, dtype=np.int64)


def initial_step() -> Distribution:
    """長さ 1 のパターン (9 点それぞれ 1 通り) を表す分布を返す"""

    dist = _empty_distribution()
    for point in range(POINT_COUNT):
        dist[encode_state(from_single_point(point))] = 1
    return dist


def total_count(dist: Distribution) -> int:
    """分布の合計 = その長さのパターン総数"""
    return int(dist.sum())


def validate(dist: Distribution, expected_length: int) -> None:
    """到達数が 0 でない状態のなぞり点数が ``expected_length`` か確認する

    不一致は符号化か遷移規則の実装ミスを意味するため、
    ``RuntimeError`` を送出して処理を打ち切る。
    """

    populated = np.flatnonzero(dist)
    counts = _POPCOUNT[populated // POINT_COUNT]
    bad = populated[counts != expected_length]
    if bad.size:
        logger.error(
            "長さ %d の分布に不正な状態 %d 件 (例: %s)",
            expected_length,
            bad.size,
            decode(int(bad[0])),
        )
        raise RuntimeError(
            f"長さ {expected_length} の分布に点数の合わない状態があります: {int(bad[0])}"
        )


@njit(cache=True)
def _extend_indices(
    source: np.ndarray,
    indices: np.ndarray,
    target: np.ndarray,
    skip_table: np.ndarray,
) -> None:
    """``indices`` で指定した状態から 1 点伸ばした到達数を ``target`` へ加算する"""

    for i in range(indices.shape[0]):
        index = indices[i]
        count = source[index]
        if count == 0:
            continue
        for candidate in range(9):
            nxt = _try_extend_index(index, candidate, skip_table)
            if nxt >= 0:
                target[nxt] += count


def next_step(dist: Distribution) -> Distribution:
    """長さ k の分布から長さ k+1 の分布を作る

    到達数 0 の状態は ``np.flatnonzero`` で事前に除外するため、
    計算量は到達可能な状態数 x 9 で済む。
    """

    target = _empty_distribution()
    _extend_indices(dist, np.flatnonzero(dist), target, SKIP_TABLE)
    return target


def _check_max_length(max_length: int) -> None:
    if not 1 <= max_length <= MAX_PATTERN_LENGTH:
        raise ValueError(
            f"max_length は 1 以上 {MAX_PATTERN_LENGTH} 以下を指定してください: {max_length}"
        )


def sweep(
    max_length: int = MAX_PATTERN_LENGTH, *, jobs: int = 1
) -> Iterator[Tuple[int, Distribution]]:
    """長さ 1 から ``max_length`` まで順に (長さ, 分布) を返すジェネレーター

    各段階で ``validate`` を行う。``jobs`` が 2 以上なら
    遷移計算を ``step_parallel`` のプールに任せる。
    """

    _check_max_length(max_length)
    if jobs < 1:
        raise ValueError(f"jobs は 1 以上を指定してください: {jobs}")
    if jobs > 1:
        from .step_parallel import next_step_parallel

        def advance(d: Distribution) -> Distribution:
            return next_step_parallel(d, jobs)

    else:
        advance = next_step

    dist = initial_step()
    for length in range(1, max_length + 1):
        if length > 1:
            start = time.perf_counter()
            dist = advance(dist)
            logger.debug(
                "長さ %d の遷移完了: %.4f 秒", length, time.perf_counter() - start
            )
        validate(dist, length)
        yield length, dist


def count_patterns(max_length: int = MAX_PATTERN_LENGTH, *, jobs: int = 1) -> LengthCounts:
    """パターン長ごとの総数を辞書で返す"""

    start = time.perf_counter()
    counts = {length: total_count(dist) for length, dist in sweep(max_length, jobs=jobs)}
    logger.info("全長さの計算完了: %.3f 秒", time.perf_counter() - start)
    return counts


def total_for_lengths(
    counts: LengthCounts,
    start: int = TOTAL_FROM_LENGTH,
    end: int = TOTAL_TO_LENGTH,
) -> int:
    """``start`` から ``end`` (両端含む) までのパターン数を合計する"""

    missing = [k for k in range(start, end + 1) if k not in counts]
    if missing:
        raise ValueError(f"パターン数が計算されていない長さがあります: {missing}")
    return sum(counts[k] for k in range(start, end + 1))


def _warmup_numba() -> None:
    """Numba コンパイルを事前に行うウォームアップ関数"""

    dummy = _empty_distribution()
    _extend_indices(dummy, np.zeros(0, dtype=np.int64), dummy, SKIP_TABLE)


_warmup_numba()


__all__ = [
    "initial_step",
    "total_count",
    "validate",
    "next_step",
    "sweep",
    "count_patterns",
    "total_for_lengths",
]
