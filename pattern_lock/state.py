"""なぞり途中の状態と状態番号を相互変換するモジュール

状態は「なぞり済みの点集合」と「最後になぞった点」の組で表します。
点集合は 9 ビットのマスクで持ち、状態番号は
``last_point + 9 * visited_mask`` という単純な式で求めます。
到達し得ない組み合わせにも番号が割り振られますが、
変換が四則演算だけで済むことを優先しています。

``try_extend`` は遷移規則の基準となる実装で、
Numba 版の ``_try_extend_index`` は同じ規則を状態番号のまま適用します。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
from numba import njit

from .constants import POINT_COUNT, SKIP_RULES, STATE_COUNT
from .keypad_types import Point


@dataclass(frozen=True)
class PatternState:
    """なぞり途中のパターンを抽象化したデータクラス"""

    visited_mask: int
    last_point: Point


def _check_point(point: int) -> None:
    if not 0 <= point < POINT_COUNT:
        raise ValueError(f"点番号が範囲外です: {point}")


def encode(visited_mask: int, last_point: Point) -> int:
    """(visited_mask, last_point) を状態番号へ変換する"""

    _check_point(last_point)
    if not 0 <= visited_mask < (1 << POINT_COUNT):
        raise ValueError(f"マスクが範囲外です: {visited_mask}")
    return last_point + POINT_COUNT * visited_mask


def encode_state(state: PatternState) -> int:
    """``PatternState`` を状態番号へ変換する"""
    return encode(state.visited_mask, state.last_point)


def decode(index: int) -> PatternState:
    """状態番号を ``PatternState`` へ戻す"""

    if not 0 <= index < STATE_COUNT:
        raise ValueError(f"状態番号が範囲外です: {index}")
    return PatternState(visited_mask=index // POINT_COUNT, last_point=index % POINT_COUNT)


def is_visited(state: PatternState, point: Point) -> bool:
    """``point`` がなぞり済みなら True"""
    _check_point(point)
    return (state.visited_mask >> point) & 1 == 1


def visited_count(state: PatternState) -> int:
    """なぞり済みの点数。整合性チェック専用"""
    return bin(state.visited_mask).count("1")


def from_single_point(point: Point) -> PatternState:
    """1 点だけなぞった状態を作る"""
    _check_point(point)
    return PatternState(visited_mask=1 << point, last_point=point)


def try_extend(state: PatternState, candidate: Point) -> Optional[PatternState]:
    """``candidate`` へ線を伸ばせるなら新しい状態を返す

    次のどちらかに当てはまる場合は ``None`` を返します。

    * ``candidate`` が既になぞり済み
    * 直線上に未訪問の中間点がある (例: 0 -> 2 で 1 が未訪問)

    中心 (4) からの移動には中間点が存在しないため常に許可されます。
    """

    if is_visited(state, candidate):
        return None

    middle = SKIP_RULES.get((state.last_point, candidate))
    if middle is not None and not is_visited(state, middle):
        return None

    return PatternState(
        visited_mask=state.visited_mask | (1 << candidate),
        last_point=candidate,
    )


def _build_skip_table() -> np.ndarray:
    """SKIP_RULES を Numba から参照できる 9x9 配列へ変換する"""

    # -1 は中間点なし (制約なし) を表す
    table = np.full((POINT_COUNT, POINT_COUNT), -1, dtype=np.int64)
    for (src, dst), middle in SKIP_RULES.items():
        table[src, dst] = middle
    return table


SKIP_TABLE: np.ndarray = _build_skip_table()


@njit(cache=True)
def _try_extend_index(index: int, candidate: int, skip_table: np.ndarray) -> int:
    """状態番号のまま ``try_extend`` を行う Numba 版。失敗時は -1"""

    mask = index // 9
    last = index % 9
    if (mask >> candidate) & 1:
        return -1
    middle = skip_table[last, candidate]
    if middle >= 0 and ((mask >> middle) & 1) == 0:
        return -1
    return candidate + 9 * (mask | (1 << candidate))


def _warmup_numba() -> None:
    """Numba コンパイルを事前に行うウォームアップ関数"""

    _try_extend_index(POINT_COUNT * 1, 1, SKIP_TABLE)


_warmup_numba()


__all__ = [
    "PatternState",
    "encode",
    "encode_state",
    "decode",
    "is_visited",
    "visited_count",
    "from_single_point",
    "try_extend",
    "SKIP_TABLE",
]
