"""3x3 キーパッドの固定値をまとめたモジュール"""

from __future__ import annotations

from typing import Dict, Tuple

# キーパッドの並びは次の通り
# 0 1 2
# 3 4 5
# 6 7 8
GRID_SIZE = 3
POINT_COUNT = GRID_SIZE * GRID_SIZE

# 状態番号は ``last_point + 9 * visited_mask`` で表す
STATE_COUNT = POINT_COUNT * (1 << POINT_COUNT)

# 9 点すべてをなぞった時点で終わり。長さ 10 は存在しない
MAX_PATTERN_LENGTH = POINT_COUNT

# 合計を取る範囲 (5 点以上がロック解除パターンとして有効)
TOTAL_FROM_LENGTH = 5
TOTAL_TO_LENGTH = MAX_PATTERN_LENGTH

# 長さ 2 の回帰チェック用の値
EXPECTED_LENGTH2_COUNT = 56

# (始点, 終点) を直線で結ぶときに通過する中間点
_SKIP_LINES: Tuple[Tuple[int, int, int], ...] = (
    # 角同士
    (0, 2, 1),
    (0, 6, 3),
    (0, 8, 4),
    (2, 6, 4),
    (2, 8, 5),
    (6, 8, 7),
    # 辺の中点同士
    (1, 7, 4),
    (3, 5, 4),
)

SKIP_RULES: Dict[Tuple[int, int], int] = {}
for _a, _b, _middle in _SKIP_LINES:
    SKIP_RULES[(_a, _b)] = _middle
    SKIP_RULES[(_b, _a)] = _middle
del _a, _b, _middle


__all__ = [
    "GRID_SIZE",
    "POINT_COUNT",
    "STATE_COUNT",
    "MAX_PATTERN_LENGTH",
    "TOTAL_FROM_LENGTH",
    "TOTAL_TO_LENGTH",
    "EXPECTED_LENGTH2_COUNT",
    "SKIP_RULES",
]
