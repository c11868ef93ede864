"""共通で使う型エイリアスをまとめたモジュール

Python 標準ライブラリの ``types`` モジュールと名前が衝突しないよう、
このファイル名を ``keypad_types`` としている。
"""

from typing import Dict, Sequence

import numpy as np

# キーパッド上の 1 点 (0--8)
Point = int

# 実際になぞった点の並び
Pattern = Sequence[Point]

# 状態番号ごとの到達数を保持する 1 次元配列
Distribution = np.ndarray

# パターン長 -> パターン数
LengthCounts = Dict[int, int]

__all__ = ["Point", "Pattern", "Distribution", "LengthCounts"]
