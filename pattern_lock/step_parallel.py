"""next_step を複数プロセスで分担する軽量プール実装"""

from __future__ import annotations

import logging
import multiprocessing as mp
from typing import List, Optional

import numpy as np

from .keypad_types import Distribution
from .state import SKIP_TABLE
from .step_engine import _empty_distribution, _extend_indices

logger = logging.getLogger(__name__)

# forkserver を使うことで不要なファイルディスクリプタを継承せず、
# プロセス数が多い場合でも安定して動作する
CTX = mp.get_context("forkserver")

# 使い回すプールを保持するグローバル変数
_pool: Optional[mp.pool.Pool] = None
_pool_jobs: Optional[int] = None


def _worker(args: tuple[Distribution, np.ndarray]) -> Distribution:
    """担当分の状態だけを遷移させた部分分布を返す"""

    source, indices = args
    target = _empty_distribution()
    _extend_indices(source, indices, target, SKIP_TABLE)
    return target


def _ensure_pool(jobs: int) -> mp.pool.Pool:
    """プールを生成し必要なら既存のものを再利用する"""
    global _pool, _pool_jobs
    if _pool is not None and _pool_jobs != jobs:
        close_pool()
    if _pool is None:
        _pool = CTX.Pool(processes=jobs)
        _pool_jobs = jobs
    return _pool


def close_pool() -> None:
    """生成済みプールを終了させるヘルパー"""
    global _pool, _pool_jobs
    if _pool is not None:
        _pool.terminate()
        _pool.join()
        _pool = None
        _pool_jobs = None


def next_step_parallel(dist: Distribution, jobs: int) -> Distribution:
    """到達済みの状態を ``jobs`` 個に分けて遷移させ、結果を合算する

    各ワーカーは独立した加算先を持つため排他制御は不要。
    結果は ``next_step`` と完全に一致する。
    """

    if jobs < 1:
        raise ValueError(f"jobs は 1 以上を指定してください: {jobs}")

    populated = np.flatnonzero(dist)
    chunks: List[np.ndarray] = [c for c in np.array_split(populated, jobs) if c.size]
    if not chunks:
        return _empty_distribution()

    pool = _ensure_pool(jobs)
    partials = pool.map(_worker, [(dist, chunk) for chunk in chunks])
    logger.debug("並列遷移: %d 状態を %d 分割", populated.size, len(chunks))

    target = _empty_distribution()
    for part in partials:
        target += part
    return target


__all__ = ["next_step_parallel", "close_pool"]
