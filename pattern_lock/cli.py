"""パターン数を計算して標準出力へ表示するコマンドラインモジュール"""

from __future__ import annotations

import argparse
import logging
import time
from typing import List, Optional

from .constants import EXPECTED_LENGTH2_COUNT, MAX_PATTERN_LENGTH
from .enumerator import count_by_enumeration, enumerate_patterns
from .keypad_types import LengthCounts
from .report import format_length_line, format_total_line, pattern_to_ascii
from .step_engine import sweep, total_count, total_for_lengths

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """ログ出力の設定を行う関数

    ログは標準エラーへ出るため、標準出力の集計結果とは混ざらない。

    :param level: 表示するログの重要度。``logging.INFO`` などを指定
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def run(*, jobs: int = 1, cross_check: bool = False) -> LengthCounts:
    """全長さを計算し、1 行ずつ表示してから合計行を表示する"""

    start = time.perf_counter()
    counts: LengthCounts = {}
    for length, dist in sweep(MAX_PATTERN_LENGTH, jobs=jobs):
        count = total_count(dist)
        counts[length] = count
        print(format_length_line(length, count))

        if length == 2 and count != EXPECTED_LENGTH2_COUNT:
            raise RuntimeError(
                f"長さ 2 のパターン数が {count} です (期待値 {EXPECTED_LENGTH2_COUNT})"
            )

    print(format_total_line(total_for_lengths(counts)))
    logger.info("計算完了: %.3f 秒", time.perf_counter() - start)

    if cross_check:
        expected = count_by_enumeration(MAX_PATTERN_LENGTH)
        if expected != counts:
            logger.error("総当たりとの不一致: %s != %s", counts, expected)
            raise RuntimeError("総当たりによる検算と結果が一致しません")
        logger.info("総当たりによる検算と一致しました")

    return counts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="3x3 パターンロックのなぞり方の数を長さごとに数えます"
    )
    parser.add_argument(
        "--jobs",
        type=int,
        default=1,
        help="遷移計算の並列プロセス数 (1 なら通常実行)",
    )
    parser.add_argument(
        "--cross-check",
        action="store_true",
        help="総当たり列挙で結果を検算する",
    )
    parser.add_argument(
        "--example",
        type=int,
        choices=range(1, MAX_PATTERN_LENGTH + 1),
        metavar="LENGTH",
        help="指定した長さの最初のパターンを盤面で表示する",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="プロファイル結果を profile.prof に保存する",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="ログの表示レベル",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """引数を解釈して計算を実行する"""

    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    try:
        if args.profile:
            # cProfile でプロファイルを取得し profile.prof に書き出す
            import cProfile

            profiler = cProfile.Profile()
            profiler.runcall(run, jobs=args.jobs, cross_check=args.cross_check)
            profiler.dump_stats("profile.prof")
        else:
            run(jobs=args.jobs, cross_check=args.cross_check)
    finally:
        if args.jobs > 1:
            from .step_parallel import close_pool

            close_pool()

    if args.example is not None:
        first = next(enumerate_patterns(args.example))
        print(f"--- {args.example} point example ---")
        print(pattern_to_ascii(first))


if __name__ == "__main__":
    main()
