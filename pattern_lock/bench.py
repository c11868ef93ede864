import time

from . import step_engine


def run(n: int = 1, *, jobs: int = 1) -> float:
    """指定回数スイープを実行して平均時間を返す簡易ベンチマーク関数"""
    total = 0.0
    for _ in range(n):
        start = time.perf_counter()
        step_engine.count_patterns(jobs=jobs)
        total += time.perf_counter() - start
    avg = total / n if n else 0.0
    print(f"平均計算時間: {avg:.4f} 秒")
    return avg


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="パターン数計算ベンチマーク")
    parser.add_argument("-n", type=int, default=1, help="実行回数")
    parser.add_argument("--jobs", type=int, default=1, help="並列プロセス数")
    args = parser.parse_args()
    run(args.n, jobs=args.jobs)
