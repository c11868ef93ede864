"""状態遷移やパターン検証の関数を公開するパッケージ用モジュール"""

from importlib import import_module
from typing import Any

__all__ = [
    "count_patterns",
    "total_for_lengths",
    "sweep",
    "next_step_parallel",
    "validate_pattern",
    "is_valid_pattern",
    "count_by_enumeration",
    "enumerate_patterns",
    "format_report",
    "pattern_to_ascii",
]


def __getattr__(name: str) -> Any:
    """必要になったタイミングで対象モジュールを読み込む

    Numba のコンパイルは各モジュールの読み込み時に走るため、
    パッケージ本体の import では行わない。
    """

    if name in {"count_patterns", "total_for_lengths", "sweep"}:
        module = import_module(".step_engine", __name__)
        return getattr(module, name)

    if name == "next_step_parallel":
        module = import_module(".step_parallel", __name__)
        return getattr(module, name)

    if name in {"validate_pattern", "is_valid_pattern"}:
        module = import_module(".validator", __name__)
        return getattr(module, name)

    if name in {"count_by_enumeration", "enumerate_patterns"}:
        module = import_module(".enumerator", __name__)
        return getattr(module, name)

    if name in {"format_report", "pattern_to_ascii"}:
        module = import_module(".report", __name__)
        return getattr(module, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name}")
