from pathlib import Path
import sys

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))
from pattern_lock import state, step_engine  # noqa: E402
from pattern_lock.constants import STATE_COUNT  # noqa: E402

KNOWN_COUNTS = {
    1: 9,
    2: 56,
    3: 320,
    4: 1624,
    5: 7152,
    6: 26016,
    7: 72912,
    8: 140704,
    9: 140704,
}


def test_initial_step() -> None:
    dist = step_engine.initial_step()
    assert dist.shape == (STATE_COUNT,)
    assert step_engine.total_count(dist) == 9
    step_engine.validate(dist, 1)


def test_length_two_count() -> None:
    dist = step_engine.next_step(step_engine.initial_step())
    assert step_engine.total_count(dist) == 56
    step_engine.validate(dist, 2)


def test_next_step_leaves_source_untouched() -> None:
    source = step_engine.initial_step()
    before = source.copy()
    step_engine.next_step(source)
    assert np.array_equal(source, before)


def test_count_patterns_known_values() -> None:
    counts = step_engine.count_patterns()
    assert counts == KNOWN_COUNTS
    assert step_engine.total_for_lengths(counts) == 387488


def test_count_patterns_deterministic() -> None:
    first = step_engine.count_patterns()
    second = step_engine.count_patterns()
    assert first == second


def test_sweep_partial_length() -> None:
    lengths = [length for length, _ in step_engine.sweep(3)]
    assert lengths == [1, 2, 3]


def test_sweep_rejects_bad_length() -> None:
    with pytest.raises(ValueError):
        list(step_engine.sweep(10))
    with pytest.raises(ValueError):
        list(step_engine.sweep(0))


def test_validate_detects_wrong_length() -> None:
    dist = step_engine.initial_step()
    with pytest.raises(RuntimeError):
        step_engine.validate(dist, 2)


def test_validate_detects_corrupted_entry() -> None:
    dist = step_engine.next_step(step_engine.initial_step())
    # 3 点なぞった状態を紛れ込ませる
    dist[4 + 9 * 0b111] = 1
    with pytest.raises(RuntimeError):
        step_engine.validate(dist, 2)


def test_total_for_lengths_missing() -> None:
    with pytest.raises(ValueError):
        step_engine.total_for_lengths({1: 9, 2: 56})


@pytest.mark.parametrize("jobs", [0, -3])
def test_count_patterns_rejects_non_positive_jobs(jobs: int) -> None:
    with pytest.raises(ValueError):
        step_engine.count_patterns(jobs=jobs)


def test_popcount_table_matches_visited_count() -> None:
    for mask in range(1 << 9):
        s = state.PatternState(visited_mask=mask, last_point=0)
        assert step_engine._POPCOUNT[mask] == state.visited_count(s)
