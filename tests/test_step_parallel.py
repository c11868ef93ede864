import numpy as np
import pytest

from pattern_lock import step_engine, step_parallel


@pytest.mark.slow
def test_parallel_matches_serial() -> None:
    dist = step_engine.initial_step()
    try:
        for _ in range(8):
            serial = step_engine.next_step(dist)
            parallel = step_parallel.next_step_parallel(dist, 2)
            assert np.array_equal(serial, parallel)
            dist = serial
    finally:
        step_parallel.close_pool()


@pytest.mark.slow
def test_count_patterns_with_jobs() -> None:
    try:
        assert step_engine.count_patterns(jobs=2) == step_engine.count_patterns()
    finally:
        step_parallel.close_pool()


def test_parallel_rejects_zero_jobs() -> None:
    with pytest.raises(ValueError):
        step_parallel.next_step_parallel(step_engine.initial_step(), 0)
