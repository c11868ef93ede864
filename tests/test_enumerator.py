import pytest

from pattern_lock import enumerator, step_engine, validator


def test_enumeration_matches_dp() -> None:
    assert enumerator.count_by_enumeration() == step_engine.count_patterns()


def test_enumeration_stats() -> None:
    counts, stats = enumerator.count_by_enumeration(4, return_stats=True)
    assert counts == {1: 9, 2: 56, 3: 320, 4: 1624}
    assert stats["max_depth"] == 4
    assert stats["steps"] == sum(counts.values())


def test_enumerate_patterns_are_valid() -> None:
    patterns = list(enumerator.enumerate_patterns(3))
    assert len(patterns) == 320
    assert len(set(patterns)) == 320
    assert patterns[0] == (0, 1, 2)
    for p in patterns:
        validator.validate_pattern(p)


def test_enumerate_patterns_bad_length() -> None:
    with pytest.raises(ValueError):
        next(enumerator.enumerate_patterns(0))
