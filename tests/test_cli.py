import pytest

from pattern_lock import cli, report

EXPECTED_OUTPUT = """\
1 point swiped: 9 possibilities
2 point swiped: 56 possibilities
3 point swiped: 320 possibilities
4 point swiped: 1624 possibilities
5 point swiped: 7152 possibilities
6 point swiped: 26016 possibilities
7 point swiped: 72912 possibilities
8 point swiped: 140704 possibilities
9 point swiped: 140704 possibilities
total of possible combination: 387488
"""


def test_main_output(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main([])
    assert capsys.readouterr().out == EXPECTED_OUTPUT


def test_main_cross_check(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["--cross-check"])
    assert capsys.readouterr().out == EXPECTED_OUTPUT


def test_main_example(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["--example", "3"])
    out = capsys.readouterr().out
    assert out.startswith(EXPECTED_OUTPUT)
    assert out.endswith("--- 3 point example ---\n1 2 3\n. . .\n. . .\n")


def test_format_report_matches_main() -> None:
    counts = cli.run()
    assert report.format_report(counts) + "\n" == EXPECTED_OUTPUT


def test_pattern_to_ascii() -> None:
    art = report.pattern_to_ascii([4, 0, 8])
    assert art.splitlines() == ["2 . .", ". 1 .", ". . 3"]
    with pytest.raises(ValueError):
        report.pattern_to_ascii([0, 2])


def test_main_aborts_on_length_two_mismatch(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(cli, "EXPECTED_LENGTH2_COUNT", 57)
    with pytest.raises(RuntimeError):
        cli.main([])
    # 長さ 2 の行まで表示した時点で止まる
    assert capsys.readouterr().out.splitlines() == EXPECTED_OUTPUT.splitlines()[:2]


def test_main_aborts_on_cross_check_mismatch(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "count_by_enumeration", lambda *_: {})
    with pytest.raises(RuntimeError):
        cli.main(["--cross-check"])


@pytest.mark.parametrize("jobs", ["0", "-3"])
def test_main_rejects_non_positive_jobs(jobs: str) -> None:
    with pytest.raises(ValueError):
        cli.main(["--jobs", jobs])
