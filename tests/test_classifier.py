from __future__ import annotations

import pytest

from log_trend.core import ClassifiedEntry, Level, LineClassifier, classify_lines


@pytest.mark.parametrize(
    "line, expected",
    [
        ("2022-07-15 10:00:00 INFO started", Level.INFORMATION),
        ("2022-07-15 [Information] started", Level.INFORMATION),
        ("2022-07-15 WARN disk almost full", Level.WARNING),
        ("2022-07-15 WARNING disk almost full", Level.WARNING),
        ("2022-07-15 Warning: disk almost full", Level.WARNING),
        ("2022-07-15 ERROR failed", Level.ERROR),
        ("2022-07-15 Error: failed", Level.ERROR),
    ],
)
def test_classify_picks_level_token(line: str, expected: Level) -> None:
    entry = LineClassifier().classify(line)

    assert entry == ClassifiedEntry(month_key="2022-07", level=expected)


def test_error_wins_over_warning_and_information() -> None:
    classifier = LineClassifier()

    assert classifier.classify("2022-07-15 WARN retry after ERROR").level is Level.ERROR
    assert classifier.classify("2022-07-15 INFO Warning suppressed").level is Level.WARNING


def test_level_tokens_are_case_sensitive() -> None:
    classifier = LineClassifier()

    assert classifier.classify("2022-07-15 error in lower case") is None
    assert classifier.classify("2022-07-15 warn in lower case") is None
    assert classifier.classify("2022-07-15 info in lower case") is None
    # "Errors" still contains "Error"
    assert classifier.classify("2022-07-15 Errors: 0").level is Level.ERROR


@pytest.mark.parametrize(
    "line",
    [
        "",
        "2022-07",
        "not a date INFO started",
        "INFO 2022-07-15 date comes too late",
        "2022-13-01 ERROR month thirteen",
        "2022-02-30 ERROR no such day",
        "2022-07-15 DEBUG no known level",
    ],
)
def test_unclassifiable_lines_return_none(line: str) -> None:
    assert LineClassifier().classify(line) is None


def test_only_first_ten_characters_are_parsed_as_date() -> None:
    classifier = LineClassifier()

    assert classifier.parse_date("2022-07-15T10:00:00Z ERROR").isoformat() == "2022-07-15"
    assert classifier.parse_date("  2022-07-1 ERROR") is None


@pytest.mark.parametrize(
    "line, month_key",
    [
        ("2022/08/01 INFO x", "2022-08"),
        ("08/01/2022 INFO x", "2022-08"),
        ("01.09.2022 INFO x", "2022-09"),
        ("20221105  INFO x", "2022-11"),
        ("1999-01-31 INFO x", "1999-01"),
    ],
)
def test_default_date_formats(line: str, month_key: str) -> None:
    assert LineClassifier().classify(line).month_key == month_key


def test_custom_date_formats_replace_defaults() -> None:
    classifier = LineClassifier(date_formats=["%d|%m|%Y"])

    assert classifier.classify("15|07|2022 ERROR x").month_key == "2022-07"
    assert classifier.classify("2022-07-15 ERROR x") is None


def test_classify_lines_is_lazy_and_skips_unclassifiable() -> None:
    lines = iter(
        [
            "2022-07-01 INFO a",
            "garbage",
            "2022-08-01 ERROR b",
        ]
    )

    entries = classify_lines(lines)

    assert next(entries) == ClassifiedEntry("2022-07", Level.INFORMATION)
    assert next(entries) == ClassifiedEntry("2022-08", Level.ERROR)
    with pytest.raises(StopIteration):
        next(entries)
