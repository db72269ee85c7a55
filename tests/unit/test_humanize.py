"""Relative time strings rendered through the shipped Croatian catalogue."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from inputcatalog.backend.catalogue import get_translator
from inputcatalog.backend.catalogue.humanize import INVALID_DATETIME, format_elapsed

NOW = datetime(2024, 5, 10, 12, 0)


@pytest.fixture()
def croatian():
    return get_translator("hr")


@pytest.mark.parametrize(
    ("then", "expected"),
    [
        (NOW - timedelta(seconds=30), "upravo"),
        (NOW - timedelta(minutes=1), "prije 1 minute"),
        (NOW - timedelta(minutes=5), "prije 5 minuta"),
        (NOW - timedelta(hours=3), "prije 3 sati"),
        (datetime(2024, 5, 9, 10, 0), "prije 1 dana"),
        (datetime(2024, 5, 8, 12, 0), "prije 2 dana"),
        (datetime(2024, 4, 20, 12, 0), "prije 2 tjedana"),
        (datetime(2024, 2, 10, 12, 0), "prije 2 mjeseci"),
        (datetime(2023, 1, 1, 12, 0), "prije 1 godine"),
    ],
)
def test_format_elapsed_in_croatian(croatian, then: datetime, expected: str) -> None:
    assert format_elapsed(then, croatian, now=NOW) == expected


def test_midnight_crossing_counts_minutes(croatian) -> None:
    then = datetime(2024, 5, 9, 23, 55)
    now = datetime(2024, 5, 10, 0, 5)

    assert format_elapsed(then, croatian, now=now) == "prije 10 minuta"


def test_future_timestamps_are_invalid(croatian) -> None:
    assert format_elapsed(NOW + timedelta(days=2), croatian, now=NOW) == INVALID_DATETIME
    assert format_elapsed(NOW + timedelta(minutes=2), croatian, now=NOW) == INVALID_DATETIME


def test_source_language_uses_english_grammar() -> None:
    english = get_translator("en")

    assert format_elapsed(NOW - timedelta(minutes=1), english, now=NOW) == "1 minute ago"
    assert format_elapsed(NOW - timedelta(days=3), english, now=NOW) == "3 days ago"


def test_aware_timestamps_are_compared_in_the_same_zone(croatian) -> None:
    then = datetime(2024, 5, 10, 11, 0, tzinfo=timezone.utc)
    now = datetime(2024, 5, 10, 13, 30, tzinfo=timezone(timedelta(hours=2)))

    assert format_elapsed(then, croatian, now=now) == "prije 30 minuta"
