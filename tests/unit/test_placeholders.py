"""Unit coverage for positional placeholder rendering."""

from __future__ import annotations

import logging

import pytest

from inputcatalog.backend.catalogue import PlaceholderMismatch, placeholders_in, render

PLACEHOLDER_LOGGER = "inputcatalog.backend.catalogue.placeholders"


def test_render_substitutes_arguments_in_order() -> None:
    assert render("Your next bill will be for %1 on %2", ["€5", "1.6."]) == (
        "Your next bill will be for €5 on 1.6."
    )


def test_render_repeats_the_same_argument_for_every_occurrence() -> None:
    assert render("%1 / %2 / %1", ["a", "b"]) == "a / b / a"


def test_render_allows_reordered_placeholders() -> None:
    assert render("%2 prije %1", ["x", "y"]) == "y prije x"


def test_render_without_arguments_leaves_text_untouched() -> None:
    assert render("Using %1 / %2") == "Using %1 / %2"


def test_render_converts_arguments_to_text() -> None:
    assert render("%1 minutes ago", [5]) == "5 minutes ago"


def test_missing_argument_renders_empty_and_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger=PLACEHOLDER_LOGGER):
        rendered = render("Value %1 could not be converted for field %2", ["7"])

    assert rendered == "Value 7 could not be converted for field "
    assert any("%2" in record.getMessage() for record in caplog.records)


def test_unused_arguments_do_not_block_rendering() -> None:
    assert render("%1 only", ["a", "b", "c"]) == "a only"


def test_two_digit_placeholder_needs_enough_arguments() -> None:
    assert render("%10", ["x"]) == "x0"
    assert render("%10", list("abcdefghij")) == "j"


def test_unfillable_two_digit_placeholder_renders_empty(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger=PLACEHOLDER_LOGGER):
        assert render("%12", (), count=3) == ""
        assert render("[%34]", ["a", "b"]) == "[]"

    assert any("%12" in record.getMessage() for record in caplog.records)


def test_count_fills_numerus_placeholder() -> None:
    assert render("%n files", count=4) == "4 files"
    assert render("%n of %1", ["10"], count=3) == "3 of 10"


def test_localised_placeholder_alias() -> None:
    assert render("%L1 m", ["12,5"]) == "12,5 m"


def test_percent_signs_without_digits_are_literal() -> None:
    assert render("100% of %1", ["x"]) == "100% of x"


def test_placeholders_in_reports_indexes() -> None:
    assert placeholders_in("%1billing details%2 and %L3") == {1, 2, 3}
    assert placeholders_in("no placeholders here") == set()


def test_placeholder_mismatch_describes_the_gap() -> None:
    mismatch = PlaceholderMismatch("a %3", missing=[3], unused=[1])

    assert mismatch.missing == (3,)
    assert mismatch.unused == (1,)
    assert "%3" in str(mismatch)
