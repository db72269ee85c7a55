"""Unit coverage for the catalogue content checks."""

from __future__ import annotations

import pytest

from inputcatalog.backend.catalogue import parse_catalogue
from inputcatalog.backend.catalogue.validator import (
    main,
    validate_all_locales,
    validate_catalogue,
)


def test_shipped_catalogues_are_valid() -> None:
    results = validate_all_locales()

    assert set(results) == {"hr_HR"}
    assert all(not issues for issues in results.values()), results


def test_validator_flags_content_gaps() -> None:
    catalogue = parse_catalogue(
        '<TS version="2.1" language="hr_HR"><context><name>AccountPage</name>'
        "<message><source>Sign out</source><translation type=\"unfinished\">Odjava</translation></message>"
        "<message><source>My Account</source><translation></translation></message>"
        "<message><source>Using %1</source><translation>Iskorišteno %1/%2</translation></message>"
        '<message numerus="yes"><source>%n projects</source><translation>'
        "<numerusform>%n projekt</numerusform><numerusform>%n projekta</numerusform>"
        "</translation></message>"
        "</context></TS>"
    )

    issues = validate_catalogue(catalogue)

    assert any("'Sign out' translation is unfinished" in issue for issue in issues)
    assert any("'My Account' is untranslated" in issue for issue in issues)
    assert any("%2 absent from the source" in issue for issue in issues)
    assert any("2 plural form(s), expected 3" in issue for issue in issues)


def test_untranslated_messages_can_be_skipped() -> None:
    catalogue = parse_catalogue(
        '<TS language="hr_HR"><context><name>A</name>'
        "<message><source>x</source><translation></translation></message>"
        "</context></TS>"
    )

    assert validate_catalogue(catalogue, include_untranslated=False) == []


def test_main_reports_ok_for_shipped_catalogue(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--locale", "hr_HR"]) == 0
    assert "[hr_HR] OK" in capsys.readouterr().out


def test_main_fails_for_unknown_locale(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--locale", "de_DE"]) == 1
    assert "failed to load" in capsys.readouterr().out
