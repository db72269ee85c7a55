"""Unit coverage for catalogue lookups, plural selection and fallbacks."""

from __future__ import annotations

import pytest

from inputcatalog.backend.catalogue import (
    ContextNotFound,
    MessageNotFound,
    Translator,
    parse_catalogue,
)


@pytest.fixture()
def translator(sample_ts: str) -> Translator:
    return Translator.for_catalogue(parse_catalogue(sample_ts))


def test_translator_uses_catalogue_language(translator: Translator) -> None:
    assert translator.locale == "hr_HR"
    assert translator.plural_rule.categories == ("one", "few", "other")


def test_lookup_returns_translation(translator: Translator) -> None:
    assert translator.lookup("PanelHeader", "Cancel") == "Odustani"
    assert translator("PanelHeader", "Cancel") == "Odustani"


def test_unknown_source_falls_back_to_the_source_text(translator: Translator) -> None:
    assert translator.translate("PanelHeader", "NonExistent") == "NonExistent"


def test_unknown_context_falls_back_to_the_source_text(translator: Translator) -> None:
    assert translator.translate("MissingPanel", "Cancel") == "Cancel"


def test_strict_lookup_raises_typed_errors(translator: Translator) -> None:
    with pytest.raises(ContextNotFound):
        translator.lookup("MissingPanel", "Cancel")
    with pytest.raises(MessageNotFound):
        translator.lookup("PanelHeader", "NonExistent")


def test_fallback_still_renders_arguments(translator: Translator) -> None:
    assert translator.translate("PanelHeader", "Saved %1", "form") == "Saved form"


def test_empty_translation_falls_back_to_source(translator: Translator) -> None:
    assert translator.lookup("SyncStatus", "Untranslated %1") == "Untranslated %1"
    assert translator.translate("SyncStatus", "Untranslated %1", "x") == "Untranslated x"


def test_obsolete_messages_are_not_used(translator: Translator) -> None:
    assert translator.translate("SyncStatus", "Removed") == "Removed"


def test_disambiguation_selects_between_identical_sources(translator: Translator) -> None:
    assert translator.translate("SyncStatus", "Open", disambiguation="verb") == "Otvori"
    assert translator.translate("SyncStatus", "Open", disambiguation="adjective") == "Otvoren"
    assert translator.translate("SyncStatus", "Open") == "Open"


@pytest.mark.parametrize(
    ("count", "expected"),
    [
        (1, "prije 1 dan"),
        (21, "prije 21 dan"),
        (2, "prije 2 dana"),
        (5, "prije 5 dana"),
        (11, "prije 11 dana"),
    ],
)
def test_positional_plural_variants_follow_the_locale_rule(
    translator: Translator, count: int, expected: str
) -> None:
    assert translator.translate("SyncStatus", "%1 day ago", count, count=count) == expected


def test_plural_variants_without_count_use_the_first(translator: Translator) -> None:
    assert translator.lookup("SyncStatus", "%1 day ago") == "prije %1 dan"


@pytest.mark.parametrize(
    ("count", "expected"),
    [
        (1, "1 datoteka sinkronizirana"),
        (3, "3 datoteke sinkronizirane"),
        (5, "5 datoteka sinkronizirano"),
        (12, "12 datoteka sinkronizirano"),
        (24, "24 datoteke sinkronizirane"),
    ],
)
def test_numerus_forms_follow_croatian_categories(
    translator: Translator, count: int, expected: str
) -> None:
    assert translator.translate("SyncStatus", "%n file(s) synced", count=count) == expected


def test_english_rule_picks_singular_and_plural() -> None:
    english = parse_catalogue(
        '<TS version="2.1" language="en_GB"><context><name>InputUtils</name>'
        "<message><source>%1 day ago</source><translation>%1 day ago</translation></message>"
        "<message><source>%1 day ago</source><translation>%1 days ago</translation></message>"
        "</context></TS>"
    )
    translator = Translator.for_catalogue(english)

    assert translator.translate("InputUtils", "%1 day ago", 1, count=1) == "1 day ago"
    assert translator.translate("InputUtils", "%1 day ago", 5, count=5) == "5 days ago"
    assert translator.translate("InputUtils", "%1 day ago", 0, count=0) == "0 days ago"
