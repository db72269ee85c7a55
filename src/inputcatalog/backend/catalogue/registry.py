"""Discovery and caching of the shipped ``.ts`` catalogues."""

from __future__ import annotations

import logging
import os
from functools import cache
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

from .errors import MalformedCatalogue
from .models import Catalogue
from .translator import Translator
from .ts_format import parse_catalogue

_LOGGER = logging.getLogger(__name__)

_BASE_LOCALE = "en"
_TRANSLATIONS_PACKAGE = "inputcatalog.translations"
_FILE_PREFIX = "input_"
_FILE_SUFFIX = ".ts"

TRANSLATIONS_DIR_ENV = "INPUTCATALOG_TRANSLATIONS_DIR"
DEFAULT_LOCALE_ENV = "INPUTCATALOG_DEFAULT_LOCALE"


def base_locale() -> str:
    """Locale of the source strings; it needs no catalogue file."""

    return _BASE_LOCALE


def _translations_root() -> Traversable:
    override = os.getenv(TRANSLATIONS_DIR_ENV)
    if override:
        directory = Path(override).expanduser()
        if directory.is_dir():
            return directory
        _LOGGER.warning("Ignoring invalid value for %s: %s", TRANSLATIONS_DIR_ENV, override)
    return resources.files(_TRANSLATIONS_PACKAGE)


def _locale_from_filename(name: str) -> str | None:
    if not (name.startswith(_FILE_PREFIX) and name.endswith(_FILE_SUFFIX)):
        return None
    return name[len(_FILE_PREFIX) : -len(_FILE_SUFFIX)] or None


@cache
def _catalogue_resources() -> dict[str, Traversable]:
    root = _translations_root()
    found: dict[str, Traversable] = {}
    for entry in root.iterdir():
        locale = _locale_from_filename(entry.name)
        if locale and entry.is_file():
            found[locale] = entry
    return found


def available_locales() -> tuple[str, ...]:
    """Return the base locale followed by every locale with a catalogue file."""

    locales = sorted(locale for locale in _catalogue_resources() if locale != _BASE_LOCALE)
    return (_BASE_LOCALE, *locales)


def _default_locale() -> str:
    configured = os.getenv(DEFAULT_LOCALE_ENV)
    if not configured:
        return _BASE_LOCALE
    resolved = _match_locale(configured)
    if resolved is None:
        _LOGGER.warning("Ignoring invalid value for %s: %s", DEFAULT_LOCALE_ENV, configured)
        return _BASE_LOCALE
    return resolved


def _match_locale(hint: str) -> str | None:
    candidate = hint.strip().replace("-", "_")
    if not candidate:
        return None
    locales = available_locales()
    by_lower = {locale.lower(): locale for locale in locales}
    if candidate.lower() in by_lower:
        return by_lower[candidate.lower()]
    language = candidate.split("_")[0].lower()
    for locale in locales:
        if locale.split("_")[0].lower() == language:
            return locale
    return None


def resolve_locale(hint: str) -> str | None:
    """Return the catalogue key matching ``hint``, or ``None`` when nothing matches."""

    return _match_locale(hint)


def normalise_locale(locale: str | None) -> str:
    """Normalise a requested locale (``hr``, ``hr-HR``, ``HR_hr``) to a catalogue key."""

    if not locale:
        return _default_locale()
    return _match_locale(locale) or _BASE_LOCALE


@cache
def load_locale_catalogue(locale: str) -> Catalogue:
    """Load and cache the catalogue for an exact locale key.

    The base locale resolves to an empty catalogue, so every lookup falls back
    to the source strings. Raises ``MalformedCatalogue`` for broken files and
    ``LookupError`` for locales without a file.
    """

    if locale == _BASE_LOCALE and _BASE_LOCALE not in _catalogue_resources():
        return Catalogue(language=_BASE_LOCALE)

    resource = _catalogue_resources().get(locale)
    if resource is None:
        raise LookupError(f"No catalogue available for locale {locale!r}")

    catalogue = parse_catalogue(resource.read_bytes(), origin=resource.name)
    _LOGGER.info(
        "Loaded %s catalogue: %d contexts, %d messages",
        locale,
        len(catalogue.contexts),
        catalogue.message_count,
    )
    return catalogue


def get_translator(locale: str | None = None) -> Translator:
    """Return a translator for the requested locale.

    A malformed catalogue is logged and replaced by the base locale, which
    renders source strings.
    """

    normalized = normalise_locale(locale)
    try:
        catalogue = load_locale_catalogue(normalized)
    except MalformedCatalogue as error:
        _LOGGER.error("Falling back to %s, catalogue %s is malformed: %s", _BASE_LOCALE, normalized, error)
        normalized = _BASE_LOCALE
        catalogue = load_locale_catalogue(_BASE_LOCALE)

    return Translator.for_catalogue(catalogue, normalized)


def catalogue_payload(catalogue: Catalogue) -> list[dict[str, Any]]:
    """Return a JSON-friendly view of the catalogue contexts."""

    contexts: list[dict[str, Any]] = []
    for context in catalogue.contexts:
        messages = []
        for message in context.messages:
            if not message.is_live:
                continue
            entry: dict[str, Any] = {"source": message.source}
            if message.disambiguation:
                entry["disambiguation"] = message.disambiguation
            if message.numerus:
                entry["forms"] = list(message.numerus_forms)
            else:
                entry["translation"] = message.translation
            if message.state.value != "finished":
                entry["state"] = message.state.value
            messages.append(entry)
        contexts.append({"name": context.name, "messages": messages})
    return contexts


def translations_payload(translator: Translator) -> dict[str, Any]:
    """Describe the catalogue behind ``translator`` for API consumers."""

    return {
        "locale": translator.locale,
        "available_locales": list(available_locales()),
        "plural_categories": list(translator.plural_rule.categories),
        "contexts": catalogue_payload(translator.catalogue),
        "fallback": {"locale": _BASE_LOCALE},
    }


def load_translations(locale: str | None = None) -> dict[str, Any]:
    """Expose a locale's catalogue for API consumers."""

    return translations_payload(get_translator(locale))


def reset_catalogue_cache() -> None:
    """Forget discovered files and loaded catalogues (after changing the directory)."""

    _catalogue_resources.cache_clear()
    load_locale_catalogue.cache_clear()


__all__ = [
    "DEFAULT_LOCALE_ENV",
    "TRANSLATIONS_DIR_ENV",
    "available_locales",
    "base_locale",
    "catalogue_payload",
    "get_translator",
    "load_locale_catalogue",
    "load_translations",
    "normalise_locale",
    "reset_catalogue_cache",
    "resolve_locale",
    "translations_payload",
]
