"""Plural rule loader wrapping the shared schema models."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Sequence

import yaml
from pydantic import ValidationError

from .schema import (
    PLURAL_CATEGORIES,
    ConfigurationError,
    ImmutableModel,
    PluralCondition,
    PluralRule,
    PluralRuleTable,
)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
RULES_FILE = CONFIG_DIRECTORY / "plural_rules.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


@lru_cache(maxsize=1)
def load_plural_rules() -> PluralRuleTable:
    """Load and cache the plural rule table."""

    if not RULES_FILE.exists():
        raise FileNotFoundError(f"Plural rule table not found: {RULES_FILE}")

    raw_rules = _load_yaml(RULES_FILE)

    try:
        return PluralRuleTable.model_validate(raw_rules)
    except ValidationError as error:
        raise ConfigurationError(f"Plural rule validation failed: {error}") from error


def language_of(locale: str | None) -> str | None:
    """Return the lowercase language part of a locale tag (``hr_HR`` -> ``hr``)."""

    if not locale:
        return None
    language = locale.replace("-", "_").split("_")[0].strip().lower()
    return language or None


@lru_cache(maxsize=64)
def plural_rules_for(locale: str | None) -> PluralRule:
    """Return the plural rule for a locale, using the table default when unknown."""

    return load_plural_rules().rule_for(language_of(locale))


def supported_languages() -> Sequence[str]:
    """Return the language codes that carry an explicit plural rule."""

    return tuple(sorted(load_plural_rules().languages))


__all__ = [
    "CONFIG_DIRECTORY",
    "ConfigurationError",
    "ImmutableModel",
    "PLURAL_CATEGORIES",
    "PluralCondition",
    "PluralRule",
    "PluralRuleTable",
    "RULES_FILE",
    "language_of",
    "load_plural_rules",
    "plural_rules_for",
    "supported_languages",
]
