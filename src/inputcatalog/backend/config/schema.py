"""Pydantic models describing the plural rule table."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# CLDR plural categories in their canonical order.
PLURAL_CATEGORIES = ("zero", "one", "two", "few", "many", "other")


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


def _parse_range(value: Any) -> tuple[int, int]:
    if isinstance(value, bool):
        raise ConfigurationError("Plural rule values must be integers or 'a..b' ranges")
    if isinstance(value, int):
        return (value, value)
    if isinstance(value, str):
        lower, separator, upper = value.partition("..")
        try:
            if not separator:
                number = int(lower)
                return (number, number)
            return (int(lower), int(upper))
        except ValueError as exc:
            raise ConfigurationError(f"Invalid plural rule range: {value!r}") from exc
    raise ConfigurationError("Plural rule values must be integers or 'a..b' ranges")


class PluralCondition(ImmutableModel):
    """One operand test, such as ``n % 10 in 2..4``."""

    modulo: int | None = Field(default=None, alias="mod")
    in_ranges: tuple[tuple[int, int], ...] = Field(default=(), alias="is")
    not_in_ranges: tuple[tuple[int, int], ...] = Field(default=(), alias="not")

    @field_validator("in_ranges", "not_in_ranges", mode="before")
    @classmethod
    def _coerce_ranges(cls, value: Any) -> tuple[tuple[int, int], ...]:
        if value is None:
            return ()
        if isinstance(value, (int, str)):
            value = [value]
        return tuple(_parse_range(item) for item in value)

    @model_validator(mode="after")
    def _validate_condition(self) -> PluralCondition:
        if bool(self.in_ranges) == bool(self.not_in_ranges):
            raise ConfigurationError(
                "Plural conditions must define exactly one of 'is' or 'not'"
            )
        if self.modulo is not None and self.modulo <= 0:
            raise ConfigurationError("Plural condition modulo must be positive")
        for lower, upper in (*self.in_ranges, *self.not_in_ranges):
            if lower > upper:
                raise ConfigurationError(
                    f"Plural condition range {lower}..{upper} is inverted"
                )
        return self

    def matches(self, number: int) -> bool:
        value = number % self.modulo if self.modulo else number
        if self.in_ranges:
            return any(lower <= value <= upper for lower, upper in self.in_ranges)
        return not any(lower <= value <= upper for lower, upper in self.not_in_ranges)


class PluralRule(ImmutableModel):
    """Ordered plural categories for one language and the tests selecting them.

    The last category is the fallthrough: it is chosen when no other category
    matches and never carries conditions of its own. Each non-final category
    maps to a list of alternatives; an alternative matches when all of its
    conditions match.
    """

    categories: tuple[str, ...]
    rules: Mapping[str, tuple[tuple[PluralCondition, ...], ...]] = Field(
        default_factory=dict
    )

    @field_validator("categories", mode="before")
    @classmethod
    def _coerce_categories(cls, value: Any) -> tuple[str, ...]:
        if isinstance(value, str):
            return (value,)
        if value is None:
            return ()
        return tuple(str(item) for item in value)

    @model_validator(mode="after")
    def _validate_rule(self) -> PluralRule:
        if not self.categories:
            raise ConfigurationError("Plural rules require at least one category")
        unknown = [name for name in self.categories if name not in PLURAL_CATEGORIES]
        if unknown:
            raise ConfigurationError(f"Unknown plural categories: {unknown}")
        if len(set(self.categories)) != len(self.categories):
            raise ConfigurationError("Plural categories must be unique")
        order = [PLURAL_CATEGORIES.index(name) for name in self.categories]
        if order != sorted(order):
            raise ConfigurationError(
                "Plural categories must follow CLDR order: " + ", ".join(PLURAL_CATEGORIES)
            )
        for name in self.rules:
            if name not in self.categories:
                raise ConfigurationError(
                    f"Plural rule defined for undeclared category '{name}'"
                )
        return self

    @property
    def fallthrough(self) -> str:
        return self.categories[-1]

    def category(self, count: int) -> str:
        """Return the plural category selected for ``count``."""

        number = abs(int(count))
        for name in self.categories[:-1]:
            alternatives = self.rules.get(name, ())
            if any(
                all(condition.matches(number) for condition in conditions)
                for conditions in alternatives
            ):
                return name
        return self.fallthrough

    def index(self, count: int) -> int:
        """Return the position of the selected category, used for variant lookup."""

        return self.categories.index(self.category(count))


class PluralRuleTable(ImmutableModel):
    """Plural rules keyed by lowercase language code."""

    default_language: str
    languages: Mapping[str, PluralRule]

    @field_validator("languages", mode="before")
    @classmethod
    def _normalise_language_keys(cls, value: Any) -> Mapping[str, Any]:
        if not isinstance(value, Mapping):
            raise ConfigurationError("Plural rule languages must be a mapping")
        return {str(key).lower(): rule for key, rule in value.items()}

    @model_validator(mode="after")
    def _validate_default(self) -> PluralRuleTable:
        if self.default_language.lower() not in self.languages:
            raise ConfigurationError(
                f"Default plural language '{self.default_language}' has no rule"
            )
        return self

    def rule_for(self, language: str | None) -> PluralRule:
        if language:
            rule = self.languages.get(language.lower())
            if rule is not None:
                return rule
        return self.languages[self.default_language.lower()]


__all__ = [
    "ConfigurationError",
    "ImmutableModel",
    "PLURAL_CATEGORIES",
    "PluralCondition",
    "PluralRule",
    "PluralRuleTable",
]
