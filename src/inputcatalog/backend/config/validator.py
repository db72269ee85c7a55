"""Utilities for validating the plural rule table and surfacing issues."""

from __future__ import annotations

import argparse
from typing import Mapping, Sequence

from .plural_rules import PluralRule, PluralRuleTable, load_plural_rules

# Counts probed when checking that every category can be selected.
SAMPLE_COUNTS = range(0, 1001)


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def validate_plural_rule(language: str, rule: PluralRule) -> list[str]:
    """Return human-readable issues for a single language rule."""

    errors: list[str] = []
    scope = f"languages.{language}"

    for name in rule.categories[:-1]:
        if not rule.rules.get(name):
            errors.append(
                _format_scope(scope, f"category '{name}' has no conditions and is never selected")
            )

    if rule.rules.get(rule.fallthrough):
        errors.append(
            _format_scope(
                scope,
                f"fallthrough category '{rule.fallthrough}' defines conditions that are ignored",
            )
        )

    reached = {rule.category(count) for count in SAMPLE_COUNTS}
    for name in rule.categories:
        if name not in reached:
            errors.append(
                _format_scope(
                    scope,
                    (
                        f"category '{name}' is not selected by any count between "
                        f"{SAMPLE_COUNTS.start} and {SAMPLE_COUNTS.stop - 1}"
                    ),
                )
            )

    return errors


def validate_plural_rules(table: PluralRuleTable | None = None) -> Mapping[str, list[str]]:
    """Validate every language rule, returning issues keyed by language."""

    table = table or load_plural_rules()
    return {
        language: validate_plural_rule(language, rule)
        for language, rule in sorted(table.languages.items())
    }


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate the plural rule table")
    parser.add_argument(
        "languages",
        nargs="*",
        help="Language codes to validate (defaults to every configured language)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    table = load_plural_rules()
    languages = [language.lower() for language in args.languages] or sorted(table.languages)

    exit_code = 0

    for language in languages:
        rule = table.languages.get(language)
        if rule is None:
            print(f"[{language}] no plural rule configured")
            exit_code = 1
            continue

        issues = validate_plural_rule(language, rule)
        if issues:
            exit_code = 1
            print(f"[{language}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{language}] OK ({', '.join(rule.categories)})")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
