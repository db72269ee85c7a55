"""Report content gaps in shipped catalogues."""

from __future__ import annotations

import argparse
from typing import Mapping, Sequence

from inputcatalog.backend.config.plural_rules import PluralRule, plural_rules_for

from .errors import MalformedCatalogue
from .models import Catalogue, Context, Message, TranslationState
from .placeholders import placeholders_in
from .registry import available_locales, base_locale, load_locale_catalogue

UNTRANSLATED = "untranslated"


def _format_scope(context: Context, message: Message) -> str:
    return f"{context.name}: {message.source!r}"


def _placeholder_issues(context: Context, message: Message) -> list[str]:
    issues: list[str] = []
    expected = placeholders_in(message.source)
    for form in message.forms:
        extra = placeholders_in(form) - expected
        if form and extra:
            tokens = ", ".join(f"%{index}" for index in sorted(extra))
            issues.append(
                f"{_format_scope(context, message)} translation uses {tokens} absent from the source"
            )
    return issues


def validate_catalogue(
    catalogue: Catalogue,
    rule: PluralRule | None = None,
    *,
    include_untranslated: bool = True,
) -> list[str]:
    """Return human-readable issues found in ``catalogue``."""

    rule = rule or plural_rules_for(catalogue.language)
    issues: list[str] = []

    for context, message in catalogue.iter_messages():
        if not message.is_live:
            continue

        issues.extend(_placeholder_issues(context, message))

        if message.state is TranslationState.UNFINISHED:
            issues.append(f"{_format_scope(context, message)} translation is unfinished")

        if include_untranslated and not message.is_translated:
            issues.append(f"{_format_scope(context, message)} is {UNTRANSLATED}")

        if message.numerus and len(message.numerus_forms) != len(rule.categories):
            issues.append(
                (
                    f"{_format_scope(context, message)} has {len(message.numerus_forms)} "
                    f"plural form(s), expected {len(rule.categories)} "
                    f"({', '.join(rule.categories)})"
                )
            )

    return issues


def validate_all_locales(*, include_untranslated: bool = True) -> Mapping[str, list[str]]:
    """Validate every shipped catalogue, keyed by locale."""

    results: dict[str, list[str]] = {}
    for locale in available_locales():
        if locale == base_locale():
            continue
        try:
            catalogue = load_locale_catalogue(locale)
        except MalformedCatalogue as error:
            results[locale] = [f"failed to load catalogue: {error}"]
            continue
        results[locale] = validate_catalogue(
            catalogue, include_untranslated=include_untranslated
        )
    return results


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate translation catalogues")
    parser.add_argument(
        "--locale",
        action="append",
        dest="locales",
        help="Locale to validate (repeatable, defaults to every shipped catalogue)",
    )
    parser.add_argument(
        "--fail-on-untranslated",
        action="store_true",
        help="Exit with an error if untranslated messages are found",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    locales = args.locales or [locale for locale in available_locales() if locale != base_locale()]

    if not locales:
        parser.print_help()
        return 1

    exit_code = 0

    for locale in locales:
        try:
            catalogue = load_locale_catalogue(locale)
        except (LookupError, MalformedCatalogue) as error:
            print(f"[{locale}] failed to load catalogue: {error}")
            exit_code = 1
            continue

        issues = validate_catalogue(catalogue)
        blocking = [
            issue
            for issue in issues
            if args.fail_on_untranslated or not issue.endswith(f" is {UNTRANSLATED}")
        ]
        if issues:
            print(f"[{locale}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{locale}] OK ({catalogue.message_count} messages)")
        if blocking:
            exit_code = 1

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
