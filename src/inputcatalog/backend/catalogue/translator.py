"""Lookup and rendering over a loaded catalogue."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from inputcatalog.backend.config.plural_rules import PluralRule, plural_rules_for

from .errors import ContextNotFound, MessageNotFound
from .models import Catalogue, Message
from .placeholders import render

_LOGGER = logging.getLogger(__name__)


def select_variant(
    variants: Sequence[Message],
    rule: PluralRule,
    count: int | None = None,
) -> str:
    """Pick the text for ``count`` among plural variants of one message.

    Variants are the numerus forms of a single message, or the messages that
    share a source in file order. Without a count the first variant wins; a
    category past the last available variant uses the last one. Untranslated
    variants fall back to the source text.
    """

    if len(variants) == 1:
        forms = variants[0].forms
    else:
        forms = tuple(message.translation for message in variants)

    index = 0
    if count is not None and len(forms) > 1:
        index = min(rule.index(count), len(forms) - 1)

    text = forms[index] if forms else ""
    return text or variants[min(index, len(variants) - 1)].source


@dataclass(frozen=True)
class Translator:
    """Callable helper for retrieving localized strings."""

    locale: str
    catalogue: Catalogue
    plural_rule: PluralRule

    @classmethod
    def for_catalogue(cls, catalogue: Catalogue, locale: str | None = None) -> Translator:
        resolved = locale or catalogue.language or ""
        return cls(locale=resolved, catalogue=catalogue, plural_rule=plural_rules_for(resolved))

    def lookup(
        self,
        context: str,
        source: str,
        disambiguation: str | None = None,
        count: int | None = None,
    ) -> str:
        """Return the unrendered translation, raising when the message is unknown."""

        variants = self.catalogue.find_variants(context, source, disambiguation)
        return select_variant(variants, self.plural_rule, count)

    def translate(
        self,
        context: str,
        source: str,
        *args: object,
        disambiguation: str | None = None,
        count: int | None = None,
    ) -> str:
        """Return the rendered translation, degrading to the source text."""

        try:
            text = self.lookup(context, source, disambiguation, count)
        except (ContextNotFound, MessageNotFound) as error:
            _LOGGER.debug("Falling back to source text (%s): %s", self.locale, error)
            text = source
        return render(text, args, count)

    __call__ = translate


__all__ = ["Translator", "select_variant"]
