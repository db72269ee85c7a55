"""Holder for the translator currently used by rendering code."""

from __future__ import annotations

import logging
from threading import Lock

from .registry import get_translator
from .translator import Translator

_LOGGER = logging.getLogger(__name__)


class ActiveCatalogue:
    """Reference to the active translator, swapped whole on locale change.

    Readers take the reference once per call and never lock; a swap replaces
    it in a single assignment, so a lookup sees either the old or the new
    catalogue.
    """

    def __init__(self, translator: Translator) -> None:
        self._translator = translator
        self._lock = Lock()

    @classmethod
    def for_locale(cls, locale: str | None = None) -> ActiveCatalogue:
        return cls(get_translator(locale))

    @property
    def translator(self) -> Translator:
        return self._translator

    @property
    def locale(self) -> str:
        return self._translator.locale

    def swap(self, translator: Translator) -> Translator:
        """Install ``translator`` and return the one it replaces."""

        with self._lock:
            previous = self._translator
            self._translator = translator
        if previous.locale != translator.locale:
            _LOGGER.info("Switched active catalogue from %s to %s", previous.locale, translator.locale)
        return previous

    def switch_locale(self, locale: str | None) -> Translator:
        """Build the translator for ``locale`` and swap it in."""

        return self.swap(get_translator(locale))

    def translate(
        self,
        context: str,
        source: str,
        *args: object,
        disambiguation: str | None = None,
        count: int | None = None,
    ) -> str:
        translator = self._translator
        return translator.translate(
            context, source, *args, disambiguation=disambiguation, count=count
        )

    __call__ = translate


__all__ = ["ActiveCatalogue"]
