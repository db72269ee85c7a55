"""Immutable data model for a loaded string catalogue.

A catalogue holds contexts in file order, and each context holds its messages
in file order. Plural variants are either the numerus forms of one message or
several messages sharing the same source and disambiguation, in which case
their position within the context decides the plural category they serve.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator

from pydantic import Field, PrivateAttr, model_validator

from inputcatalog.backend.config.schema import ConfigurationError, ImmutableModel

from .errors import ContextNotFound, MessageNotFound


class TranslationState(str, Enum):
    """Review state carried by the ``type`` attribute of a translation."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"
    OBSOLETE = "obsolete"
    VANISHED = "vanished"


class Location(ImmutableModel):
    """Origin of a message in the UI sources; informational only."""

    filename: str
    line: str | None = None


class Message(ImmutableModel):
    """One translatable unit of a context."""

    source: str
    translation: str = ""
    disambiguation: str | None = None
    numerus: bool = False
    numerus_forms: tuple[str, ...] = ()
    state: TranslationState = TranslationState.FINISHED
    locations: tuple[Location, ...] = ()
    message_id: str | None = None
    old_source: str | None = None
    old_comment: str | None = None
    translator_comment: str | None = None
    extra_comment: str | None = None

    @model_validator(mode="after")
    def _validate_forms(self) -> Message:
        if self.numerus_forms and not self.numerus:
            raise ConfigurationError("Numerus forms require a numerus message")
        if self.numerus and self.translation:
            raise ConfigurationError("Numerus messages carry their text in numerus forms")
        return self

    @property
    def is_live(self) -> bool:
        """Whether the message takes part in lookups."""

        return self.state not in (TranslationState.OBSOLETE, TranslationState.VANISHED)

    @property
    def forms(self) -> tuple[str, ...]:
        return self.numerus_forms if self.numerus else (self.translation,)

    @property
    def is_translated(self) -> bool:
        return any(self.forms)

    def key(self) -> tuple[str, str | None]:
        return (self.source, self.disambiguation or None)


class Context(ImmutableModel):
    """Named group of messages belonging to one UI component."""

    name: str
    comment: str | None = None
    messages: tuple[Message, ...] = ()

    _variants: dict[tuple[str, str | None], tuple[Message, ...]] = PrivateAttr(
        default_factory=dict
    )

    def model_post_init(self, __context: Any) -> None:
        grouped: dict[tuple[str, str | None], list[Message]] = {}
        for message in self.messages:
            if message.is_live:
                grouped.setdefault(message.key(), []).append(message)
        self._variants = {key: tuple(variants) for key, variants in grouped.items()}

    def variants(self, source: str, disambiguation: str | None = None) -> tuple[Message, ...]:
        """Return live messages matching the source, in file order."""

        found = self._variants.get((source, disambiguation or None))
        if not found:
            raise MessageNotFound(self.name, source, disambiguation)
        return found

    def variant_groups(self) -> Iterator[tuple[tuple[str, str | None], tuple[Message, ...]]]:
        yield from self._variants.items()


class Catalogue(ImmutableModel):
    """Root container of a locale's contexts."""

    language: str | None = None
    source_language: str | None = None
    version: str = "2.1"
    contexts: tuple[Context, ...] = Field(default=())

    _index: dict[str, Context] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def _validate_unique_contexts(self) -> Catalogue:
        seen: set[str] = set()
        for context in self.contexts:
            if context.name in seen:
                raise ConfigurationError(f"Duplicate context name: {context.name!r}")
            seen.add(context.name)
        return self

    def model_post_init(self, __context: Any) -> None:
        self._index = {context.name: context for context in self.contexts}

    @property
    def context_names(self) -> tuple[str, ...]:
        return tuple(context.name for context in self.contexts)

    def find_context(self, name: str) -> Context:
        try:
            return self._index[name]
        except KeyError:
            raise ContextNotFound(name) from None

    def find_variants(
        self,
        context: str,
        source: str,
        disambiguation: str | None = None,
    ) -> tuple[Message, ...]:
        """Return the plural variants for a message, raising lookup errors."""

        return self.find_context(context).variants(source, disambiguation)

    def iter_messages(self) -> Iterator[tuple[Context, Message]]:
        for context in self.contexts:
            for message in context.messages:
                yield context, message

    @property
    def message_count(self) -> int:
        return sum(len(context.messages) for context in self.contexts)


__all__ = ["Catalogue", "Context", "Location", "Message", "TranslationState"]
