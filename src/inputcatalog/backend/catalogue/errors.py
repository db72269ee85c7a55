"""Exceptions raised while loading and querying string catalogues."""

from __future__ import annotations

from typing import Iterable


class CatalogueError(Exception):
    """Base class for catalogue failures."""


class MalformedCatalogue(CatalogueError, ValueError):
    """Raised when a serialised catalogue violates the ``.ts`` schema."""


class ContextNotFound(CatalogueError, LookupError):
    """Raised when no context carries the requested name."""

    def __init__(self, context: str) -> None:
        super().__init__(f"Context not found: {context!r}")
        self.context = context


class MessageNotFound(CatalogueError, LookupError):
    """Raised when a context has no live message for the requested source."""

    def __init__(self, context: str, source: str, disambiguation: str | None = None) -> None:
        detail = f" ({disambiguation!r})" if disambiguation else ""
        super().__init__(f"Message not found in {context!r}: {source!r}{detail}")
        self.context = context
        self.source = source
        self.disambiguation = disambiguation


class PlaceholderMismatch(CatalogueError):
    """Describes placeholders that could not be matched with render arguments.

    Rendering never raises this; it is logged so content gaps stay visible.
    """

    def __init__(
        self,
        text: str,
        missing: Iterable[int] = (),
        unused: Iterable[int] = (),
    ) -> None:
        self.text = text
        self.missing = tuple(sorted(missing))
        self.unused = tuple(sorted(unused))
        parts = []
        if self.missing:
            parts.append("no argument for " + ", ".join(f"%{index}" for index in self.missing))
        if self.unused:
            parts.append("argument(s) " + ", ".join(str(index) for index in self.unused) + " unused")
        super().__init__(f"{'; '.join(parts) or 'placeholder mismatch'} in {text!r}")


__all__ = [
    "CatalogueError",
    "ContextNotFound",
    "MalformedCatalogue",
    "MessageNotFound",
    "PlaceholderMismatch",
]
