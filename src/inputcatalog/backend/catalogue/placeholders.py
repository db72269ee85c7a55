"""Positional placeholder handling for catalogue strings.

Placeholders are ``%1`` to ``%99``. A two-digit token is read as such when
enough arguments are supplied to fill it. Otherwise, if its first digit names a
supplied argument, that digit is the placeholder and the second one is literal
text (``%10`` with one argument renders the argument followed by ``0``). A
token no argument can fill renders as an empty string. ``%L1`` is accepted as an alias of
``%1``. Inside plural messages ``%n`` stands for the count.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from .errors import PlaceholderMismatch

_LOGGER = logging.getLogger(__name__)

_PLACEHOLDER_PATTERN = re.compile(r"%(?:n|L?(?P<index>\d{1,2}))")


def placeholders_in(text: str) -> set[int]:
    """Return the placeholder indexes referenced by ``text``."""

    indexes: set[int] = set()
    for match in _PLACEHOLDER_PATTERN.finditer(text):
        digits = match.group("index")
        if digits and int(digits) > 0:
            indexes.add(int(digits))
    return indexes


def uses_count(text: str) -> bool:
    return any(match.group("index") is None for match in _PLACEHOLDER_PATTERN.finditer(text))


def render(text: str, args: Sequence[object] = (), count: int | None = None) -> str:
    """Substitute positional arguments (and ``%n``) into ``text``.

    With neither arguments nor a count the text is returned untouched.
    Placeholders without a matching argument render as empty strings and the
    mismatch is logged.
    """

    if not args and count is None:
        return text

    values = [str(value) for value in args]
    used: set[int] = set()
    missing: set[int] = set()

    def _substitute(match: re.Match[str]) -> str:
        digits = match.group("index")
        if digits is None:
            return str(count) if count is not None else match.group(0)

        index = int(digits)
        tail = ""
        if len(digits) == 2 and index > len(values) and 0 < int(digits[0]) <= len(values):
            index, tail = int(digits[0]), digits[1]
        if index == 0:
            return match.group(0)
        if index > len(values):
            missing.add(index)
            return ""
        used.add(index)
        return values[index - 1] + tail

    rendered = _PLACEHOLDER_PATTERN.sub(_substitute, text)

    if missing:
        _LOGGER.warning("%s", PlaceholderMismatch(text, missing=missing))
    unused = set(range(1, len(values) + 1)) - used
    if unused:
        _LOGGER.debug("%s", PlaceholderMismatch(text, unused=unused))

    return rendered


__all__ = ["placeholders_in", "render", "uses_count"]
