"""Relative time strings ("5 minutes ago") rendered through a catalogue."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

CONTEXT = "InputUtils"
INVALID_DATETIME = "Invalid datetime"

# (singular source, plural source) per unit, chosen by English grammar.
_UNITS = {
    "minute": ("%1 minute ago", "%1 minutes ago"),
    "hour": ("%1 hour ago", "%1 hours ago"),
    "day": ("%1 day ago", "%1 days ago"),
    "week": ("%1 week ago", "%1 weeks ago"),
    "month": ("%1 month ago", "%1 months ago"),
    "year": ("%1 year ago", "%1 years ago"),
}

Translate = Callable[..., str]


def _elapsed(translate: Translate, unit: str, period: int) -> str:
    singular, plural = _UNITS[unit]
    source = plural if period > 1 else singular
    return translate(CONTEXT, source, period, count=period)


def format_elapsed(
    then: datetime,
    translate: Translate,
    now: datetime | None = None,
) -> str:
    """Describe how long ago ``then`` was, relative to ``now``.

    Day differences are counted between calendar dates, so 23:55 to 00:05 on
    the next day is one day apart but still reported in minutes.
    """

    if now is None:
        now = datetime.now(then.tzinfo)
    elif then.tzinfo is not None and now.tzinfo is not None:
        now = now.astimezone(then.tzinfo)

    days = (now.date() - then.date()).days
    if days < 0:
        return translate(CONTEXT, INVALID_DATETIME)

    if days <= 1:
        seconds = (now - then).total_seconds()
        if seconds < 0:
            return translate(CONTEXT, INVALID_DATETIME)
        if seconds < 60:
            return translate(CONTEXT, "just now")
        if seconds < 60 * 60:
            return _elapsed(translate, "minute", int(seconds // 60))
        if seconds < 60 * 60 * 24:
            return _elapsed(translate, "hour", int(seconds // (60 * 60)))
        return _elapsed(translate, "day", days)

    if days < 7:
        return _elapsed(translate, "day", days)
    if days < 31:
        return _elapsed(translate, "week", days // 7)
    if days < 365:
        return _elapsed(translate, "month", days // 31)
    return _elapsed(translate, "year", days // 365)


__all__ = ["CONTEXT", "INVALID_DATETIME", "format_elapsed"]
