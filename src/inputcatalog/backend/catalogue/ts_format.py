"""Read and write catalogues in the Qt Linguist ``.ts`` XML format."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable
from xml.sax.saxutils import escape, quoteattr

from pydantic import ValidationError

from inputcatalog.backend.config.plural_rules import PluralRule, plural_rules_for

from .errors import MalformedCatalogue
from .models import Catalogue, Context, Location, Message, TranslationState

_LOGGER = logging.getLogger(__name__)

ROOT_TAG = "TS"
DEFAULT_VERSION = "2.1"

_IGNORED_ROOT_CHILDREN = frozenset({"defaultcodec", "dependencies"})
_CONTEXT_CHILDREN = frozenset({"name", "comment", "message"})
_MESSAGE_CHILDREN = frozenset(
    {
        "location",
        "source",
        "oldsource",
        "comment",
        "oldcomment",
        "extracomment",
        "translatorcomment",
        "translation",
    }
)

_TEXT_ENTITIES = {'"': "&quot;", "'": "&apos;"}
_ATTRIBUTE_ENTITIES = {"\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}
# Characters XML 1.0 cannot carry (and carriage returns, which parsers
# normalise away) are written as <byte value="xNN"/> elements.
_CONTROL_PATTERN = re.compile(r"[\x00-\x08\x0b-\x1f]")


def _decode_byte(element: ET.Element) -> str:
    value = (element.get("value") or "").strip()
    try:
        if value[:1] in ("x", "X"):
            return chr(int(value[1:], 16))
        return chr(int(value))
    except (ValueError, OverflowError) as exc:
        raise MalformedCatalogue(f"Invalid <byte> value: {value!r}") from exc


def _element_text(element: ET.Element) -> str:
    """Return the text of ``element`` with embedded ``<byte>`` elements decoded."""

    parts = [element.text or ""]
    for child in element:
        if child.tag != "byte":
            raise MalformedCatalogue(f"Unexpected <{child.tag}> inside <{element.tag}>")
        parts.append(_decode_byte(child))
        parts.append(child.tail or "")
    return "".join(parts)


def _optional_text(element: ET.Element, tag: str, scope: str) -> str | None:
    found = element.findall(tag)
    if len(found) > 1:
        raise MalformedCatalogue(f"{scope}: more than one <{tag}> element")
    return _element_text(found[0]) if found else None


def _parse_state(value: str | None, scope: str) -> TranslationState:
    if value is None:
        return TranslationState.FINISHED
    try:
        return TranslationState(value)
    except ValueError as exc:
        raise MalformedCatalogue(f"{scope}: unknown translation type {value!r}") from exc


def _parse_location(element: ET.Element, scope: str) -> Location:
    filename = element.get("filename")
    if filename is None:
        raise MalformedCatalogue(f"{scope}: <location> without a filename")
    return Location(filename=filename, line=element.get("line"))


def _parse_message(element: ET.Element, context_name: str) -> dict[str, object]:
    scope = f"context {context_name!r}"
    for child in element:
        if child.tag not in _MESSAGE_CHILDREN:
            raise MalformedCatalogue(f"{scope}: unknown message element <{child.tag}>")

    source = _optional_text(element, "source", scope)
    if source is None:
        raise MalformedCatalogue(f"{scope}: message without <source>")
    scope = f"{scope}, source {source!r}"

    numerus = element.get("numerus") == "yes"
    translations = element.findall("translation")
    if len(translations) > 1:
        raise MalformedCatalogue(f"{scope}: more than one <translation> element")

    translation = ""
    forms: tuple[str, ...] = ()
    if translations:
        translation_element = translations[0]
        state = _parse_state(translation_element.get("type"), scope)
        if numerus:
            for child in translation_element:
                if child.tag != "numerusform":
                    raise MalformedCatalogue(
                        f"{scope}: unexpected <{child.tag}> in a plural translation"
                    )
            forms = tuple(_element_text(form) for form in translation_element)
        else:
            translation = _element_text(translation_element)
    else:
        state = TranslationState.UNFINISHED

    return {
        "source": source,
        "translation": translation,
        "disambiguation": _optional_text(element, "comment", scope) or None,
        "numerus": numerus,
        "numerus_forms": forms,
        "state": state,
        "locations": tuple(
            _parse_location(location, scope) for location in element.findall("location")
        ),
        "message_id": element.get("id"),
        "old_source": _optional_text(element, "oldsource", scope),
        "old_comment": _optional_text(element, "oldcomment", scope),
        "translator_comment": _optional_text(element, "translatorcomment", scope),
        "extra_comment": _optional_text(element, "extracomment", scope),
    }


def _parse_context(element: ET.Element) -> dict[str, object]:
    for child in element:
        if child.tag not in _CONTEXT_CHILDREN:
            raise MalformedCatalogue(f"Unknown context element <{child.tag}>")

    name = _optional_text(element, "name", "context")
    if name is None:
        raise MalformedCatalogue("Context without <name>")

    return {
        "name": name,
        "comment": _optional_text(element, "comment", f"context {name!r}"),
        "messages": tuple(
            Message.model_validate(_parse_message(message, name))
            for message in element.findall("message")
        ),
    }


def check_plural_variants(catalogue: Catalogue, rule: PluralRule | None = None) -> None:
    """Reject plural variants that cannot be mapped onto the locale's categories."""

    rule = rule or plural_rules_for(catalogue.language)
    limit = len(rule.categories)

    for context in catalogue.contexts:
        for (source, _), variants in context.variant_groups():
            if len(variants) > 1 and any(message.numerus for message in variants):
                raise MalformedCatalogue(
                    f"context {context.name!r}: plural message {source!r} is duplicated"
                )
            available = len(variants[0].numerus_forms) if variants[0].numerus else len(variants)
            if available > limit:
                raise MalformedCatalogue(
                    (
                        f"context {context.name!r}: {available} variants of {source!r} "
                        f"exceed the {limit} plural categories of {catalogue.language or 'the default language'}"
                    )
                )


def parse_catalogue(data: str | bytes, *, origin: str = "<string>") -> Catalogue:
    """Parse a serialised ``.ts`` document into an immutable catalogue."""

    if isinstance(data, str):
        data = data.encode("utf-8")

    try:
        root = ET.fromstring(data)
    except ET.ParseError as error:
        raise MalformedCatalogue(f"{origin}: {error}") from error

    if root.tag != ROOT_TAG:
        raise MalformedCatalogue(f"{origin}: expected <{ROOT_TAG}> root, found <{root.tag}>")

    contexts = []
    try:
        for child in root:
            if child.tag == "context":
                contexts.append(Context.model_validate(_parse_context(child)))
            elif child.tag in _IGNORED_ROOT_CHILDREN:
                _LOGGER.debug("Ignoring <%s> in %s", child.tag, origin)
            else:
                raise MalformedCatalogue(f"unknown element <{child.tag}>")

        catalogue = Catalogue(
            language=root.get("language"),
            source_language=root.get("sourcelanguage"),
            version=root.get("version") or DEFAULT_VERSION,
            contexts=tuple(contexts),
        )
        check_plural_variants(catalogue)
    except ValidationError as error:
        raise MalformedCatalogue(f"{origin}: {error}") from error
    except MalformedCatalogue as error:
        raise MalformedCatalogue(f"{origin}: {error}") from error

    _LOGGER.debug(
        "Loaded %d messages in %d contexts from %s",
        catalogue.message_count,
        len(catalogue.contexts),
        origin,
    )
    return catalogue


def load_catalogue_file(path: str | Path) -> Catalogue:
    """Read a ``.ts`` file from disk."""

    path = Path(path)
    return parse_catalogue(path.read_bytes(), origin=path.name)


def _text(value: str) -> str:
    escaped = escape(value, _TEXT_ENTITIES)
    return _CONTROL_PATTERN.sub(lambda match: f'<byte value="x{ord(match.group(0)):x}"/>', escaped)


def _attributes(pairs: Iterable[tuple[str, str | None]]) -> str:
    return "".join(
        f" {name}={quoteattr(value, _ATTRIBUTE_ENTITIES)}"
        for name, value in pairs
        if value is not None
    )


def _message_lines(message: Message) -> list[str]:
    lines = [
        "    <message"
        + _attributes(
            (("id", message.message_id), ("numerus", "yes" if message.numerus else None))
        )
        + ">"
    ]
    for location in message.locations:
        attributes = _attributes((("filename", location.filename), ("line", location.line)))
        lines.append(f"        <location{attributes}/>")

    for tag, value in (
        ("source", message.source),
        ("oldsource", message.old_source),
        ("comment", message.disambiguation),
        ("oldcomment", message.old_comment),
        ("extracomment", message.extra_comment),
        ("translatorcomment", message.translator_comment),
    ):
        if value is not None:
            lines.append(f"        <{tag}>{_text(value)}</{tag}>")

    state = None if message.state is TranslationState.FINISHED else message.state.value
    type_attribute = _attributes((("type", state),))
    if message.numerus:
        lines.append(f"        <translation{type_attribute}>")
        lines.extend(
            f"            <numerusform>{_text(form)}</numerusform>"
            for form in message.numerus_forms
        )
        lines.append("        </translation>")
    else:
        lines.append(
            f"        <translation{type_attribute}>{_text(message.translation)}</translation>"
        )
    lines.append("    </message>")
    return lines


def dump_catalogue(catalogue: Catalogue) -> str:
    """Serialise a catalogue to ``.ts`` text; reloading it yields an equal catalogue."""

    root_attributes = _attributes(
        (
            ("version", catalogue.version),
            ("language", catalogue.language),
            ("sourcelanguage", catalogue.source_language),
        )
    )
    lines = ['<?xml version="1.0" encoding="utf-8"?>', "<!DOCTYPE TS>", f"<{ROOT_TAG}{root_attributes}>"]
    for context in catalogue.contexts:
        lines.append("<context>")
        lines.append(f"    <name>{_text(context.name)}</name>")
        if context.comment is not None:
            lines.append(f"    <comment>{_text(context.comment)}</comment>")
        for message in context.messages:
            lines.extend(_message_lines(message))
        lines.append("</context>")
    lines.append(f"</{ROOT_TAG}>")
    return "\n".join(lines) + "\n"


def write_catalogue_file(catalogue: Catalogue, path: str | Path) -> Path:
    """Write a catalogue to disk as UTF-8 ``.ts``."""

    path = Path(path)
    path.write_text(dump_catalogue(catalogue), encoding="utf-8")
    return path


__all__ = [
    "DEFAULT_VERSION",
    "ROOT_TAG",
    "check_plural_variants",
    "dump_catalogue",
    "load_catalogue_file",
    "parse_catalogue",
    "write_catalogue_file",
]
