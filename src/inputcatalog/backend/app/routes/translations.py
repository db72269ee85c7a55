"""Expose translation catalogues and lookups to out-of-process consumers.

Requests without a locale are answered from the service's active catalogue, so
``PUT /api/v1/locale`` changes what they render.
"""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from inputcatalog.backend.app.http import ProblemResponse, missing_parameters, problem_response
from inputcatalog.backend.catalogue import (
    Translator,
    get_translator,
    load_translations,
    translations_payload,
)

from .locale import active_catalogue

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")


def _render(translator: Translator):
    """Render the message named by the query string through ``translator``.

    Query parameters: ``context`` and ``source`` (required), ``comment``,
    ``count`` and repeated ``arg``.
    """

    context = request.args.get("context")
    source = request.args.get("source")
    missing = [name for name, value in (("context", context), ("source", source)) if not value]
    if missing:
        return missing_parameters(*missing).to_response()

    count = _parse_count(request.args.get("count"))
    if isinstance(count, ProblemResponse):
        return count.to_response()

    text = translator.translate(
        context,
        source,
        *request.args.getlist("arg"),
        disambiguation=request.args.get("comment") or None,
        count=count,
    )
    return jsonify({"locale": translator.locale, "text": text}), 200


def _parse_count(raw_count: str | None) -> int | ProblemResponse | None:
    if raw_count in (None, ""):
        return None
    try:
        return int(raw_count)
    except ValueError:
        return problem_response(
            "invalid_count",
            status=400,
            message=f"count must be an integer, got {raw_count!r}",
        )


@blueprint.get("/")
def get_default_translations():
    """Return the catalogue for the requested locale, or the active one."""

    locale_hint = request.args.get("locale")
    if locale_hint:
        payload = load_translations(locale_hint)
    else:
        payload = translations_payload(active_catalogue().translator)
    return jsonify(payload), 200


@blueprint.get("/translate")
def translate_active_message():
    """Render one message through the active catalogue."""

    return _render(active_catalogue().translator)


@blueprint.get("/<locale>")
def get_locale_translations(locale: str):
    """Return the catalogue for a specific locale slug."""

    payload = load_translations(locale)
    return jsonify(payload), 200


@blueprint.get("/<locale>/translate")
def translate_message(locale: str):
    """Render one message in a specific locale."""

    return _render(get_translator(locale))
