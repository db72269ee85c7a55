"""Read and switch the service-wide active locale."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from inputcatalog.backend.app.http import problem_response
from inputcatalog.backend.catalogue import ActiveCatalogue, available_locales, resolve_locale

blueprint = Blueprint("locale", __name__, url_prefix="/api/v1/locale")

EXTENSION_KEY = "inputcatalog.active"


def active_catalogue() -> ActiveCatalogue:
    return current_app.extensions[EXTENSION_KEY]


def _describe(active: ActiveCatalogue):
    return jsonify(
        {
            "locale": active.locale,
            "available_locales": list(available_locales()),
            "plural_categories": list(active.translator.plural_rule.categories),
        }
    )


@blueprint.get("")
def get_active_locale():
    """Return the locale used by the active catalogue."""

    return _describe(active_catalogue()), 200


@blueprint.put("")
def switch_active_locale():
    """Swap the active catalogue for the locale named in the JSON body."""

    payload = request.get_json(silent=True) or {}
    locale = payload.get("locale") if isinstance(payload, dict) else None
    if not isinstance(locale, str) or not locale.strip():
        return problem_response(
            "invalid_locale",
            status=400,
            message="Request body must be a JSON object with a 'locale' string",
        ).to_response()

    resolved = resolve_locale(locale)
    if resolved is None:
        return problem_response(
            "unknown_locale",
            status=400,
            message=f"No catalogue available for locale {locale!r}",
            available_locales=list(available_locales()),
        ).to_response()

    active = active_catalogue()
    previous = active.switch_locale(resolved)
    response = _describe(active)
    response.headers["X-Previous-Locale"] = previous.locale
    return response, 200
