"""Application factory for the catalogue HTTP service."""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import BadRequest

from inputcatalog.backend.catalogue import (
    ActiveCatalogue,
    CatalogueError,
    available_locales,
)
from inputcatalog.backend.version import get_project_version

from .http import problem_response
from .routes import register_routes
from .routes.locale import EXTENSION_KEY

_LOGGER = logging.getLogger(__name__)


def create_app(default_locale: str | None = None) -> Flask:
    """Create and configure the Flask application instance.

    ``default_locale`` overrides ``INPUTCATALOG_DEFAULT_LOCALE`` for the
    catalogue that is active when the service starts.
    """

    app = Flask(__name__)

    active = ActiveCatalogue.for_locale(default_locale)
    app.extensions[EXTENSION_KEY] = active
    _LOGGER.info("Serving catalogues with %s active", active.locale)

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        payload = {
            "status": "ok",
            "version": get_project_version(),
            "active_locale": active.locale,
            "locales": list(available_locales()),
        }
        return jsonify(payload)

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed requests."""

        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message).to_response()

    @app.errorhandler(CatalogueError)
    def handle_catalogue_error(error: CatalogueError):
        """Surface catalogue failures that escaped the lookup fallbacks."""

        _LOGGER.error("Catalogue error: %s", error)
        return problem_response(
            "catalogue_error", status=500, message=str(error)
        ).to_response()

    return app
