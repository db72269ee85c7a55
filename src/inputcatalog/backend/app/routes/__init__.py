"""Blueprint registrations for application routes."""

from flask import Flask

from .locale import blueprint as locale_blueprint
from .translations import blueprint as translations_blueprint


def register_routes(app: Flask) -> None:
    """Register all Flask blueprints with the provided application."""

    app.register_blueprint(locale_blueprint)
    app.register_blueprint(translations_blueprint)
