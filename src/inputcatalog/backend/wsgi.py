"""WSGI entrypoint for deploying the catalogue service."""

import logging
import os

from inputcatalog.backend.app import create_app

_LEVEL_NAME = os.getenv("INPUTCATALOG_LOG_LEVEL", "INFO").upper()
_LEVEL = logging.getLevelName(_LEVEL_NAME)
logging.basicConfig(level=_LEVEL if isinstance(_LEVEL, int) else logging.INFO)
if not isinstance(_LEVEL, int):
    logging.getLogger(__name__).warning(
        "Ignoring invalid value for INPUTCATALOG_LOG_LEVEL: %s", _LEVEL_NAME
    )

# WSGI servers look for a module-level variable named ``application``.
application = create_app()
