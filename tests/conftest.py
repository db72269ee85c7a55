"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from inputcatalog.backend.app import create_app  # noqa: E402
from inputcatalog.backend.catalogue import reset_catalogue_cache  # noqa: E402
from inputcatalog.backend.catalogue.registry import (  # noqa: E402
    DEFAULT_LOCALE_ENV,
    TRANSLATIONS_DIR_ENV,
)

SAMPLE_TS = """<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE TS>
<TS version="2.1" language="hr_HR">
<context>
    <name>PanelHeader</name>
    <message>
        <location filename="../qml/components/PanelHeader.qml" line="20"/>
        <source>Cancel</source>
        <translation>Odustani</translation>
    </message>
</context>
<context>
    <name>SyncStatus</name>
    <message>
        <location filename="../inpututils.cpp" line="169"/>
        <location filename="../inpututils.cpp" line="174"/>
        <source>%1 day ago</source>
        <translation>prije %1 dan</translation>
    </message>
    <message>
        <source>%1 day ago</source>
        <translation>prije %1 dana</translation>
    </message>
    <message numerus="yes">
        <source>%n file(s) synced</source>
        <translation>
            <numerusform>%n datoteka sinkronizirana</numerusform>
            <numerusform>%n datoteke sinkronizirane</numerusform>
            <numerusform>%n datoteka sinkronizirano</numerusform>
        </translation>
    </message>
    <message>
        <source>Untranslated %1</source>
        <translation type="unfinished"></translation>
    </message>
    <message>
        <source>Open</source>
        <comment>verb</comment>
        <translation>Otvori</translation>
    </message>
    <message>
        <source>Open</source>
        <comment>adjective</comment>
        <extracomment>Project state shown in the list</extracomment>
        <translation>Otvoren</translation>
    </message>
    <message>
        <source>Removed</source>
        <translation type="obsolete">Uklonjeno</translation>
    </message>
</context>
</TS>
"""


@pytest.fixture(autouse=True)
def isolated_catalogues(monkeypatch: pytest.MonkeyPatch):
    """Start every test from the shipped catalogues with no overrides."""

    monkeypatch.delenv(TRANSLATIONS_DIR_ENV, raising=False)
    monkeypatch.delenv(DEFAULT_LOCALE_ENV, raising=False)
    reset_catalogue_cache()
    yield
    reset_catalogue_cache()


@pytest.fixture()
def sample_ts() -> str:
    """Return a small catalogue covering plural variants and fallbacks."""

    return SAMPLE_TS


@pytest.fixture()
def catalogue_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return an empty catalogue directory patched in through the environment."""

    monkeypatch.setenv(TRANSLATIONS_DIR_ENV, str(tmp_path))
    reset_catalogue_cache()
    return tmp_path


@pytest.fixture()
def app() -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app()
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()
