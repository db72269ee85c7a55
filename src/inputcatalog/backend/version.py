"""Project name and version as reported by the service and the CLI tools."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Final

DISTRIBUTION_NAME: Final = "inputcatalog"
PYPROJECT_PATH: Final = Path(__file__).resolve().parents[3] / "pyproject.toml"


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the installed distribution version, or the one in ``pyproject.toml``.

    Source checkouts that were never installed (tests run straight from ``src``)
    have no distribution metadata, so the project file is the fallback.
    """

    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return _read_pyproject_version(PYPROJECT_PATH)


def _read_pyproject_version(path: Path) -> str:
    if not path.exists():  # pragma: no cover - repository invariant
        raise RuntimeError(f"Unable to locate project metadata at {path}")

    with path.open("rb") as handle:
        project = tomllib.load(handle).get("project", {})

    version = project.get("version")
    if not version:
        raise RuntimeError(f"No [project] version declared in {path.name}")
    return str(version)


__all__ = ["DISTRIBUTION_NAME", "get_project_version"]
