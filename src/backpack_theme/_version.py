"""Package version lookup."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Prefer the source checkout's pyproject.toml, then installed metadata."""
    if _PYPROJECT.exists():
        with open(_PYPROJECT, "rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == "backpack-theme" and "version" in project:
            return project["version"]
    try:
        return _metadata_version("backpack-theme")
    except PackageNotFoundError:
        return "0.0.0"
