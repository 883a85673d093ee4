"""Single source of truth for the enumkit version."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).parent.parent.parent / "pyproject.toml"


def get_version() -> str:
    """Version from a source checkout's pyproject.toml, else installed metadata."""
    if _PYPROJECT.exists():
        try:
            project = tomllib.loads(_PYPROJECT.read_text(encoding="utf-8")).get("project", {})
        except tomllib.TOMLDecodeError:
            project = {}
        if project.get("name") == "enumkit" and "version" in project:
            return str(project["version"])
    try:
        return _metadata_version("enumkit")
    except PackageNotFoundError:
        return "0.0.0"
