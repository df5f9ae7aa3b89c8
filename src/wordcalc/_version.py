"""Version lookup for wordcalc."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version(pyproject: Path = PYPROJECT) -> str:
    """Return the ``[project] version`` of a source checkout, else the installed one."""
    if pyproject.is_file():
        with open(pyproject, "rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == "wordcalc" and "version" in project:
            return str(project["version"])
    try:
        return _metadata_version("wordcalc")
    except PackageNotFoundError:
        return "0.0.0"
