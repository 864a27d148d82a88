"""Config file discovery and loading.

Walk-up finder locates configuration similar to how git finds .git/.
At each directory level a dedicated ``medform.toml`` wins over a
``pyproject.toml`` carrying a ``[tool.medform]`` table. The
``MEDFORM_CONFIG`` env var and the ``--config`` flag bypass discovery.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "medform.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "MEDFORM_CONFIG"


def _read_toml(path: Path) -> dict[str, Any]:
    raw = path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def _has_tool_table(path: Path) -> bool:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return False
    return isinstance(data.get("tool", {}).get("medform"), dict)


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for a config source.

    Returns the path to the config file, or None if not found.
    Checks MEDFORM_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = current / PYPROJECT_FILENAME
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
        if current.parent == current:
            return None
        current = current.parent


def read_config_table(path: Path) -> dict[str, Any]:
    """Return the medform settings table from *path*.

    For ``pyproject.toml`` this is the ``[tool.medform]`` table; any other
    file is read whole.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """
    data = _read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        table = data.get("tool", {}).get("medform", {})
        return table if isinstance(table, dict) else {}
    return data
