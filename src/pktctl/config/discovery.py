"""Config file discovery and TOML reading.

pktctl.toml is located by walking up from the working directory, the
same way git finds .git/. PKTCTL_CONFIG and --config take precedence.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any


CONFIG_FILENAME = "pktctl.toml"
CONFIG_ENV_VAR = "PKTCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest pktctl.toml at or above *start* (default: cwd).

    When PKTCTL_CONFIG is set it wins outright: its file is returned if it
    exists, otherwise None, without any walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path)
        return candidate if candidate.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML, reporting syntax errors as a ClickException."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        import click

        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
