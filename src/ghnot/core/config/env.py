"""Environment loading helpers.

gh-not reads ``~/.config/gh-not/.env`` (or the XDG equivalent) so that
variables such as ``GH_TOKEN`` or ``GH_NOT_CACHE_TTL_HOURS`` can live next to
the config file.

The .env file never overrides variables already present in the process
environment (e.g. exported in the shell).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

from .loader import get_xdg_config_home


def _read_env(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    values = dotenv_values(path)
    out: dict[str, str] = {}
    for k, v in values.items():
        if k is None or v is None:
            continue
        out[str(k)] = str(v)
    return out


def load_user_env(env_paths: Iterable[Path] | None = None) -> list[str]:
    """Load environment variables from the user .env file(s).

    Args:
        env_paths: explicit env file paths (defaults to the gh-not config dir)

    Returns:
        Names of the variables that were set
    """
    if env_paths is None:
        env_paths = [get_xdg_config_home() / "gh-not" / ".env"]

    loaded: list[str] = []
    for p in env_paths:
        for k, v in _read_env(Path(p)).items():
            if k not in os.environ:
                os.environ[k] = v
                loaded.append(k)
    return loaded
