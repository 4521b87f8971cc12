"""Project and config root resolution.

``RUIN_CONFIG_ROOT`` overrides the config directory when set to a non-empty
value; otherwise the repo-local ``./config`` directory is used.
"""

from __future__ import annotations

import os
from pathlib import Path

RUIN_CONFIG_ENV = "RUIN_CONFIG_ROOT"
_PROJECT_ROOT = Path(__file__).resolve().parents[1]


def get_project_root() -> Path:
    return _PROJECT_ROOT


def get_config_root() -> Path:
    """Return the absolute config root, honoring RUIN_CONFIG_ROOT when set."""
    env_value = os.environ.get(RUIN_CONFIG_ENV)
    if env_value:
        return Path(env_value).expanduser().resolve()
    return (_PROJECT_ROOT / "config").resolve()
