"""Config file discovery and loading.

Walk-up finder locates nricctl.toml, similar to how git finds .git/.
Supports NRICCTL_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from nricctl.config.models import NricConfig

CONFIG_FILENAME = "nricctl.toml"
CONFIG_ENV_VAR = "NRICCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for nricctl.toml.

    Returns the path to the config file, or None if not found.
    Checks NRICCTL_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def load_config(path: Path | None = None, cwd: Path | None = None) -> NricConfig:
    """Load and validate config from a TOML file.

    Returns default NricConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return NricConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return NricConfig.model_validate(data)
