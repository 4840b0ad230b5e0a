"""App configuration: defaults merged with an optional JSON file.

The file path comes from the caller or the SENTINELS_CONFIG environment
variable (a .env file is honoured by the CLI and web entry points). Unknown
keys in the file are ignored; known keys overwrite the defaults.
"""

import json
import os
from pathlib import Path
from typing import Any

_CONFIG_DEFAULTS: dict[str, Any] = {
    "max_trials": 100_000,
    "max_redraws": 10_000,
    "web_tolerance": 10,
    "default_packs": ["baseset", "miniexpansion"],
    "default_player_count": 3,
    "default_loss_pct": 50,
    "default_tolerance": 10,
}


def _config_path(path: Path | None) -> Path | None:
    if path is not None:
        return path
    env = os.getenv("SENTINELS_CONFIG", "")
    return Path(env) if env else None


def get_config(path: Path | None = None) -> dict[str, Any]:
    """Read config, returning defaults merged with stored values."""
    config: dict[str, Any] = {
        **_CONFIG_DEFAULTS,
        "default_packs": list(_CONFIG_DEFAULTS["default_packs"]),
    }
    resolved = _config_path(path)
    if resolved is not None and resolved.is_file():
        stored = json.loads(resolved.read_text())
        for key in _CONFIG_DEFAULTS:
            if key in stored:
                config[key] = stored[key]
    return config
