"""Tool settings: defaults, optional YAML settings file, env override.

Settings YAML format:
- composer_bin: composer executable used in generated commands (default: composer)
- default_bootstrap: bootstrap package suggested by the question flow
- aliases: map alias name -> { package, version?, description? }
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

log = logging.getLogger(__name__)

SETTINGS_ENV = "SAMURAI_SETTINGS"
SETTINGS_FILENAME = ".samurai.yml"
DEFAULT_BOOTSTRAP = "raphhh/php-lib-bootstrap"

DEFAULT_SETTINGS: dict[str, Any] = {
    "composer_bin": "composer",
    "default_bootstrap": DEFAULT_BOOTSTRAP,
    "aliases": {},
}


def resolve_settings(settings: dict[str, Any] | None) -> dict[str, Any]:
    """Return settings dict with defaults filled. Unknown keys are ignored."""
    out = dict(DEFAULT_SETTINGS)
    out["aliases"] = {}
    if not settings:
        return out
    for key, value in settings.items():
        if key not in out or value is None:
            continue
        if key == "aliases":
            if not isinstance(value, dict):
                log.warning("Ignoring aliases setting: expected a mapping, got %s", type(value).__name__)
                continue
            out["aliases"] = {str(k): v for k, v in value.items() if isinstance(v, dict)}
        else:
            out[key] = str(value)
    return out


def settings_path(explicit: Path | None = None) -> Path | None:
    """Settings file: explicit path, else env SAMURAI_SETTINGS, else ~/.samurai.yml if present."""
    if explicit is not None:
        return explicit
    if os.environ.get(SETTINGS_ENV):
        return Path(os.environ[SETTINGS_ENV]).expanduser().resolve()
    home = Path.home() / SETTINGS_FILENAME
    return home if home.exists() else None


def load_settings(path: Path | None) -> dict[str, Any]:
    """Load settings YAML from path (missing path or file -> defaults).

    Raises ValueError naming the path if the file is unreadable, not YAML, or not a mapping.
    """
    if path is None or not path.is_file():
        if path is not None:
            log.debug("Settings file not found: %s", path)
        return resolve_settings(None)
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        msg = f"Could not read settings file {path}: {e}"
        raise ValueError(msg) from e
    if not isinstance(data, dict):
        msg = f"Invalid settings file (expected a mapping): {path}"
        raise ValueError(msg)
    log.debug("Loaded settings from %s", path)
    return resolve_settings(data)
