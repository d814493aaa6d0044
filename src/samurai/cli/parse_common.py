"""Shared CLI helpers for common flags (--settings, --verbose)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from samurai.config import load_settings, settings_path


def path_resolver(s: str) -> Path:
    """Resolve a path argument to absolute Path (e.g. --settings)."""
    return Path(s).expanduser().resolve()


def settings_from(explicit: Path | None) -> dict[str, Any]:
    """Resolved settings from --settings, SAMURAI_SETTINGS or ~/.samurai.yml."""
    return load_settings(settings_path(explicit))


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
