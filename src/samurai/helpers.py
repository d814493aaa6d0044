"""Shared helpers for samurai (path, emptiness, command options and quoting, prompting).

Used by composer, project and cli modules.
"""

from __future__ import annotations

import re
import shlex
from collections.abc import Mapping
from typing import Any

from rich.prompt import Prompt

COMPOSER_CONFIG_FILENAME = "composer.json"

PACKAGE_NAME_RE = re.compile(r"^[a-z0-9]([_.-]?[a-z0-9]+)*/[a-z0-9](([_.]?|-{0,2})[a-z0-9]+)*$")

# --- Path ---


def config_path_for(directory_path: str) -> str:
    """composer.json path for a project dir: strip trailing '/', append filename."""
    if directory_path:
        return directory_path.rstrip("/") + "/" + COMPOSER_CONFIG_FILENAME
    return COMPOSER_CONFIG_FILENAME


# --- Values ---


def is_empty(value: Any) -> bool:
    """True for None, '', 0, False and empty containers."""
    return not value


def is_package_name(s: str) -> bool:
    """Match composer's vendor/package naming rule (lowercase, one slash)."""
    return bool(PACKAGE_NAME_RE.match(s))


def split_keywords(s: str) -> list[str]:
    """Split a comma-separated answer into stripped, non-empty keywords."""
    return [k.strip() for k in s.split(",") if k.strip()]


# --- Command ---


def map_options(options: Mapping[str, Any] | None) -> str:
    """Render options as ' --key=value' suffixes, in insertion order."""
    if not options:
        return ""
    return "".join(f" --{key}={shlex.quote(str(value))}" for key, value in options.items())


def parse_option(s: str) -> tuple[str, str]:
    """Parse 'key=value' (or bare 'key', value '') from --option. Raises ValueError if key empty."""
    key, _sep, value = s.partition("=")
    key = key.strip().lstrip("-")
    if not key:
        msg = f"Invalid option: {s!r} (expected key=value)"
        raise ValueError(msg)
    return key, value


# --- Prompt ---


def ask(prompt: str, default: str = "") -> str:
    """Ask a free-text question; empty answer returns default."""
    return Prompt.ask(prompt, default=default, show_default=bool(default))
