"""Project being created: bootstrap to scaffold from, target directory, manifest values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# composer.json keys projected by Project.to_config, in output order.
CONFIG_KEYS = ("name", "description", "type", "keywords", "homepage", "license", "authors")


@dataclass
class Project:
    bootstrap_name: str = ""
    bootstrap_version: str = ""
    directory_path: str = ""
    name: str = ""
    description: str = ""
    type: str = ""
    keywords: list[str] = field(default_factory=list)
    homepage: str = ""
    license: str = ""
    authors: list[dict[str, str]] = field(default_factory=list)

    def add_author(self, name: str, email: str = "", homepage: str = "", role: str = "") -> None:
        author = {"name": name, "email": email, "homepage": homepage, "role": role}
        self.authors.append({k: v for k, v in author.items() if v})

    def to_config(self) -> dict[str, Any]:
        """composer.json entries for the values that were set (bootstrap fields excluded)."""
        out: dict[str, Any] = {}
        for key in CONFIG_KEYS:
            value = getattr(self, key)
            if value:
                out[key] = list(value) if isinstance(value, list) else value
        return out
