"""Read and write composer.json documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)


class ComposerConfigManager:
    """Load/save a composer.json as a dict. No caching: every call hits the file system."""

    def get(self, path: str | Path) -> dict[str, Any] | None:
        """Parsed document at path, or None if missing, unreadable, invalid JSON or not an object."""
        p = Path(path)
        if not p.is_file():
            return None
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            log.warning("Could not read composer config %s: %s", p, e)
            return None
        if not isinstance(data, dict):
            log.warning("Composer config %s is not a JSON object", p)
            return None
        return data

    def set(self, path: str | Path, config: dict[str, Any]) -> int:
        """Write config as pretty JSON to path (create or overwrite). Returns bytes written."""
        content = json.dumps(config, indent=4, ensure_ascii=False) + "\n"
        data = content.encode("utf-8")
        p = Path(path)
        p.write_bytes(data)
        log.debug("Wrote %d bytes to %s", len(data), p)
        return len(data)
