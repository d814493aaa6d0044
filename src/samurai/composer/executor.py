"""Run composer command lines through the shell."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from samurai.errors import ExternalProcessError

log = logging.getLogger(__name__)


class Executor:
    """Flush a command string to the shell; output goes straight to the terminal."""

    def __init__(self, cwd: Path | None = None) -> None:
        self.cwd = cwd

    def flush(self, command: str) -> int:
        """Run command (shell syntax, e.g. 'cd app && composer validate'). Returns exit code."""
        log.info("Running: %s", command)
        try:
            r = subprocess.run(command, shell=True, cwd=self.cwd)
        except OSError as e:
            raise ExternalProcessError(command, reason=str(e)) from e
        if r.returncode != 0:
            log.debug("Command exited with %d: %s", r.returncode, command)
        return r.returncode
