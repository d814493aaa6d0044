"""Errors raised by samurai. The CLI catches SamuraiError and exits non-zero."""

from __future__ import annotations


class SamuraiError(Exception):
    """Base class for samurai errors."""


class InvalidInputError(SamuraiError, ValueError):
    """A required project field is missing or malformed."""

    def __init__(self, message: str, field: str = "") -> None:
        super().__init__(message)
        self.field = field


class ConfigUnavailableError(SamuraiError, RuntimeError):
    """composer.json could not be loaded or parsed."""

    def __init__(self, path: str) -> None:
        msg = f'Impossible to load the composer config from file "{path}"'
        super().__init__(msg)
        self.path = path


class ExternalProcessError(SamuraiError):
    """A command could not be launched, or exited non-zero."""

    def __init__(self, command: str, returncode: int | None = None, reason: str = "") -> None:
        if returncode is None:
            msg = f"Could not run command: {command}" + (f" ({reason})" if reason else "")
        else:
            msg = f"Command failed with exit code {returncode}: {command}"
        super().__init__(msg)
        self.command = command
        self.returncode = returncode
