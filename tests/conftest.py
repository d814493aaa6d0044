"""Pytest fixtures for samurai tests."""

from pathlib import Path

import pytest


class RecordingExecutor:
    """Executor stand-in: records flushed commands, returns a fixed exit code."""

    def __init__(self, returncode: int = 0) -> None:
        self.commands: list[str] = []
        self.returncode = returncode

    def flush(self, command: str) -> int:
        self.commands.append(command)
        return self.returncode


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Temporary project directory holding a composer.json like a bootstrap generates."""
    d = tmp_path / "app"
    d.mkdir()
    (d / "composer.json").write_text(
        """{
    "name": "raphhh/php-lib-bootstrap",
    "description": "Bootstrap for a PHP library",
    "version": "1.2.0",
    "time": "2015-03-01 10:00:00",
    "keywords": [],
    "authors": [{"name": "Raphaël Lefebvre", "email": ""}],
    "require": {"php": ">=5.4"},
    "require-dev": {},
    "autoload": {"psr-4": {"Vendor\\\\Package\\\\": "src/"}},
    "extra": {"branch-alias": {"dev-master": ""}}
}
"""
    )
    return d
