"""Drive composer for a project: create-project, validate, and reset composer.json."""

from __future__ import annotations

import logging
import shlex
from collections.abc import Mapping
from typing import Any, Protocol

from samurai.composer.clean import clean_config, merge_config
from samurai.composer.config import ComposerConfigManager
from samurai.errors import ConfigUnavailableError, InvalidInputError
from samurai.helpers import config_path_for, map_options
from samurai.project.project import Project

log = logging.getLogger(__name__)


class CommandExecutor(Protocol):
    def flush(self, command: str) -> int: ...


class Composer:
    """Composer commands and composer.json handling for one Project."""

    def __init__(
        self,
        project: Project,
        executor: CommandExecutor,
        config_manager: ComposerConfigManager | None = None,
        composer_bin: str = "composer",
    ) -> None:
        self.project = project
        self.executor = executor
        self.config_manager = config_manager or ComposerConfigManager()
        self.composer_bin = composer_bin

    def create_project(self, options: Mapping[str, Any] | None = None) -> int:
        """Run composer create-project for the project's bootstrap. Raises InvalidInputError if no bootstrap."""
        if not self.project.bootstrap_name:
            msg = "The bootstrap of the project is not defined"
            raise InvalidInputError(msg, field="bootstrap_name")

        args = [
            self.project.bootstrap_name,
            self.project.directory_path,
            self.project.bootstrap_version,
        ]
        command = f"{self.composer_bin} create-project " + " ".join(
            shlex.quote(a) for a in args if a.strip()
        )
        return self.executor.flush(command + map_options(options))

    def get_config_path(self) -> str:
        return config_path_for(self.project.directory_path)

    def get_config(self) -> dict[str, Any] | None:
        return self.config_manager.get(self.get_config_path())

    def validate_config(self) -> int:
        """Run composer validate inside the project directory."""
        return self.executor.flush(self._cd() + f"{self.composer_bin} validate")

    def reset_config(self) -> int:
        """Merge project values into composer.json and clean it. Returns bytes written."""
        config = self.get_config()
        if config is None:
            raise ConfigUnavailableError(self.get_config_path())

        config = merge_config(config, self.project.to_config())
        config = clean_config(config)
        log.debug("Resetting %s with keys: %s", self.get_config_path(), ", ".join(config))
        return self.config_manager.set(self.get_config_path(), config)

    def _cd(self) -> str:
        if self.project.directory_path:
            return f"cd {shlex.quote(self.project.directory_path)} && "
        return ""
