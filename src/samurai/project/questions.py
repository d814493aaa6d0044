"""Interactive questions that fill a Project.

Each question takes its collaborators explicitly: the Project to fill, and an
``ask(prompt, default) -> answer`` callable (a rich prompt by default). Answers
passed to ``execute`` skip the matching prompt. Prompt errors (EOFError,
KeyboardInterrupt) propagate to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.console import Console
from rich.prompt import InvalidResponse, Prompt
from rich.table import Table

from samurai.config import DEFAULT_BOOTSTRAP
from samurai.errors import InvalidInputError
from samurai.helpers import ask as ask_prompt
from samurai.helpers import is_package_name, split_keywords
from samurai.project.alias import AliasManager
from samurai.project.project import Project

log = logging.getLogger(__name__)

AskFn = Callable[[str, str], str]


class PackageNamePrompt(Prompt):
    """Prompt that re-asks until the answer is a lowercase vendor/package name."""

    def process_response(self, value: str) -> str:
        name = super().process_response(value).strip()
        if not is_package_name(name):
            msg = "[prompt.invalid]Use a lowercase vendor/package name"
            raise InvalidResponse(msg)
        return name


def ask_package_name(prompt: str, default: str = "") -> str:
    # An empty default would be returned unvalidated on a bare Enter.
    if default:
        return PackageNamePrompt.ask(prompt, default=default)
    return PackageNamePrompt.ask(prompt)


class BootstrapQuestion:
    """Ask which bootstrap package (or alias) to scaffold from, then its version."""

    def __init__(
        self,
        project: Project,
        alias_manager: AliasManager | None = None,
        ask: AskFn = ask_prompt,
        default_bootstrap: str = DEFAULT_BOOTSTRAP,
        console: Console | None = None,
    ) -> None:
        self.project = project
        self.alias_manager = alias_manager or AliasManager()
        self.ask = ask
        self.default_bootstrap = default_bootstrap
        self.console = console or Console()

    def execute(self, bootstrap: str | None = None, version: str | None = None) -> bool:
        if bootstrap is None:
            bootstrap = self._ask_bootstrap()
        package, alias_version = self.alias_manager.resolve(bootstrap.strip() or self.default_bootstrap)
        self.project.bootstrap_name = package

        if version is None:
            version = self.ask("Which version of the bootstrap? (empty for the latest)", alias_version)
        self.project.bootstrap_version = (version or "").strip()

        log.debug(
            "Bootstrap: %s %s", self.project.bootstrap_name, self.project.bootstrap_version or "(latest)"
        )
        return True

    def _ask_bootstrap(self) -> str:
        aliases = self.alias_manager.get_all()
        if aliases:
            table = Table(title="Available bootstraps")
            table.add_column("Alias", style="cyan")
            table.add_column("Package")
            table.add_column("Version")
            table.add_column("Description", style="dim")
            for alias in aliases:
                table.add_row(alias.name, alias.package, alias.version, alias.description)
            self.console.print(table)
        return self.ask("Which bootstrap do you want to use? (alias or vendor/package)", self.default_bootstrap)


class ProjectQuestion:
    """Ask for the new project's composer.json values (name, description, authors...)."""

    def __init__(
        self,
        project: Project,
        ask: AskFn = ask_prompt,
        ask_name: AskFn = ask_package_name,
    ) -> None:
        self.project = project
        self.ask = ask
        self.ask_name = ask_name

    def execute(
        self,
        name: str | None = None,
        description: str | None = None,
        package_type: str | None = None,
        keywords: str | None = None,
        homepage: str | None = None,
        license: str | None = None,
        author_name: str | None = None,
        author_email: str | None = None,
    ) -> bool:
        if name is None:
            name = self.ask_name("Package name (vendor/package)", self.project.name)
        name = name.strip()
        if not is_package_name(name):
            msg = f"Invalid package name: {name!r} (expected vendor/package, lowercase)"
            raise InvalidInputError(msg, field="name")
        self.project.name = name

        self.project.description = self._answer(description, "Description", "")
        self.project.type = self._answer(package_type, "Package type", "library")
        self.project.keywords = split_keywords(self._answer(keywords, "Keywords (comma separated)", ""))
        self.project.homepage = self._answer(homepage, "Homepage", "")
        self.project.license = self._answer(license, "License", "MIT")

        author = self._answer(author_name, "Author name", "")
        if author:
            self.project.add_author(author, email=self._answer(author_email, "Author email", ""))
        return True

    def _answer(self, given: str | None, prompt: str, default: str) -> str:
        if given is not None:
            return given.strip()
        return self.ask(prompt, default).strip()
