"""Bootstrap aliases: short names (e.g. lib) for bootstrap packages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Alias:
    name: str
    package: str
    version: str = ""
    description: str = ""


BUILTIN_ALIASES: tuple[Alias, ...] = (
    Alias(
        name="lib",
        package="raphhh/php-lib-bootstrap",
        description="Bootstrap for a PHP library",
    ),
)


class AliasManager:
    """Ordered alias registry. Settings aliases override built-ins of the same name."""

    def __init__(self, aliases: list[Alias] | None = None) -> None:
        self._aliases: dict[str, Alias] = {}
        for alias in BUILTIN_ALIASES:
            self.add(alias)
        for alias in aliases or []:
            self.add(alias)

    @classmethod
    def from_settings(cls, settings: dict[str, Any]) -> AliasManager:
        """Build from resolved settings (aliases: name -> {package, version?, description?})."""
        aliases: list[Alias] = []
        for name, spec in (settings.get("aliases") or {}).items():
            package = str(spec.get("package") or "").strip()
            if not package:
                msg = f"Alias {name!r} has no package"
                raise ValueError(msg)
            aliases.append(
                Alias(
                    name=name,
                    package=package,
                    version=str(spec.get("version") or ""),
                    description=str(spec.get("description") or ""),
                )
            )
        return cls(aliases)

    def add(self, alias: Alias) -> None:
        self._aliases[alias.name] = alias

    def remove(self, name: str) -> None:
        self._aliases.pop(name, None)

    def has(self, name: str) -> bool:
        return name in self._aliases

    def get(self, name: str) -> Alias | None:
        return self._aliases.get(name)

    def get_all(self) -> list[Alias]:
        return list(self._aliases.values())

    def resolve(self, answer: str) -> tuple[str, str]:
        """(package, version) for an alias name; any other answer is taken as a package name."""
        alias = self.get(answer)
        if alias is None:
            return answer, ""
        return alias.package, alias.version
