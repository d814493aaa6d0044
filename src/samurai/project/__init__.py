"""Project descriptor, bootstrap aliases and the questions that fill them."""

from samurai.project.alias import Alias, AliasManager
from samurai.project.project import Project
from samurai.project.questions import BootstrapQuestion, ProjectQuestion

__all__ = [
    "Alias",
    "AliasManager",
    "BootstrapQuestion",
    "Project",
    "ProjectQuestion",
]
