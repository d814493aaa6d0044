"""Composer wrapper: create-project, validate, composer.json load/merge/clean/save."""

from samurai.composer.clean import clean_config, merge_config
from samurai.composer.composer import Composer
from samurai.composer.config import ComposerConfigManager
from samurai.composer.executor import Executor

__all__ = [
    "Composer",
    "ComposerConfigManager",
    "Executor",
    "clean_config",
    "merge_config",
]
