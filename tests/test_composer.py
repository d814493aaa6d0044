"""Tests for samurai.composer.composer.Composer and samurai.composer.executor.Executor."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest


class TestCreateProject:
    def test_raises_when_bootstrap_missing(self, executor) -> None:
        from samurai.composer import Composer
        from samurai.errors import InvalidInputError
        from samurai.project import Project

        with pytest.raises(InvalidInputError) as exc:
            Composer(Project(directory_path="app"), executor).create_project()
        assert exc.value.field == "bootstrap_name"
        assert executor.commands == []

    def test_command_trimmed_without_version_and_options(self, executor) -> None:
        from samurai.composer import Composer
        from samurai.project import Project

        project = Project(bootstrap_name="vendor/package", directory_path="app")
        rc = Composer(project, executor).create_project({})
        assert rc == 0
        assert executor.commands == ["composer create-project vendor/package app"]

    def test_options_appended_in_order(self, executor) -> None:
        from samurai.composer import Composer
        from samurai.project import Project

        project = Project(bootstrap_name="vendor/package", directory_path="app")
        Composer(project, executor).create_project({"no-interaction": "1", "stability": "dev"})
        (cmd,) = executor.commands
        assert cmd == "composer create-project vendor/package app --no-interaction=1 --stability=dev"

    def test_version_included(self, executor) -> None:
        from samurai.composer import Composer
        from samurai.project import Project

        project = Project(
            bootstrap_name="vendor/package", bootstrap_version="1.0.0", directory_path="app"
        )
        Composer(project, executor).create_project({"no-interaction": "1"})
        assert executor.commands == [
            "composer create-project vendor/package app 1.0.0 --no-interaction=1"
        ]

    def test_returns_executor_code(self, executor) -> None:
        from samurai.composer import Composer
        from samurai.project import Project

        executor.returncode = 2
        project = Project(bootstrap_name="vendor/package")
        assert Composer(project, executor).create_project() == 2
        assert executor.commands == ["composer create-project vendor/package"]

    def test_custom_composer_bin(self, executor) -> None:
        from samurai.composer import Composer
        from samurai.project import Project

        project = Project(bootstrap_name="vendor/package", directory_path="app")
        Composer(project, executor, composer_bin="composer.phar").create_project()
        assert executor.commands == ["composer.phar create-project vendor/package app"]


class TestConfigPath:
    def test_without_directory(self, executor) -> None:
        from samurai.composer import Composer
        from samurai.project import Project

        assert Composer(Project(), executor).get_config_path() == "composer.json"

    def test_trailing_slash_normalized(self, executor) -> None:
        from samurai.composer import Composer
        from samurai.project import Project

        assert Composer(Project(directory_path="app/"), executor).get_config_path() == (
            "app/composer.json"
        )
        assert Composer(Project(directory_path="a/b"), executor).get_config_path() == (
            "a/b/composer.json"
        )


class TestValidateConfig:
    def test_cd_into_directory(self, executor) -> None:
        from samurai.composer import Composer
        from samurai.project import Project

        Composer(Project(directory_path="app"), executor).validate_config()
        assert executor.commands == ["cd app && composer validate"]

    def test_no_cd_without_directory(self, executor) -> None:
        from samurai.composer import Composer
        from samurai.project import Project

        Composer(Project(), executor).validate_config()
        assert executor.commands == ["composer validate"]


class TestResetConfig:
    def test_raises_when_config_missing(self, tmp_path: Path, executor) -> None:
        from samurai.composer import Composer
        from samurai.errors import ConfigUnavailableError
        from samurai.project import Project

        path = str(tmp_path / "missing")
        with pytest.raises(ConfigUnavailableError) as exc:
            Composer(Project(directory_path=path), executor).reset_config()
        assert exc.value.path == f"{path}/composer.json"
        assert f"{path}/composer.json" in str(exc.value)

    def test_raises_when_config_unparseable(self, tmp_path: Path, executor) -> None:
        from samurai.composer import Composer
        from samurai.errors import ConfigUnavailableError
        from samurai.project import Project

        (tmp_path / "composer.json").write_text("{")
        with pytest.raises(ConfigUnavailableError):
            Composer(Project(directory_path=str(tmp_path)), executor).reset_config()

    def test_merges_project_and_cleans(self, project_dir: Path, executor) -> None:
        from samurai.composer import Composer
        from samurai.project import Project

        project = Project(
            bootstrap_name="raphhh/php-lib-bootstrap",
            directory_path=str(project_dir) + "/",
            name="acme/tool",
            keywords=["cli"],
        )
        project.add_author("Jane Doe", email="jane@example.com")
        n = Composer(project, executor).reset_config()

        raw = (project_dir / "composer.json").read_bytes()
        assert n == len(raw)
        got = json.loads(raw)
        assert got == {
            "name": "acme/tool",
            "description": "Bootstrap for a PHP library",
            "keywords": ["cli"],
            "authors": [{"name": "Jane Doe", "email": "jane@example.com"}],
            "require": {"php": ">=5.4"},
            "autoload": {"psr-4": {"Vendor\\Package\\": "src/"}},
        }
        assert executor.commands == []


class TestExecutor:
    def test_returns_exit_code(self, tmp_path: Path) -> None:
        from samurai.composer import Executor

        with patch("samurai.composer.executor.subprocess.run") as m_run:
            m_run.return_value = MagicMock(returncode=3)
            assert Executor(cwd=tmp_path).flush("composer validate") == 3
        m_run.assert_called_once_with("composer validate", shell=True, cwd=tmp_path)

    def test_os_error_raises_external_process_error(self) -> None:
        from samurai.composer import Executor
        from samurai.errors import ExternalProcessError

        with patch("samurai.composer.executor.subprocess.run", side_effect=OSError("no shell")):
            with pytest.raises(ExternalProcessError) as exc:
                Executor().flush("composer validate")
        assert exc.value.command == "composer validate"
        assert exc.value.returncode is None


class TestShellQuoting:
    def test_directory_with_space_quoted(self, executor) -> None:
        from samurai.composer import Composer
        from samurai.project import Project

        project = Project(bootstrap_name="vendor/package", directory_path="my app")
        composer = Composer(project, executor)
        composer.create_project()
        composer.validate_config()
        assert executor.commands == [
            "composer create-project vendor/package 'my app'",
            "cd 'my app' && composer validate",
        ]

    def test_option_values_quoted(self, executor) -> None:
        from samurai.composer import Composer
        from samurai.project import Project

        project = Project(
            bootstrap_name="vendor/package", bootstrap_version="^1.0 || ^2.0", directory_path="app"
        )
        Composer(project, executor).create_project({"repository": "https://x.test/a b"})
        assert executor.commands == [
            "composer create-project vendor/package app '^1.0 || ^2.0'"
            " --repository='https://x.test/a b'"
        ]
