"""`samurai new`: ask questions, composer create-project, reset and validate composer.json."""

from __future__ import annotations

import argparse
import sys

from samurai.cli.parse_common import configure_logging, path_resolver, settings_from
from samurai.composer import Composer, Executor
from samurai.errors import ExternalProcessError, SamuraiError
from samurai.helpers import parse_option
from samurai.project import AliasManager, BootstrapQuestion, Project, ProjectQuestion


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="samurai new",
        description="Create a composer project from a bootstrap package",
    )
    ap.add_argument("bootstrap", nargs="?", default=None, help="Alias or vendor/package")
    ap.add_argument("version", nargs="?", default=None, help="Bootstrap version (default: latest)")
    ap.add_argument("--dir", dest="directory", default="", help="Target directory")
    ap.add_argument("--name", default=None, help="Package name of the new project (vendor/package)")
    ap.add_argument("--description", default=None, help="Project description")
    ap.add_argument("--type", dest="package_type", default=None, help="Package type (default: library)")
    ap.add_argument("--keywords", default=None, help="Comma-separated keywords")
    ap.add_argument("--homepage", default=None, help="Project homepage")
    ap.add_argument("--license", default=None, help="License identifier (default: MIT)")
    ap.add_argument("--author-name", default=None, help="Author name")
    ap.add_argument("--author-email", default=None, help="Author email")
    ap.add_argument(
        "--option",
        dest="options",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Extra composer create-project option (repeatable), e.g. --option no-install=1",
    )
    ap.add_argument("--settings", type=path_resolver, default=None, help="Settings YAML file")
    ap.add_argument("--no-validate", action="store_true", help="Skip composer validate")
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    return ap


def _check(rc: int, command: str) -> None:
    if rc != 0:
        raise ExternalProcessError(command, returncode=rc)


def run_new(args: argparse.Namespace) -> int:
    """Run the whole new-project flow. Returns 0, or the failing step's exit code."""
    settings = settings_from(args.settings)
    project = Project(directory_path=args.directory)

    BootstrapQuestion(
        project,
        alias_manager=AliasManager.from_settings(settings),
        default_bootstrap=settings["default_bootstrap"],
    ).execute(bootstrap=args.bootstrap, version=args.version)
    ProjectQuestion(project).execute(
        name=args.name,
        description=args.description,
        package_type=args.package_type,
        keywords=args.keywords,
        homepage=args.homepage,
        license=args.license,
        author_name=args.author_name,
        author_email=args.author_email,
    )

    options = dict(parse_option(o) for o in args.options)
    composer = Composer(
        project,
        Executor(),
        composer_bin=settings["composer_bin"],
    )

    try:
        _check(composer.create_project(options), "composer create-project")
        composer.reset_config()
        print(f"✅ Reset {composer.get_config_path()}")
        if not args.no_validate:
            _check(composer.validate_config(), "composer validate")
    except ExternalProcessError as e:
        print(f"❌ {e}", file=sys.stderr)
        return e.returncode or 1

    print(f"✅ Project {project.name} created from {project.bootstrap_name}")
    return 0


def run_new_argv(argv: list[str] | None = None) -> None:
    """Parse argv (after 'samurai new') and run; exits with the flow's code."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []
    args = _build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        rc = run_new(args)
    except (SamuraiError, ValueError) as e:
        print(f"❌ {e}", file=sys.stderr)
        rc = 1
    except (EOFError, KeyboardInterrupt):
        print("\nAborted.", file=sys.stderr)
        rc = 1
    sys.exit(rc)
