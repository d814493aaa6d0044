"""CLI for aliases: samurai alias list [--settings PATH]."""

from __future__ import annotations

import argparse
import sys

from samurai.cli.parse_common import configure_logging, path_resolver, settings_from
from samurai.project import AliasManager


def run_alias_list(alias_manager: AliasManager) -> int:
    for alias in alias_manager.get_all():
        version = f" ({alias.version})" if alias.version else ""
        desc = f" - {alias.description}" if alias.description else ""
        print(f"{alias.name}: {alias.package}{version}{desc}")
    return 0


def run_alias_argv(argv: list[str] | None = None) -> None:
    """Parse argv (after 'samurai alias') and run the subcommand."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []
    ap = argparse.ArgumentParser(prog="samurai alias", description="Bootstrap aliases")
    ap.add_argument("subcommand", choices=["list"], help="list: show known aliases")
    ap.add_argument("--settings", type=path_resolver, default=None, help="Settings YAML file")
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    try:
        alias_manager = AliasManager.from_settings(settings_from(args.settings))
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(run_alias_list(alias_manager))
