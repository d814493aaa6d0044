"""Main CLI entry point for samurai."""

import sys

from samurai.cli import alias_cmd, new_cmd


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print("Usage: samurai <command> [args...]", file=sys.stderr)
        print("Commands:", file=sys.stderr)
        print(
            "  new [bootstrap] [version] - Create a composer project from a bootstrap",
            file=sys.stderr,
        )
        print("  alias list                - List bootstrap aliases", file=sys.stderr)
        sys.exit(1)

    command = sys.argv[1]

    if command == "new":
        new_cmd.run_new_argv()
    elif command == "alias":
        alias_cmd.run_alias_argv()
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
