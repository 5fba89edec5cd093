"""Command-line entry point dispatching to the mesh commands."""

from __future__ import annotations

import sys
from typing import Dict, Optional, Sequence

from .commands import Command, CommandError, Cube, Sphere
from .split import Split


class Application:
    """A registry of commands run by name."""

    def __init__(self) -> None:
        self.commands: Dict[str, Command] = {}

    def register(self, command: Command) -> None:
        """Add a command; the first one registered under a name is kept."""
        self.commands.setdefault(command.name, command)

    def execute(self, argv: Sequence[str]) -> int:
        """Run ``argv`` (command name then ``--key value`` pairs); return the exit status."""
        if not argv:
            print("Error: No command specified.", file=sys.stderr)
            return 1
        name, rest = argv[0], list(argv[1:])
        command = self.commands.get(name)
        if command is None:
            print(f"Error: Unknown command '{name}'.", file=sys.stderr)
            return 1

        args: Dict[str, str] = {}
        for key, value in zip(rest[::2], rest[1::2]):
            if key.startswith("--"):
                key = key[2:]
            args[key] = value

        try:
            message = command.execute(args)
        except CommandError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return exc.code
        print(message)
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the mesh tool with the sphere, cube and split commands."""
    app = Application()
    app.register(Sphere())
    app.register(Cube())
    app.register(Split())
    return app.execute(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())