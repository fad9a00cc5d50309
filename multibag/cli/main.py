"""Entry point of the `multibag` console script: `multibag <command> [options]`."""

import sys
from typing import Any, Callable, Dict, List, Optional

from multibag.cli import count

COMMANDS: Dict[str, Callable[[Optional[List[str]]], Any]] = {
    "count": count.main,
}


def main(argv: Optional[List[str]] = None) -> Any:
    if argv is None:
        argv = sys.argv[1:]

    command_names = ", ".join(COMMANDS)
    if not argv:
        raise ValueError(f"Please choose a command from: {command_names}")

    command, *command_argv = argv
    if command not in COMMANDS:
        raise ValueError(f"Command {command} not supported; choose from: {command_names}")

    return COMMANDS[command](command_argv)


if __name__ == "__main__":
    main()
