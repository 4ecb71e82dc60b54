"""Command-line entry point."""

from __future__ import annotations

import sys

from rpgdev.history import get_current_xp, load_history

_HELP = """Available commands:
  hi     - Say hello
  xp  - Calculate and display current XP
  xpGet  - Display current XP
  help   - Show this help message"""


def main(argv=None) -> int:
    """Run one command given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: rpd <command>")
        return 0

    command = args[0]
    if command == "hi":
        print("Hello from RPG Dev!!!")
    elif command == "help":
        print(_HELP)
    elif command == "xp":
        try:
            load_history()
        except (OSError, ValueError, EOFError) as exc:
            print(f"Error loading history: {exc}")
    elif command == "get":
        try:
            current = get_current_xp()
        except (OSError, ValueError) as exc:
            print(f"Error getting XP: {exc}")
        else:
            print(f"💎 Current XP: {current}")
    else:
        print("Unknown command:", command)
        print("Use 'rpd help' for available commands")
    return 0


if __name__ == "__main__":
    sys.exit(main())