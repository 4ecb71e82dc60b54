"""Experience points awarded for shell commands."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass


@dataclass(frozen=True)
class XPCommand:
    """A command name and the XP one use of it is worth."""

    prefix: str
    xp: int


_XP_COMMANDS: tuple[XPCommand, ...] = (
    XPCommand("docker", 5),
    XPCommand("go", 3),
    XPCommand("pnpm", 2),
    XPCommand("npm", 2),
    XPCommand("git", 1),
    XPCommand("make", 2),
    XPCommand("cargo", 3),
    XPCommand("python", 2),
    XPCommand("node", 2),
)

_GIT_ADD_COMMIT = "a-c"
_GIT_ADD_COMMIT_XP = 3


def get_xp_commands() -> list[XPCommand]:
    """Return the commands that award XP, in priority order."""
    return list(_XP_COMMANDS)


def calculate_xp_from_command(command: str) -> tuple[int, str]:
    """Return the XP a command line earns and the name it is counted under."""
    parts = command.split()
    if not parts:
        return 0, ""

    base = parts[0]
    for entry in _XP_COMMANDS:
        if base == entry.prefix:
            if base == "git" and len(parts) > 1 and parts[1] == _GIT_ADD_COMMIT:
                return _GIT_ADD_COMMIT_XP, f"{base} {_GIT_ADD_COMMIT}"
            return entry.xp, base
    return 0, base


def calculate_total_xp(commands) -> int:
    """Sum the XP of the given command lines and print a summary per command."""
    xp_by_name: dict[str, int] = {}
    uses: Counter[str] = Counter()

    for command in commands:
        earned, name = calculate_xp_from_command(command)
        if earned > 0:
            xp_by_name[name] = xp_by_name.get(name, 0) + earned
            uses[name] += 1

    total = sum(xp_by_name.values())

    print("\n📊 XP Summary by Command:")
    for name, name_xp in xp_by_name.items():
        count = uses[name]
        print(f"  {name}: {name_xp} XP ({count} uses, avg {name_xp / count:.1f} XP per use)")
    print(f"\n💎 Total XP: {total}")

    return total