"""Shell history scanning and persisted XP state."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from rpgdev.fileutils import get_file_metadata, read_last_n_bytes
from rpgdev.xp import calculate_xp_from_command

HISTORY_FILE_NAME = ".zsh_history"
STATE_FILE_NAME = ".rpd_state.json"

_HISTORY_TAIL_BYTES = 10 * 1024 * 1024
_MAX_LINE_BYTES = 64 * 1024

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


class StateError(ValueError):
    """The state file could not be decoded."""


class HistoryError(ValueError):
    """The history file could not be scanned."""


@dataclass
class History:
    """Commands read from the history file and the XP they earned."""

    commands: list[str] = field(default_factory=list)
    total_xp: int = 0


@dataclass
class State:
    """What was seen the last time the history was scanned."""

    last_checked: datetime = ZERO_TIME
    last_size: int = 0
    last_xp: int = 0

    def to_dict(self) -> dict:
        checked = self.last_checked.astimezone().isoformat()
        if checked.endswith("+00:00"):
            checked = checked[:-6] + "Z"
        return {"last_checked": checked, "last_size": self.last_size, "last_xp": self.last_xp}

    @classmethod
    def from_dict(cls, data) -> "State":
        if not isinstance(data, dict):
            raise StateError("state must be a JSON object")
        state = cls()
        try:
            if data.get("last_checked") is not None:
                state.last_checked = datetime.fromisoformat(
                    data["last_checked"].replace("Z", "+00:00")
                )
            if data.get("last_size") is not None:
                state.last_size = int(data["last_size"])
            if data.get("last_xp") is not None:
                state.last_xp = int(data["last_xp"])
        except (AttributeError, TypeError, ValueError) as exc:
            raise StateError(f"invalid state: {exc}") from exc
        return state


def load_state(path) -> State:
    """Read the state file, or return an empty state if it does not exist."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return State()
    try:
        data, _ = json.JSONDecoder().raw_decode(text.lstrip())
    except json.JSONDecodeError as exc:
        raise StateError(f"cannot decode state file {path}: {exc}") from exc
    return State.from_dict(data)


def save_state(path, state: State) -> None:
    """Write the state file as indented JSON."""
    Path(path).write_text(json.dumps(state.to_dict(), indent=2) + "\n", encoding="utf-8")


def load_history_with_paths(history_path, state_path) -> History:
    """Scan the tail of a history file, report the XP earned and update the state."""
    state = load_state(state_path)
    mod_time, size = get_file_metadata(history_path)

    previous_xp = state.last_xp
    print(f"History file last modified: {mod_time}")
    print(f"Bytes added since last check: {size - state.last_size}")

    try:
        data = read_last_n_bytes(history_path, _HISTORY_TAIL_BYTES)
    except OSError:
        print("Error reading history file")
        raise

    commands: list[str] = []
    current_xp = 0
    for raw in data.split(b"\n"):
        if len(raw) >= _MAX_LINE_BYTES:
            print("Error with scanner")
            raise HistoryError("history line too long")
        line = raw.removesuffix(b"\r").decode("utf-8", errors="replace")
        parts = line.split(" ", 1)
        if len(parts) != 2:
            continue
        command = parts[1]
        commands.append(command)
        earned, _ = calculate_xp_from_command(command)
        current_xp += earned
        if earned > 0:
            print(f"🏅 {command} -> +{earned} XP")

    print(f"💎 Total XP: {current_xp}")
    print(f"📈 XP gained since last check: {current_xp - previous_xp}")

    state.last_checked = datetime.now().astimezone()
    state.last_size = size
    state.last_xp = current_xp
    save_state(state_path, state)

    return History(commands=commands, total_xp=current_xp)


def load_history() -> History:
    """Scan ``~/.zsh_history`` and update ``~/.rpd_state.json``."""
    home = Path.home()
    return load_history_with_paths(home / HISTORY_FILE_NAME, home / STATE_FILE_NAME)


def get_current_xp() -> int:
    """Return the XP stored by the last scan, without scanning again."""
    return load_state(Path.home() / STATE_FILE_NAME).last_xp