# rpgdev

Turn your shell history into experience points. `rpgdev` reads
`~/.zsh_history`, awards XP for the developer commands it finds, and keeps a
small state file, `~/.rpd_state.json`, so it can show how much you have gained
since the last check.

## Installation

```
pip install .
```

This installs the `rpd` command.

## Usage

```
rpd hi      # say hello
rpd help    # print the list of commands
rpd xp      # scan ~/.zsh_history, print the XP earned and save the total
rpd get     # print the XP saved by the last scan, without scanning again
```

Run with no command, `rpd` prints a usage line. An unknown command prints a
message that points to `rpd help`.

`rpd xp` reads the last 10 MiB of the history file. It prints the file's
modification time and how many bytes it has grown by since the previous scan.
Each line is split at its first space and the text after that space is taken
as the command; lines with no space are skipped. It then prints every command
that earns XP, the total, and the XP gained since the previous scan, and writes
the new total, the file size and the time of the scan to the state file.

`rpd get` reads only the state file. If there is no state file yet, it reports
0 XP.

If the history file is missing, the state file cannot be decoded, or a history
line is 64 KiB or longer, the command prints an error message instead.

## XP table

| Command  | XP |
|----------|----|
| docker   | 5  |
| go       | 3  |
| cargo    | 3  |
| pnpm     | 2  |
| npm      | 2  |
| make     | 2  |
| python   | 2  |
| node     | 2  |
| git      | 1  |
| git a-c  | 3  |

Only the first word of a command is checked against the table, and it must
match exactly. For example, `docker-compose` earns nothing.

## Library use

```python
from rpgdev.xp import calculate_xp_from_command, calculate_total_xp, get_xp_commands
from rpgdev.history import load_history_with_paths, get_current_xp, load_state

calculate_xp_from_command("git a-c -m 'wip'")   # (3, "git a-c")
calculate_xp_from_command("ls -la")             # (0, "ls")
calculate_total_xp(["go build", "npm install"])  # prints a summary, returns 5

history = load_history_with_paths("history.txt", "state.json")
print(history.total_xp, len(history.commands))

state = load_state("state.json")                 # empty State if the file is missing
print(state.last_xp, state.last_size, state.last_checked)
```

`rpgdev.fileutils` provides `read_last_n_bytes(path, n)` and
`get_file_metadata(path)`, which returns the modification time and size of a
file.

## Limitations

- History lines are expected in the form `<timestamp> <command>`. In zsh's
  extended history format (`: 1640995200:0;docker run nginx`), the text after
  the first space starts with the timestamp, so those commands earn no XP.
- Commands are only scored, not grouped into categories, and there is no
  command for rebuilding or updating the `rpd` tool itself.

## Development

```
pip install -e ".[test]"
pytest
```