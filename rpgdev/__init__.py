"""Score developer commands from shell history as XP and keep the total between scans."""

__version__ = "0.1.0"