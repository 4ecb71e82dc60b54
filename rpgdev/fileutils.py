"""Small file helpers."""

from __future__ import annotations

import os
from datetime import datetime
from typing import NamedTuple


class FileMetadata(NamedTuple):
    """Modification time and size of a file."""

    mod_time: datetime
    size: int


def read_last_n_bytes(path, n: int) -> bytes:
    """Return the last ``n`` bytes of the file at ``path``, or all of it if shorter."""
    if n < 0:
        raise ValueError(f"cannot read a negative number of bytes: {n}")
    with open(path, "rb") as handle:
        size = os.fstat(handle.fileno()).st_size
        start = max(size - n, 0)
        handle.seek(start)
        data = handle.read(size - start)
    if len(data) != size - start:
        raise EOFError(f"expected {size - start} bytes from {path}, read {len(data)}")
    return data


def get_file_metadata(path) -> FileMetadata:
    """Return the modification time (local, timezone-aware) and size of a file."""
    info = os.stat(path)
    mod_time = datetime.fromtimestamp(info.st_mtime).astimezone()
    return FileMetadata(mod_time, info.st_size)