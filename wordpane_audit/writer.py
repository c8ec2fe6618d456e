"""Append-only log writer.

Each append is one os.write() on a descriptor opened with O_APPEND, so the
kernel positions every write at end-of-file and concurrent writers (threads
or processes) never interleave partial lines. No application locks.
"""
import os
from pathlib import Path
from wordpane_audit.schemas import AppendResult

FILE_MODE = 0o644
OPEN_FLAGS = os.O_WRONLY | os.O_APPEND | os.O_CREAT | getattr(os, "O_CLOEXEC", 0)


def append(file_path: str | Path, line: str) -> AppendResult:
    """Append one line (newline added if missing). Never truncates, never raises OSError."""
    path = str(file_path)
    if not line.endswith("\n"):
        line += "\n"
    data = line.encode("utf-8")

    try:
        fd = os.open(path, OPEN_FLAGS, FILE_MODE)
    except OSError as e:
        return AppendResult(ok=False, path=path, error=f"open failed: {e}")
    try:
        written = os.write(fd, data)
    except OSError as e:
        return AppendResult(ok=False, path=path, error=f"write failed: {e}")
    finally:
        os.close(fd)

    if written != len(data):
        # Retrying the rest would be a second write and could interleave.
        return AppendResult(
            ok=False,
            path=path,
            bytes_written=written,
            error=f"short write: {written} of {len(data)} bytes",
        )
    return AppendResult(ok=True, path=path, bytes_written=written)
