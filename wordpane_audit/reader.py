"""
Tail reader: last N complete lines of the audit log.

tail() walks backward from end-of-file in CHUNK_SIZE blocks until it has seen
enough line breaks, so a large log is never loaded whole when N is small.
tail_naive() reads everything and slices; same contract, kept as the reference.
"""
import os
from pathlib import Path
from wordpane_audit.schemas import TailResult

DEFAULT_TAIL_LINES = 50
CHUNK_SIZE = 8192


def normalize_count(n: int | None) -> int:
    """n <= 0 (or missing) means the default window."""
    if n is None or n <= 0:
        return DEFAULT_TAIL_LINES
    return n


def _split_complete(data: bytes) -> list[str]:
    """Decode complete, non-blank lines. data must start at a line boundary and end after a newline."""
    out = []
    for raw in data.split(b"\n")[:-1]:
        text = raw.decode("utf-8", errors="replace").rstrip("\r")
        if text.strip():
            out.append(text)
    return out


def tail(file_path: str | Path, n: int | None = DEFAULT_TAIL_LINES) -> TailResult:
    """Last min(n, total) complete lines, oldest first. A trailing partial line is ignored."""
    n = normalize_count(n)
    path = Path(file_path)
    try:
        f = path.open("rb")
    except FileNotFoundError:
        return TailResult(exists=False)

    with f:
        end = f.seek(0, os.SEEK_END)
        # Drop a trailing partial line: find the last newline first.
        pos = end
        buf = b""
        while pos > 0:
            step = min(CHUNK_SIZE, pos)
            pos -= step
            f.seek(pos)
            buf = f.read(step) + buf
            cut = buf.rfind(b"\n")
            if cut != -1:
                buf = buf[: cut + 1]
                break
        else:
            return TailResult(exists=True)

        # Keep reading backward until the window holds n non-blank lines or the file start.
        while True:
            lines = _split_complete(buf[buf.find(b"\n") + 1:] if pos > 0 else buf)
            if len(lines) >= n or pos == 0:
                break
            step = min(CHUNK_SIZE, pos)
            pos -= step
            f.seek(pos)
            buf = f.read(step) + buf

    return TailResult(exists=True, lines=lines[-n:])


def tail_naive(file_path: str | Path, n: int | None = DEFAULT_TAIL_LINES) -> TailResult:
    """Full read then slice. Same results as tail()."""
    n = normalize_count(n)
    path = Path(file_path)
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        return TailResult(exists=False)
    end = data.rfind(b"\n")
    if end == -1:
        return TailResult(exists=True)
    return TailResult(exists=True, lines=_split_complete(data[: end + 1])[-n:])
