"""
CLI: query the audit log.

  wordpane-audit last [N]      print the N most recent lines (default 50)

A missing or empty log is reported, never treated as a failure: exit code is always 0.
"""
import argparse
import re
from pathlib import Path
from typing import Callable
from wordpane_audit.config import get_log_file, get_tail_default
from wordpane_audit.reader import tail


def show_last(
    n: int | None = None,
    log_path: str | Path | None = None,
    echo: Callable[[str], None] = print,
) -> int:
    """Print the last n lines verbatim, or a warning/info message. Returns the exit code."""
    path = Path(log_path) if log_path else get_log_file()
    if n is None:
        n = get_tail_default()
    result = tail(path, n)

    if not result.exists:
        echo(f"Warning: audit log does not exist yet: {path}")
        return 0
    if not result.lines:
        echo("Audit log is empty.")
        return 0
    for line in result.lines:
        echo(line)
    return 0


def _line_count(raw: str) -> int | None:
    """Leading integer of raw ("12abc" -> 12); None when there is none, so junk never fails the command."""
    m = re.match(r"\s*([+-]?\d+)", raw)
    return int(m.group(1)) if m else None


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="wordpane-audit", description="Query the WordPane audit log")
    p.add_argument("--file", default=None, help="Log file (default: <WORDPANE_CONTENT_DIR>/wordpane-audit.log)")
    sub = p.add_subparsers(dest="command", required=True)
    last = sub.add_parser("last", help="Show the most recent lines")
    last.add_argument("n", nargs="?", type=_line_count, default=None, help="Number of lines (default 50; <= 0 or junk means 50)")
    args = p.parse_args(argv)

    if args.command == "last":
        return show_last(args.n, log_path=args.file)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
