"""
Line codec: AuditEvent <-> one text line.

  [YYYY-MM-DD HH:MM:SS] category=<cat> user=<login>(ID:<id>) ip=<addr> | <message>

Fields are not escaped. Callers keep line breaks out of the message.
"""
import re
from datetime import datetime
from wordpane_audit.schemas import AuditEvent, LogLine, GUEST_LOGIN

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

LINE_RE = re.compile(
    r"^\[(?P<ts>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\]"
    r" category=(?P<category>\S+)"
    r" user=(?P<login>.*?)\(ID:(?P<id>-?\d+)\)"
    r" ip=(?P<ip>.*?)"
    r" \| (?P<message>.*)$"
)


class DecodeError(ValueError):
    """A line that does not match the log line layout. Returned by decode, not raised."""

    def __init__(self, raw: str, reason: str):
        super().__init__(f"{reason}: {raw!r}")
        self.raw = raw
        self.reason = reason


def encode(event: AuditEvent) -> str:
    """Render the event as one line, terminated by a single newline."""
    if event.actor and event.actor.id:
        uid, login = event.actor.id, event.actor.login
    else:
        uid, login = 0, GUEST_LOGIN
    return "[%s] category=%s user=%s(ID:%d) ip=%s | %s\n" % (
        event.timestamp.strftime(TIMESTAMP_FORMAT),
        event.category,
        login,
        uid,
        event.origin_address,
        event.message,
    )


def decode(line: str) -> LogLine | DecodeError:
    """Parse one stored line. Malformed input yields a DecodeError value."""
    raw = line[:-1] if line.endswith("\n") else line
    if raw.endswith("\r"):
        raw = raw[:-1]
    if "\n" in raw:
        return DecodeError(line, "more than one line")
    m = LINE_RE.match(raw)
    if not m:
        return DecodeError(line, "line does not match audit layout")
    try:
        ts = datetime.strptime(m.group("ts"), TIMESTAMP_FORMAT)
    except ValueError as e:
        return DecodeError(line, f"bad timestamp ({e})")
    return LogLine(
        timestamp=ts,
        category=m.group("category"),
        actor_id=int(m.group("id")),
        actor_login=m.group("login"),
        origin_address=m.group("ip"),
        message=m.group("message"),
        raw=raw,
    )
