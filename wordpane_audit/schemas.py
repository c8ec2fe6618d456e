"""
Data shapes for the audit recorder.

- AuditEvent: what a handler captures (transient, only its encoded line is stored).
- LogLine: a stored line parsed back into fields (tests/tooling only).
- UserRecord / PostRecord: payloads delivered by the host's event source.
- AppendResult / TailResult: outcomes of the writer and the tailer.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

GUEST_LOGIN = "guest/cron"
UNKNOWN_IP = "unknown_ip"
UNKNOWN = "unknown"

CATEGORIES: tuple[str, ...] = ("user_register", "profile_update", "delete_user", "login", "delete_post")


# --- Who did it ---

class Actor(BaseModel):
    """Identity attributed to an event. id 0 means anonymous."""

    id: int = 0
    login: str = GUEST_LOGIN


# --- Upstream payloads ---

class UserRecord(BaseModel):
    """A user as the host resolves it at event time."""

    id: int
    login: str
    email: str = ""
    roles: List[str] = Field(default_factory=list)


class PostRecord(BaseModel):
    """A post/page about to be deleted."""

    id: int
    post_type: str = "post"
    post_status: str = ""
    title: str = ""


# --- Event and stored line ---

class AuditEvent(BaseModel):
    """One captured event. category is a snake-case tag, not a closed set."""

    category: str
    message: str
    actor: Optional[Actor] = None
    origin_address: str = UNKNOWN_IP
    timestamp: datetime


class LogLine(BaseModel):
    """A stored line split back into its fields."""

    timestamp: datetime
    category: str
    actor_id: int
    actor_login: str
    origin_address: str
    message: str
    raw: str


# --- I/O outcomes ---

class AppendResult(BaseModel):
    """Outcome of one append. error is set when ok is False."""

    ok: bool
    path: str
    bytes_written: int = 0
    error: Optional[str] = None


class TailResult(BaseModel):
    """Last lines of the log. exists=False means the file is not there yet."""

    exists: bool
    lines: List[str] = Field(default_factory=list)
