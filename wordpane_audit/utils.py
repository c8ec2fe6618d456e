"""Helpers: default resolvers for actor, client address and clock."""
from datetime import datetime
from typing import Mapping
from wordpane_audit.schemas import Actor, UNKNOWN_IP


def client_address(environ: Mapping[str, str] | None) -> str:
    """Best-effort client IP from a WSGI-style environ: X-Forwarded-For first, then REMOTE_ADDR."""
    environ = environ or {}
    first_hop = (environ.get("HTTP_X_FORWARDED_FOR") or "").split(",")[0].strip()
    if first_hop:
        return first_hop
    remote = environ.get("REMOTE_ADDR") or ""
    if remote.strip():
        return remote.strip()
    return UNKNOWN_IP


def anonymous_actor() -> Actor | None:
    """No session: rendered as guest/cron."""
    return None


def unknown_address() -> str:
    return UNKNOWN_IP


def now() -> datetime:
    """Local time, second resolution."""
    return datetime.now().replace(microsecond=0)
