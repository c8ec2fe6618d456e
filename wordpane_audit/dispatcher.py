"""
Event dispatcher: host lifecycle events -> one audit line each.

Handlers map each event kind to a category tag and a single-line message, then
append it via the writer. Auditing is side-channel only: handlers never raise
and never return anything the host has to look at. Callers that want to monitor
write failures use log() directly and inspect the AppendResult.

Unresolvable entities: delete_user logs with "unknown" placeholders; every other
kind drops the event when its payload is missing.
"""
import functools
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Protocol
from wordpane_audit.codec import encode
from wordpane_audit.schemas import Actor, AppendResult, AuditEvent, PostRecord, UserRecord, UNKNOWN
from wordpane_audit.utils import anonymous_actor, unknown_address, now
from wordpane_audit.writer import append

logger = logging.getLogger(__name__)

Handler = Callable[..., None]


class EventSource(Protocol):
    """Upstream registration API: one typed handler per event kind."""

    def subscribe(self, kind: str, handler: Handler) -> None: ...


def _one_line(value: object) -> str:
    """Collapse line breaks so a field can never split the log line."""
    return " ".join(str(value).splitlines())


def _side_channel(handler):
    """Host-facing handlers swallow everything; a broken payload must not break the host."""

    @functools.wraps(handler)
    def wrapper(*args, **kwargs) -> None:
        try:
            handler(*args, **kwargs)
        except Exception as e:
            logger.warning("audit handler %s failed: %s", handler.__name__, e)

    return wrapper


def _fields(*pairs: tuple[str, object]) -> str:
    return " | ".join(f"{k}={_one_line(v)}" for k, v in pairs)


class AuditDispatcher:
    """Turns host events into audit lines. Stateless per event; safe from concurrent contexts."""

    def __init__(
        self,
        log_path: str | Path,
        actor_resolver: Callable[[], Actor | None] = anonymous_actor,
        address_resolver: Callable[[], str] = unknown_address,
        clock: Callable[[], datetime] = now,
    ):
        self.log_path = Path(log_path)
        self.actor_resolver = actor_resolver
        self.address_resolver = address_resolver
        self.clock = clock

    # --- wiring ---

    def handlers(self) -> dict[str, Handler]:
        return {
            "user_register": self.on_user_register,
            "profile_update": self.on_profile_update,
            "delete_user": self.on_delete_user,
            "login": self.on_login,
            "delete_post": self.on_delete_post,
        }

    def attach(self, source: EventSource) -> None:
        """Register every handler on the host's event source."""
        for kind, handler in self.handlers().items():
            source.subscribe(kind, handler)

    # --- core ---

    def log(self, category: str, message: str) -> AppendResult | None:
        """
        Capture actor/address/time, encode and append.
        Returns the writer's result, or None if building the event itself failed.
        Never raises.
        """
        try:
            actor = self.actor_resolver()
            if actor is not None:
                actor = actor.model_copy(update={"login": _one_line(actor.login)})
            event = AuditEvent(
                category=category,
                message=_one_line(message),
                actor=actor,
                origin_address=_one_line(self.address_resolver()),
                timestamp=self.clock(),
            )
            result = append(self.log_path, encode(event))
        except Exception as e:
            logger.warning("audit event %s not recorded: %s", category, e)
            return None
        if not result.ok:
            logger.warning("audit write to %s failed: %s", result.path, result.error)
        return result

    # --- handlers (host-facing, results discarded) ---

    @_side_channel
    def on_user_register(self, user: UserRecord | None) -> None:
        if user is None:
            return
        msg = _fields(
            ("ID", user.id),
            ("login", user.login),
            ("email", user.email),
            ("role", ",".join(user.roles)),
        )
        self.log("user_register", msg)

    @_side_channel
    def on_profile_update(self, user: UserRecord | None, old_user: UserRecord | None = None) -> None:
        if user is None:
            return
        msg = _fields(("ID", user.id), ("login", user.login), ("email", user.email))
        self.log("profile_update", msg)

    @_side_channel
    def on_delete_user(self, user_id: int | None, user: UserRecord | None = None) -> None:
        """The record may already be gone: log placeholders instead of skipping."""
        if user_id is None:
            return
        msg = _fields(
            ("ID", user_id),
            ("login", user.login if user is not None else UNKNOWN),
            ("email", user.email if user is not None else UNKNOWN),
        )
        self.log("delete_user", msg)

    @_side_channel
    def on_login(self, user_login: str, user: UserRecord | None) -> None:
        if user is None:
            return
        msg = _fields(("ID", user.id), ("login", user_login), ("email", user.email))
        self.log("login", msg)

    @_side_channel
    def on_delete_post(self, post: PostRecord | None) -> None:
        if post is None:
            return
        msg = _fields(
            ("ID", post.id),
            ("type", post.post_type),
            ("status", post.post_status),
            ("title", f'"{_one_line(post.title)}"'),
        )
        self.log("delete_post", msg)
