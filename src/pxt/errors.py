"""Error types and helpers for best-effort operations."""

import contextlib
import logging
from collections.abc import Iterator

log = logging.getLogger(__name__)


class ChannelClosed(Exception):
    """Raised when receiving from a channel whose consumer has been closed."""


class SendError(Exception):
    """Raised when sending on a channel whose receiver is gone.

    The undelivered event is kept on ``event``.
    """

    def __init__(self, event: object) -> None:
        super().__init__(f"receiver closed, dropped {event!r}")
        self.event = event


class LifecycleError(RuntimeError):
    """A quit or detach request could not reach the main loop.

    There is no other path to a clean shutdown, so this is never caught.
    """


@contextlib.contextmanager
def log_ignored(*exc_types: type[BaseException]) -> Iterator[None]:
    """Like ``contextlib.suppress`` but logs what was suppressed."""
    try:
        yield
    except exc_types as exc:
        log.warning("ignored error: %s", exc)
