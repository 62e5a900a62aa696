"""Domain models shared between the main loop and modals."""

from dataclasses import dataclass
from enum import Enum, auto

from pxt.constants import DEFAULT_LISTEN, DEFAULT_SESSION, DEFAULT_UPSTREAM


@dataclass
class State:
    """Global application state, owned by the main loop.

    Modals receive it for the duration of a single ``handle_input`` call and
    must not keep a reference to it.
    """

    session: str = DEFAULT_SESSION
    listen: str = DEFAULT_LISTEN
    upstream: str = DEFAULT_UPSTREAM
    detached: bool = False

    def describe(self) -> str:
        target = self.upstream or "(transparent)"
        return f"{self.session}  {self.listen} → {target}"


@dataclass
class LoopAction:
    """Requests a component can make of the main loop outside the event channel."""

    render_requested: bool = False

    def render(self) -> None:
        self.render_requested = True

    def take_render(self) -> bool:
        """Return whether a render was requested and clear the request."""
        requested = self.render_requested
        self.render_requested = False
        return requested


class ExitReason(Enum):
    """Why the TUI stopped."""

    QUIT = auto()
    DETACH = auto()
