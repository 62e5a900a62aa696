"""Main view: a summary of the proxy session the TUI is attached to."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label

from pxt.models import State


class SessionView(Vertical):
    """Read-only panel describing the current session."""

    def __init__(self, state: State, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._state = state

    def compose(self) -> ComposeResult:
        yield Label(f"Session   {self._state.session}", id="session-name")
        yield Label(f"Listening {self._state.listen}", id="session-listen")
        yield Label(f"Upstream  {self._state.upstream or '(transparent)'}", id="session-upstream")
        yield Label("Press q to quit or detach", id="session-hint")
