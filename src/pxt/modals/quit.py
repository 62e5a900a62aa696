"""Quit / detach confirmation modal."""

import logging

from textual.geometry import Region

from pxt.channel import EventSender
from pxt.constants import QUIT_LEGEND, QUIT_MODAL_SIZE
from pxt.errors import LifecycleError, SendError, log_ignored
from pxt.events import ESCAPE, AppEvent, Key, Mouse, Paste, TerminalEvent
from pxt.modals.base import Modal
from pxt.models import LoopAction, State
from pxt.render import Frame
from pxt.theme import Theme

log = logging.getLogger(__name__)


class QuitModal(Modal):
    """Asks whether to quit, detach from the proxy session, or cancel.

    Keys (no modifiers):
      y         close, then quit
      d         close, then detach
      n/Escape  close and request a redraw

    Every other key, mouse and paste event is swallowed while the modal is
    open. Resize and focus changes pass through to the main loop.
    """

    def __init__(self, app_sender: EventSender, theme: Theme | None = None) -> None:
        self._app_sender = app_sender
        self._theme = theme or Theme()

    def handle_input(self, state: State, loop_action: LoopAction, event: TerminalEvent) -> bool:
        if isinstance(event, Key):
            if event.is_plain("y"):
                self._close_then(AppEvent.QUIT)
            elif event.is_plain("d"):
                self._close_then(AppEvent.DETACH)
            elif event.is_plain(ESCAPE, "n"):
                self._close()
                loop_action.render()
            return True
        # Block mouse and paste; let focus and resize reach the main loop.
        return isinstance(event, (Mouse, Paste))

    def _close(self) -> None:
        # Best effort: if the main loop is gone the app is already shutting down.
        with log_ignored(SendError):
            self._app_sender.send(AppEvent.CLOSE_CURRENT_MODAL)

    def _close_then(self, event: AppEvent) -> None:
        # The close must be queued first so the main loop has no active modal
        # by the time it handles quit or detach.
        self._close()
        try:
            self._app_sender.send(event)
        except SendError as exc:
            log.critical("main loop unreachable, cannot deliver %s", event.name)
            raise LifecycleError(f"failed to deliver {event.name}") from exc

    def get_size(self) -> tuple[int, int]:
        return QUIT_MODAL_SIZE

    def render(self, frame: Frame) -> None:
        area = self.area(frame.size)
        frame.clear(area)
        frame.draw_block(area, self._theme.pane(True), self._theme.border_box)

        inner = area.shrink((1, 1, 1, 1))
        text_area = Region(inner.x, inner.y, inner.width, min(len(QUIT_LEGEND), inner.height))
        frame.clear(text_area)
        frame.draw_lines(text_area, QUIT_LEGEND, self._theme.text)
