"""Modal capability contract shared by every overlay."""

from abc import ABC, abstractmethod

from textual.geometry import Region

from pxt.events import TerminalEvent
from pxt.models import LoopAction, State
from pxt.render import Frame, centered


class Modal(ABC):
    """A transient overlay that owns input while it is the active modal.

    The main loop owns the modal's lifetime: it installs the modal in its
    single active slot and removes it when it receives
    ``AppEvent.CLOSE_CURRENT_MODAL``. A modal never removes itself.

    ``state`` and ``loop_action`` are only borrowed for the duration of
    ``handle_input`` and must not be stored on the modal.
    """

    @abstractmethod
    def get_size(self) -> tuple[int, int]:
        """Return the (width, height) this modal wants to occupy."""

    @abstractmethod
    def handle_input(self, state: State, loop_action: LoopAction, event: TerminalEvent) -> bool:
        """Process one terminal event.

        Returns True if the event was consumed and must not propagate further.
        """

    @abstractmethod
    def render(self, frame: Frame) -> None:
        """Draw into ``self.area(frame.size)``, clearing it before drawing."""

    def boxed(self) -> "Modal":
        """Return this modal as a plain ``Modal`` for the host's modal slot."""
        return self

    def area(self, frame_size: Region) -> Region:
        """Centre the negotiated size inside *frame_size*."""
        width, height = self.get_size()
        return centered(frame_size, width, height)
