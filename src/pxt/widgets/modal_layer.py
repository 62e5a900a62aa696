"""Overlay that paints the active modal above the main view."""

from rich.text import Text
from textual.geometry import Region, Size
from textual.widget import Widget

from pxt.modals.base import Modal
from pxt.render import Frame


class ModalLayer(Widget):
    """Shows at most one modal, placed where the modal asks to be.

    The modal renders into a ``Frame`` the size of the whole screen; this
    widget is moved and sized to the modal's area and displays only that
    region, so the main view stays visible around it.
    """

    DEFAULT_CSS = """
    ModalLayer {
        layer: overlay;
        position: absolute;
        display: none;
    }
    """

    can_focus = False

    def __init__(self, *, id: str | None = None, classes: str | None = None) -> None:
        super().__init__(id=id, classes=classes)
        self._modal: Modal | None = None

    def show(self, modal: Modal) -> None:
        self._modal = modal
        self.display = True
        self.reposition(self.screen.size)

    def hide(self) -> None:
        self._modal = None
        self.display = False
        self.refresh()

    def reposition(self, screen_size: Size) -> None:
        """Move the layer over the modal's area for a screen of *screen_size*."""
        if self._modal is None:
            return
        area = self._modal.area(Region(0, 0, screen_size.width, screen_size.height))
        self.styles.offset = (area.x, area.y)
        self.styles.width = area.width
        self.styles.height = area.height
        self.refresh(layout=True)

    def render(self) -> Text:
        if self._modal is None:
            return Text()
        frame = Frame.of_size(self.screen.size)
        self._modal.render(frame)
        return frame.to_text(self._modal.area(frame.size))
