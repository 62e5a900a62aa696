"""Colours and border styles used when drawing into a frame."""

from dataclasses import dataclass, field

from rich import box
from rich.style import Style


@dataclass(frozen=True)
class Theme:
    active_border: Style = field(default_factory=lambda: Style(color="cyan", bold=True))
    inactive_border: Style = field(default_factory=lambda: Style(color="bright_black"))
    text: Style = field(default_factory=Style.null)
    border_box: box.Box = box.ROUNDED

    def pane(self, active: bool) -> Style:
        """Border style for a pane, highlighted when it has input focus."""
        return self.active_border if active else self.inactive_border
