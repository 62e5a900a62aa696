"""Terminal input events routed to modals, and application lifecycle events.

Input events arrive from Textual and are translated into a small closed
union so modal logic never depends on Textual's message hierarchy:

    Key(code, modifiers) | Mouse(x, y, button) | Paste(text)
    | Resize(cols, rows) | FocusGained | FocusLost

Application events travel the other way, from components to the main loop,
over the event channel (see ``pxt.channel``).
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from textual import events

ESCAPE = "escape"

# Modifier prefixes Textual uses in key names such as "ctrl+shift+y".
MODIFIERS = frozenset({"ctrl", "shift", "alt", "meta", "super", "hyper"})


class AppEvent(Enum):
    """Lifecycle signals consumed by the main loop."""

    CLOSE_CURRENT_MODAL = auto()
    QUIT = auto()
    DETACH = auto()


@dataclass(frozen=True)
class Key:
    code: str
    modifiers: frozenset[str] = field(default_factory=frozenset)

    def is_plain(self, *codes: str) -> bool:
        """Return True if this is one of *codes* pressed without modifiers."""
        return not self.modifiers and self.code in codes


@dataclass(frozen=True)
class Mouse:
    x: int
    y: int
    button: int = 0


@dataclass(frozen=True)
class Paste:
    text: str


@dataclass(frozen=True)
class Resize:
    cols: int
    rows: int


@dataclass(frozen=True)
class FocusGained:
    pass


@dataclass(frozen=True)
class FocusLost:
    pass


TerminalEvent = Key | Mouse | Paste | Resize | FocusGained | FocusLost


def parse_key(key: str) -> Key:
    """Split a Textual key name into code and modifiers.

    ``"ctrl+y"`` becomes ``Key("y", {"ctrl"})``; ``"escape"`` has no
    modifiers.
    """
    *prefix, code = key.split("+")
    modifiers = frozenset(part for part in prefix if part in MODIFIERS)
    return Key(code=code, modifiers=modifiers)


def from_textual(event: events.Event) -> TerminalEvent | None:
    """Translate a Textual event into a terminal event, or None if it is not one."""
    if isinstance(event, events.Key):
        return parse_key(event.key)
    if isinstance(event, events.MouseEvent):
        return Mouse(x=event.x, y=event.y, button=event.button)
    if isinstance(event, events.Paste):
        return Paste(text=event.text)
    if isinstance(event, events.Resize):
        return Resize(cols=event.size.width, rows=event.size.height)
    if isinstance(event, events.AppFocus):
        return FocusGained()
    if isinstance(event, events.AppBlur):
        return FocusLost()
    return None
