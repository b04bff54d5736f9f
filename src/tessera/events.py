"""Decoded terminal events and event-handler helpers.

The terminal driver is responsible for turning raw input into these
structured events; the framework never looks at escape sequences.  The
run loop turns a ``PasteStartEvent`` / keys / ``PasteEndEvent`` sequence
into a single ``PasteEvent``.
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Callable, Union

__all__ = [
    "Key",
    "Modifier",
    "MouseButton",
    "KeyEvent",
    "MouseEvent",
    "PasteEvent",
    "PasteStartEvent",
    "PasteEndEvent",
    "ResizeEvent",
    "Event",
    "offset_mouse_event",
    "is_left_press",
    "SimpleEventHandler",
    "NoopEventHandler",
]


# ---------------------------------------------------------------------------
# Key / modifier / button vocabularies
# ---------------------------------------------------------------------------


class Key(enum.Enum):
    """Symbolic keys.  ``RUNE`` means "a printable character, see ``rune``"."""

    RUNE = "rune"
    ENTER = "enter"
    TAB = "tab"
    BACKTAB = "backtab"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    DELETE = "delete"
    INSERT = "insert"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    CTRL_C = "ctrl+c"
    CTRL_D = "ctrl+d"
    CTRL_Z = "ctrl+z"
    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"


class Modifier(enum.IntFlag):
    NONE = 0
    SHIFT = 1
    CTRL = 2
    ALT = 4
    META = 8


class MouseButton(enum.IntFlag):
    NONE = 0
    PRIMARY = 1
    SECONDARY = 2
    MIDDLE = 4
    WHEEL_UP = 8
    WHEEL_DOWN = 16
    WHEEL_LEFT = 32
    WHEEL_RIGHT = 64


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    rune: str = ""
    modifiers: Modifier = Modifier.NONE

    @property
    def text(self) -> str:
        """The characters this key contributes to a bracketed paste."""
        if self.key is Key.RUNE:
            return self.rune
        if self.key is Key.ENTER:
            return "\n"
        if self.key is Key.TAB:
            return "\t"
        return ""


@dataclass(frozen=True)
class MouseEvent:
    x: int
    y: int
    buttons: MouseButton = MouseButton.NONE
    modifiers: Modifier = Modifier.NONE
    motion: bool = False

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class PasteEvent:
    """A completed bracketed paste, synthesized by the run loop."""

    text: str


@dataclass(frozen=True)
class PasteStartEvent:
    pass


@dataclass(frozen=True)
class PasteEndEvent:
    pass


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


Event = Union[
    KeyEvent, MouseEvent, PasteStartEvent, PasteEndEvent, ResizeEvent
]


def offset_mouse_event(event: MouseEvent, dx: int, dy: int) -> MouseEvent:
    """Return a copy of *event* moved by ``(dx, dy)``."""
    return dataclasses.replace(event, x=event.x + dx, y=event.y + dy)


def is_left_press(event: MouseEvent) -> bool:
    """``True`` for a primary-button press that is not a drag."""
    return event.buttons == MouseButton.PRIMARY and not event.motion


# ---------------------------------------------------------------------------
# Handler helpers for leaf widgets
# ---------------------------------------------------------------------------


class SimpleEventHandler:
    """Event methods backed by optional callables.

    Leaf widgets inherit from this and let callers plug in ``on_key``,
    ``on_paste`` and ``on_mouse``; an unset callable means "not handled".
    """

    def __init__(
        self,
        on_key: Callable[[KeyEvent], bool] | None = None,
        on_paste: Callable[[PasteEvent], bool] | None = None,
        on_mouse: Callable[[MouseEvent], bool] | None = None,
    ) -> None:
        self.on_key = on_key
        self.on_paste = on_paste
        self.on_mouse = on_mouse

    def on_key_event(self, event: KeyEvent) -> bool:
        if self.on_key is not None:
            return self.on_key(event)
        return False

    def on_paste_event(self, event: PasteEvent) -> bool:
        if self.on_paste is not None:
            return self.on_paste(event)
        return False

    def on_mouse_event(self, event: MouseEvent) -> bool:
        if self.on_mouse is not None:
            return self.on_mouse(event)
        return False


class NoopEventHandler:
    """Ignores every event."""

    def on_key_event(self, event: KeyEvent) -> bool:
        return False

    def on_paste_event(self, event: PasteEvent) -> bool:
        return False

    def on_mouse_event(self, event: MouseEvent) -> bool:
        return False
