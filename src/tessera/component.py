"""Component contract shared by leaf widgets and containers.

Provides the ``Component``, ``Focusable`` and ``FormItem`` protocols and
``ChildSlot``, the record a container keeps for each child: the target
component plus the ``ProxyScreen`` it was last drawn into.  Drawing and
mouse hit-testing both go through that same proxy, so they always agree
on where a child is.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tessera.events import KeyEvent, MouseEvent, PasteEvent
from tessera.screen import ProxyScreen, Screen

__all__ = [
    "Component",
    "Focusable",
    "FormItem",
    "is_focusable",
    "ChildSlot",
]

# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


class Component(Protocol):
    """A node in the UI tree.

    The event handlers return ``True`` when the event was handled, which
    makes the application redraw.
    """

    def draw(self, screen: Screen) -> None: ...

    def on_key_event(self, event: KeyEvent) -> bool: ...

    def on_paste_event(self, event: PasteEvent) -> bool: ...

    def on_mouse_event(self, event: MouseEvent) -> bool: ...


@runtime_checkable
class Focusable(Protocol):
    """A component that can receive keyboard focus."""

    def focus(self) -> None: ...

    def blur(self) -> None: ...


@runtime_checkable
class FormItem(Protocol):
    """A component that reacts to Enter inside a ``Form``."""

    def submit(self, event: KeyEvent) -> bool: ...


def is_focusable(component: object | None) -> bool:
    return component is not None and isinstance(component, Focusable)


# ---------------------------------------------------------------------------
# ChildSlot
# ---------------------------------------------------------------------------


class ChildSlot:
    """A container's record of one child."""

    __slots__ = ("target", "screen")

    def __init__(self, target: Component) -> None:
        self.target = target
        self.screen = ProxyScreen()

    def focus(self) -> None:
        if is_focusable(self.target):
            self.target.focus()  # type: ignore[attr-defined]

    def blur(self) -> None:
        if is_focusable(self.target):
            self.target.blur()  # type: ignore[attr-defined]

    def contains(self, x: int, y: int) -> bool:
        return self.screen.contains(x, y)

    def draw(self, parent: Screen) -> None:
        self.screen.parent = parent
        self.target.draw(self.screen)

    def forward_mouse(self, event: MouseEvent) -> bool:
        return self.target.on_mouse_event(self.screen.offset_mouse_event(event))

    def __repr__(self) -> str:
        s = self.screen
        return (
            f"{type(self).__name__}({self.target!r} @ "
            f"{s.offset_x},{s.offset_y} {s.width}x{s.height})"
        )
