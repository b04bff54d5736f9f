"""Flex component - lays children out along one axis."""

from __future__ import annotations

import enum

from tessera.component import ChildSlot, Component
from tessera.events import KeyEvent, MouseEvent, PasteEvent, is_left_press
from tessera.layout import distribute, offsets
from tessera.screen import Screen


class FlexDirection(enum.Enum):
    ROW = "row"  # children stacked top to bottom
    COLUMN = "column"  # children side by side, left to right


class _FlexChild(ChildSlot):
    __slots__ = ("size",)

    def __init__(self, target: Component, size: int) -> None:
        super().__init__(target)
        self.size = size


class Flex:
    """Flex component - lays children out along one axis.

    Each child is either fixed (a cell count) or proportional (a weight
    sharing whatever the fixed children leave).  The focused child is
    drawn last and hit-tested first, so it is always on top.
    """

    def __init__(self, direction: FlexDirection = FlexDirection.COLUMN) -> None:
        self.direction = direction
        self._children: list[_FlexChild] = []
        self._focused: _FlexChild | None = None

    @property
    def children(self) -> list[Component]:
        return [child.target for child in self._children]

    @property
    def focused(self) -> Component | None:
        return self._focused.target if self._focused is not None else None

    def set_direction(self, direction: FlexDirection) -> None:
        self.direction = direction

    def add_fixed_component(self, component: Component, size: int) -> None:
        self._children.append(_FlexChild(component, max(0, size)))

    def add_proportional_component(self, component: Component, weight: int) -> None:
        self._children.append(_FlexChild(component, -max(1, weight)))

    def remove_component(self, component: Component) -> None:
        """Remove every slot holding *component*, blurring it if focused."""
        if self._focused is not None and self._focused.target is component:
            self._focused.blur()
            self._focused = None
        self._children = [c for c in self._children if c.target is not component]

    def set_focused(self, component: Component | None) -> None:
        for child in self._children:
            if child.target is component:
                self._set_focused(child)
                return
        if component is None:
            self._set_focused(None)

    def _set_focused(self, child: _FlexChild | None) -> None:
        if child is self._focused:
            return
        if self._focused is not None:
            self._focused.blur()
        self._focused = child
        if child is not None:
            child.focus()

    # -- layout / drawing ---------------------------------------------------

    def _layout(self, width: int, height: int) -> None:
        along = height if self.direction is FlexDirection.ROW else width
        extents = distribute([c.size for c in self._children], along)
        for child, start, extent in zip(self._children, offsets(extents), extents):
            if self.direction is FlexDirection.ROW:
                child.screen.set_rect(0, start, width, extent)
            else:
                child.screen.set_rect(start, 0, extent, height)

    def draw(self, screen: Screen) -> None:
        width, height = screen.size()
        self._layout(width, height)
        for child in self._children:
            if child is not self._focused:
                child.draw(screen)
        if self._focused is not None:
            self._focused.draw(screen)

    # -- events -------------------------------------------------------------

    def on_key_event(self, event: KeyEvent) -> bool:
        if self._focused is not None:
            return self._focused.target.on_key_event(event)
        return False

    def on_paste_event(self, event: PasteEvent) -> bool:
        if self._focused is not None:
            return self._focused.target.on_paste_event(event)
        return False

    def on_mouse_event(self, event: MouseEvent) -> bool:
        focused = self._focused
        if focused is not None and focused.contains(event.x, event.y):
            return focused.forward_mouse(event)

        for child in self._children:
            if child.contains(event.x, event.y):
                focus_changed = False
                if is_left_press(event):
                    self._set_focused(child)
                    focus_changed = True
                return child.forward_mouse(event) or focus_changed

        if is_left_press(event) and self._focused is not None:
            self._set_focused(None)
            return True
        return False

    # -- focus --------------------------------------------------------------

    def focus(self) -> None:
        pass

    def blur(self) -> None:
        self._set_focused(None)
