"""Grid component - lays children out on a two-dimensional cell grid."""

from __future__ import annotations

from typing import Callable, Sequence

from tessera.component import ChildSlot, Component
from tessera.events import KeyEvent, MouseEvent, PasteEvent, is_left_press
from tessera.layout import distribute
from tessera.screen import Screen

FocusChangedFunc = Callable[["Component | None", "Component | None"], None]


def _extend(sizes: list[int], length: int) -> list[int]:
    """Pad *sizes* with fully proportional entries up to *length*."""
    if len(sizes) >= length:
        return sizes
    return sizes + [-1] * (length - len(sizes))


class _GridChild(ChildSlot):
    __slots__ = ("x", "y", "column_span", "row_span")

    def __init__(
        self, target: Component, x: int, y: int, column_span: int, row_span: int
    ) -> None:
        super().__init__(target)
        self.x = x
        self.y = y
        self.column_span = column_span
        self.row_span = row_span


class Grid:
    """Grid component - lays children out on a two-dimensional cell grid.

    Columns and rows use the same encoding as ``Flex`` sizes: positive
    values are fixed cell counts, negative values proportional weights.
    Both default to a single proportional entry and grow automatically
    when a child spans past the end.

    Layout is only recomputed when the available size or the structure
    changes.  The grid remembers whether it has been focused itself: a
    child selected before that is recorded but only focused once the
    grid receives focus.
    """

    def __init__(
        self,
        columns: Sequence[int] | None = None,
        rows: Sequence[int] | None = None,
    ) -> None:
        self._children: list[_GridChild] = []
        self._focused: _GridChild | None = None
        self._focus_received = False

        self._prev_width = -1
        self._prev_height = -1
        self._force_resize = False

        self._column_widths: list[int] = list(columns) if columns else [-1]
        self._row_heights: list[int] = list(rows) if rows else [-1]

        self._on_focus_changed: FocusChangedFunc | None = None

    # -- structure ----------------------------------------------------------

    @property
    def children(self) -> list[Component]:
        return [child.target for child in self._children]

    @property
    def focused(self) -> Component | None:
        return self._focused.target if self._focused is not None else None

    @property
    def column_widths(self) -> list[int]:
        return list(self._column_widths)

    @property
    def row_heights(self) -> list[int]:
        return list(self._row_heights)

    def _create_child(
        self, component: Component, x: int, y: int, width: int, height: int
    ) -> _GridChild:
        return _GridChild(component, max(0, x), max(0, y), max(1, width), max(1, height))

    def _add_child(self, child: _GridChild) -> None:
        self._column_widths = _extend(self._column_widths, child.x + child.column_span)
        self._row_heights = _extend(self._row_heights, child.y + child.row_span)
        self._children.append(child)
        self._force_resize = True

    def add_component(
        self, component: Component, x: int, y: int, width: int = 1, height: int = 1
    ) -> None:
        """Place *component* at column *x*, row *y*, spanning *width* x *height* cells."""
        self._add_child(self._create_child(component, x, y, width, height))

    def remove_component(self, component: Component) -> None:
        if self._focused is not None and self._focused.target is component:
            self._set_focused(None)
        self._children = [c for c in self._children if c.target is not component]
        self._force_resize = True

    def set_column(self, column: int, width: int) -> None:
        self._column_widths = _extend(self._column_widths, column + 1)
        self._column_widths[column] = width
        self._force_resize = True

    def set_row(self, row: int, height: int) -> None:
        self._row_heights = _extend(self._row_heights, row + 1)
        self._row_heights[row] = height
        self._force_resize = True

    def set_columns(self, columns: Sequence[int]) -> None:
        self._column_widths = list(columns)
        self._force_resize = True

    def set_rows(self, rows: Sequence[int]) -> None:
        self._row_heights = list(rows)
        self._force_resize = True

    def set_on_focus_changed(self, fn: FocusChangedFunc | None) -> None:
        self._on_focus_changed = fn

    # -- focus --------------------------------------------------------------

    def set_focused(self, component: Component | None) -> None:
        for child in self._children:
            if child.target is component:
                self._set_focused(child)
                return
        if component is None:
            self._set_focused(None)

    def _set_focused(self, item: _GridChild | None) -> None:
        previous = self._focused
        if item is previous:
            return
        if previous is not None:
            previous.blur()
        self._focused = item
        if self._focus_received and item is not None:
            item.focus()
        if self._on_focus_changed is not None:
            self._on_focus_changed(
                previous.target if previous is not None else None,
                item.target if item is not None else None,
            )

    def focus(self) -> None:
        self._focus_received = True
        if self._focused is not None:
            self._focused.focus()

    def blur(self) -> None:
        if self._focused is not None:
            self._set_focused(None)
        self._focus_received = False

    # -- layout / drawing ---------------------------------------------------

    def on_resize(self, width: int, height: int) -> None:
        column_widths = distribute(self._column_widths, width)
        row_heights = distribute(self._row_heights, height)
        for child in self._children:
            child.screen.set_rect(
                sum(column_widths[: child.x]),
                sum(row_heights[: child.y]),
                sum(column_widths[child.x : child.x + child.column_span]),
                sum(row_heights[child.y : child.y + child.row_span]),
            )
        self._prev_width, self._prev_height = width, height
        self._force_resize = False

    def draw(self, screen: Screen) -> None:
        width, height = screen.size()
        if self._force_resize or width != self._prev_width or height != self._prev_height:
            self.on_resize(width, height)
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
            focus_changed = False
            if is_left_press(event) and not self._focus_received:
                self.focus()
                focus_changed = True
            return focused.forward_mouse(event) or focus_changed

        for child in self._children:
            if child.contains(event.x, event.y):
                focus_changed = False
                if is_left_press(event):
                    self._focus_received = True
                    self._set_focused(child)
                    focus_changed = True
                return child.forward_mouse(event) or focus_changed

        if is_left_press(event) and self._focused is not None:
            self._set_focused(None)
            return True
        return False
