"""Cell surfaces: the only rendering primitive components draw onto.

Provides the ``Screen`` protocol (what every component draws into), the
``TerminalScreen`` protocol (a ``Screen`` that is also a terminal event
source, implemented by drivers), the in-memory ``CellBuffer`` and the
``ProxyScreen`` clipping view that containers hand to their children.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Protocol, runtime_checkable

from tessera.events import Event, MouseEvent, offset_mouse_event
from tessera.utils import char_width

__all__ = [
    "Color",
    "Style",
    "STYLE_DEFAULT",
    "Cell",
    "Screen",
    "TerminalScreen",
    "CellBuffer",
    "ProxyScreen",
]

# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------

# Color names are passed through to the driver untouched: "default",
# "black", "#1e1e2e", "color240", ...
Color = str


@dataclass(frozen=True)
class Style:
    foreground: Color | None = None
    background: Color | None = None
    bold: bool = False
    dim: bool = False
    underline: bool = False
    reverse: bool = False

    def with_foreground(self, color: Color | None) -> Style:
        return replace(self, foreground=color)

    def with_background(self, color: Color | None) -> Style:
        return replace(self, background=color)


STYLE_DEFAULT = Style()


@dataclass
class Cell:
    main: str = " "
    combining: tuple[str, ...] = ()
    style: Style = STYLE_DEFAULT
    width: int = 1


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


class Screen(Protocol):
    """A rectangular grid of styled character cells."""

    def size(self) -> tuple[int, int]: ...

    def set_content(
        self,
        x: int,
        y: int,
        main: str,
        combining: tuple[str, ...] | list[str] | None,
        style: Style,
    ) -> None: ...

    def set_cell(self, x: int, y: int, style: Style, *chars: str) -> None: ...

    def get_content(
        self, x: int, y: int
    ) -> tuple[str, tuple[str, ...], Style, int]: ...

    def fill(self, char: str, style: Style) -> None: ...

    def clear(self) -> None: ...

    def set_style(self, style: Style) -> None: ...

    def show_cursor(self, x: int, y: int) -> None: ...

    def hide_cursor(self) -> None: ...


@runtime_checkable
class TerminalScreen(Screen, Protocol):
    """A ``Screen`` backed by a real terminal.

    ``init`` acquires the terminal (raw mode etc.) and ``fini`` releases
    it; both may raise.  ``poll_event`` returns ``None`` once the event
    source is closed.
    """

    def init(self) -> None: ...

    def fini(self) -> None: ...

    def show(self) -> None: ...

    def enable_mouse(self) -> None: ...

    def enable_paste(self) -> None: ...

    async def poll_event(self) -> Event | None: ...


# ---------------------------------------------------------------------------
# CellBuffer
# ---------------------------------------------------------------------------


class CellBuffer:
    """In-memory cell grid implementing ``Screen``.

    Writes outside the grid are dropped.  Drivers can keep one as their
    back buffer and diff it against what is on the terminal.
    """

    def __init__(self, width: int = 80, height: int = 24) -> None:
        self._width = max(0, width)
        self._height = max(0, height)
        self._style: Style = STYLE_DEFAULT
        self._cells: list[list[Cell]] = self._blank(self._width, self._height)
        self.cursor: tuple[int, int] | None = None

    def _blank(self, width: int, height: int) -> list[list[Cell]]:
        return [[Cell(style=self._style) for _ in range(width)] for _ in range(height)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    # -- Screen protocol ----------------------------------------------------

    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def set_content(
        self,
        x: int,
        y: int,
        main: str,
        combining: tuple[str, ...] | list[str] | None,
        style: Style,
    ) -> None:
        if not self._in_bounds(x, y):
            return
        self._cells[y][x] = Cell(
            main=main,
            combining=tuple(combining or ()),
            style=style,
            width=char_width(main),
        )

    def set_cell(self, x: int, y: int, style: Style, *chars: str) -> None:
        if not chars:
            chars = (" ",)
        self.set_content(x, y, chars[0], chars[1:], style)

    def get_content(
        self, x: int, y: int
    ) -> tuple[str, tuple[str, ...], Style, int]:
        if not self._in_bounds(x, y):
            return " ", (), STYLE_DEFAULT, 1
        cell = self._cells[y][x]
        return cell.main, cell.combining, cell.style, cell.width

    def fill(self, char: str, style: Style) -> None:
        for y in range(self._height):
            for x in range(self._width):
                self.set_content(x, y, char, None, style)

    def clear(self) -> None:
        self.fill(" ", self._style)

    def set_style(self, style: Style) -> None:
        self._style = style

    def show_cursor(self, x: int, y: int) -> None:
        self.cursor = (x, y)

    def hide_cursor(self) -> None:
        self.cursor = None

    # -- Extras -------------------------------------------------------------

    def resize(self, width: int, height: int) -> None:
        """Resize the grid, keeping the overlapping top-left contents."""
        cells = self._blank(max(0, width), max(0, height))
        for y in range(min(self._height, height)):
            for x in range(min(self._width, width)):
                cells[y][x] = self._cells[y][x]
        self._width, self._height = max(0, width), max(0, height)
        self._cells = cells

    def cell(self, x: int, y: int) -> Cell:
        return self._cells[y][x]

    def to_lines(self) -> list[str]:
        """Return the grid as plain text, one string per row.

        Cells hidden behind the second column of a wide character are
        skipped.
        """
        lines: list[str] = []
        for row in self._cells:
            parts: list[str] = []
            skip = 0
            for cell in row:
                if skip:
                    skip -= 1
                    continue
                parts.append(cell.main + "".join(cell.combining))
                skip = max(0, cell.width - 1)
            lines.append("".join(parts))
        return lines


# ---------------------------------------------------------------------------
# ProxyScreen
# ---------------------------------------------------------------------------


@dataclass(eq=False)
class ProxyScreen:
    """A clipped, translated view onto a parent ``Screen``.

    Local coordinates are bounds-checked against ``width`` x ``height``
    *before* being shifted by the offset, so nothing a child draws can
    land outside its rectangle.  Rectangles follow the half-open rule:
    ``offset_x <= x < offset_x + width``.
    """

    parent: Screen | None = None
    offset_x: int = 0
    offset_y: int = 0
    width: int = 0
    height: int = 0
    style: Style = field(default=STYLE_DEFAULT)

    # -- Geometry -----------------------------------------------------------

    @property
    def x_end(self) -> int:
        return self.offset_x + self.width

    @property
    def y_end(self) -> int:
        return self.offset_y + self.height

    def set_rect(self, offset_x: int, offset_y: int, width: int, height: int) -> None:
        self.offset_x = offset_x
        self.offset_y = offset_y
        self.width = width
        self.height = height

    def contains(self, x: int, y: int) -> bool:
        """Whether the parent-space point ``(x, y)`` is inside this view."""
        return (
            self.offset_x <= x < self.x_end
            and self.offset_y <= y < self.y_end
        )

    def to_parent(self, x: int, y: int) -> tuple[int, int] | None:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return x + self.offset_x, y + self.offset_y

    def offset_mouse_event(self, event: MouseEvent) -> MouseEvent:
        """Translate a parent-space mouse event into local space."""
        return offset_mouse_event(event, -self.offset_x, -self.offset_y)

    # -- Screen protocol ----------------------------------------------------

    def size(self) -> tuple[int, int]:
        """The drawable size: never more than the parent can display."""
        if self.parent is None:
            return 0, 0
        parent_width, parent_height = self.parent.size()
        width = min(self.width, parent_width - self.offset_x)
        height = min(self.height, parent_height - self.offset_y)
        return max(0, width), max(0, height)

    def set_content(
        self,
        x: int,
        y: int,
        main: str,
        combining: tuple[str, ...] | list[str] | None,
        style: Style,
    ) -> None:
        target = self.to_parent(x, y)
        if target is not None and self.parent is not None:
            self.parent.set_content(target[0], target[1], main, combining, style)

    def set_cell(self, x: int, y: int, style: Style, *chars: str) -> None:
        target = self.to_parent(x, y)
        if target is not None and self.parent is not None:
            self.parent.set_cell(target[0], target[1], style, *chars)

    def get_content(
        self, x: int, y: int
    ) -> tuple[str, tuple[str, ...], Style, int]:
        target = self.to_parent(x, y)
        if target is None or self.parent is None:
            return " ", (), STYLE_DEFAULT, 1
        return self.parent.get_content(*target)

    def fill(self, char: str, style: Style) -> None:
        width, height = self.size()
        for y in range(height):
            for x in range(width):
                self.set_cell(x, y, style, char)

    def clear(self) -> None:
        self.fill(" ", self.style)

    def set_style(self, style: Style) -> None:
        self.style = style

    def show_cursor(self, x: int, y: int) -> None:
        target = self.to_parent(x, y)
        if target is not None and self.parent is not None:
            self.parent.show_cursor(*target)

    def hide_cursor(self) -> None:
        if self.parent is not None:
            self.parent.hide_cursor()
