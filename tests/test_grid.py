"""Tests for the Grid component -- 2D layout, hit-testing and focus."""

from __future__ import annotations

from tessera.components.grid import Grid
from tessera.events import MouseButton, MouseEvent
from tessera.screen import CellBuffer

from .probe import FocusProbe, Probe


def click(x: int, y: int) -> MouseEvent:
    return MouseEvent(x, y, MouseButton.PRIMARY)


class CountingGrid(Grid):
    """Grid that counts layout passes."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.layouts = 0

    def on_resize(self, width: int, height: int) -> None:
        self.layouts += 1
        super().on_resize(width, height)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class TestGridLayout:
    """Cell rectangles derived from column widths and row heights."""

    def test_cells_and_spans(self) -> None:
        a, b, c = Probe(fill="a"), Probe(fill="b"), Probe(fill="c")
        grid = Grid(columns=[2, -1], rows=[1, -1])
        grid.add_component(a, 0, 0)
        grid.add_component(b, 1, 0)
        grid.add_component(c, 0, 1, width=2)
        buf = CellBuffer(5, 3)
        grid.draw(buf)
        assert buf.to_lines() == ["aabbb", "ccccc", "ccccc"]

    def test_defaults_to_one_proportional_cell(self) -> None:
        probe = Probe()
        grid = Grid()
        grid.add_component(probe, 0, 0)
        grid.draw(CellBuffer(7, 3))
        assert probe.sizes == [(7, 3)]

    def test_adding_past_the_end_extends_proportionally(self) -> None:
        grid = Grid(columns=[4])
        grid.add_component(Probe(), 2, 1, width=2)
        assert grid.column_widths == [4, -1, -1, -1]
        assert grid.row_heights == [-1, -1]

    def test_set_column_and_row(self) -> None:
        grid = Grid()
        grid.set_column(2, 5)
        grid.set_row(0, 3)
        assert grid.column_widths == [-1, -1, 5]
        assert grid.row_heights == [3]

    def test_layout_is_cached_until_size_changes(self) -> None:
        grid = CountingGrid()
        grid.add_component(Probe(), 0, 0)
        grid.draw(CellBuffer(10, 5))
        grid.draw(CellBuffer(10, 5))
        assert grid.layouts == 1
        grid.draw(CellBuffer(11, 5))
        assert grid.layouts == 2

    def test_structure_change_forces_layout(self) -> None:
        grid = CountingGrid()
        grid.add_component(Probe(), 0, 0)
        grid.draw(CellBuffer(10, 5))
        grid.set_columns([3, -1])
        grid.draw(CellBuffer(10, 5))
        assert grid.layouts == 2
        grid.add_component(Probe(), 1, 0)
        grid.draw(CellBuffer(10, 5))
        assert grid.layouts == 3

    def test_focused_child_is_drawn_last(self) -> None:
        log: list[str] = []
        a, b = FocusProbe("a", log=log), FocusProbe("b", log=log)
        grid = Grid(columns=[-1, -1])
        grid.add_component(a, 0, 0)
        grid.add_component(b, 1, 0)
        grid.set_focused(a)
        grid.draw(CellBuffer(4, 1))
        assert log == ["draw b", "draw a"]


# ---------------------------------------------------------------------------
# Hit-testing and focus
# ---------------------------------------------------------------------------


class TestGridMouse:
    def test_hit_test_matches_drawing(self) -> None:
        fills = "abcdef"
        probes = [Probe(fill=ch) for ch in fills]
        grid = Grid(columns=[-1, -1, -1], rows=[-2, -1])
        for index, probe in enumerate(probes):
            grid.add_component(probe, index % 3, index // 3)
        buf = CellBuffer(10, 7)
        grid.draw(buf)

        lines = buf.to_lines()
        for y in range(7):
            for x in range(10):
                for probe in probes:
                    probe.mice.clear()
                grid.on_mouse_event(MouseEvent(x, y))
                hit = [probe.fill for probe in probes if probe.mice]
                assert hit == [lines[y][x]], (x, y)

    def test_click_moves_focus_between_children(self) -> None:
        log: list[str] = []
        a = FocusProbe("a", log=log)
        b = FocusProbe("b", handles=False, log=log)
        grid = Grid(columns=[-1, -1])
        grid.add_component(a, 0, 0)
        grid.add_component(b, 1, 0)
        grid.focus()
        grid.set_focused(a)
        grid.draw(CellBuffer(20, 10))
        log.clear()

        assert grid.on_mouse_event(click(15, 5)) is True
        assert log == ["blur a", "focus b"]
        assert grid.focused is b
        assert b.mice[0].position == (5, 5)

    def test_click_focuses_before_grid_had_focus(self) -> None:
        a = FocusProbe("a")
        grid = Grid()
        grid.add_component(a, 0, 0)
        grid.draw(CellBuffer(4, 4))
        assert grid.on_mouse_event(click(1, 1)) is True
        assert a.focused

    def test_click_outside_children_clears_focus(self) -> None:
        a = FocusProbe("a")
        grid = Grid(columns=[2, 2])
        grid.add_component(a, 0, 0)
        grid.focus()
        grid.set_focused(a)
        grid.draw(CellBuffer(10, 1))
        assert grid.on_mouse_event(click(3, 0)) is True
        assert grid.focused is None
        assert not a.focused


class TestGridFocus:
    def test_selection_waits_for_grid_focus(self) -> None:
        a = FocusProbe("a")
        grid = Grid()
        grid.add_component(a, 0, 0)
        grid.set_focused(a)
        assert grid.focused is a
        assert not a.focused
        grid.focus()
        assert a.focused

    def test_blur_clears_focus(self) -> None:
        a = FocusProbe("a")
        grid = Grid()
        grid.add_component(a, 0, 0)
        grid.focus()
        grid.set_focused(a)
        grid.blur()
        assert grid.focused is None
        assert not a.focused

    def test_focus_changed_callback(self) -> None:
        a, b = FocusProbe("a"), FocusProbe("b")
        changes: list[tuple[object, object]] = []
        grid = Grid(columns=[-1, -1])
        grid.add_component(a, 0, 0)
        grid.add_component(b, 1, 0)
        grid.set_on_focus_changed(lambda prev, new: changes.append((prev, new)))
        grid.set_focused(a)
        grid.set_focused(b)
        grid.set_focused(None)
        assert changes == [(None, a), (a, b), (b, None)]

    def test_remove_focused_component(self) -> None:
        a, b = FocusProbe("a"), FocusProbe("b")
        grid = Grid(columns=[-1, -1])
        grid.add_component(a, 0, 0)
        grid.add_component(b, 1, 0)
        grid.focus()
        grid.set_focused(a)
        grid.remove_component(a)
        assert not a.focused
        assert grid.focused is None
        assert grid.children == [b]

    def test_non_focusable_children_are_fine(self) -> None:
        probe = Probe()
        grid = Grid()
        grid.add_component(probe, 0, 0)
        grid.focus()
        grid.set_focused(probe)
        grid.blur()
        assert grid.focused is None
