"""Tests for tessera.screen -- CellBuffer and ProxyScreen clipping."""

from __future__ import annotations

from tessera.events import MouseButton, MouseEvent
from tessera.screen import STYLE_DEFAULT, CellBuffer, ProxyScreen, Style


# ---------------------------------------------------------------------------
# CellBuffer
# ---------------------------------------------------------------------------


class TestCellBuffer:
    """In-memory cell grid."""

    def test_size(self) -> None:
        assert CellBuffer(12, 7).size() == (12, 7)

    def test_negative_size_is_empty(self) -> None:
        assert CellBuffer(-3, 4).size() == (0, 4)

    def test_set_and_get_content(self) -> None:
        buf = CellBuffer(4, 2)
        style = Style(foreground="red")
        buf.set_content(1, 1, "x", None, style)
        assert buf.get_content(1, 1) == ("x", (), style, 1)

    def test_out_of_range_reads_blank_cell(self) -> None:
        buf = CellBuffer(2, 2)
        assert buf.get_content(5, 0) == (" ", (), STYLE_DEFAULT, 1)
        assert buf.get_content(0, -1) == (" ", (), STYLE_DEFAULT, 1)

    def test_out_of_range_writes_are_dropped(self) -> None:
        buf = CellBuffer(3, 1)
        buf.set_content(3, 0, "x", None, STYLE_DEFAULT)
        buf.set_content(-1, 0, "x", None, STYLE_DEFAULT)
        buf.set_content(0, 1, "x", None, STYLE_DEFAULT)
        assert buf.to_lines() == ["   "]

    def test_set_cell_splits_main_and_combining(self) -> None:
        buf = CellBuffer(2, 1)
        buf.set_cell(0, 0, STYLE_DEFAULT, "e", "\u0301")
        main, combining, _, _ = buf.get_content(0, 0)
        assert main == "e"
        assert combining == ("\u0301",)

    def test_clear_uses_current_style(self) -> None:
        buf = CellBuffer(2, 1)
        style = Style(background="blue")
        buf.set_style(style)
        buf.clear()
        assert buf.cell(1, 0).style == style

    def test_wide_character_hides_next_cell(self) -> None:
        buf = CellBuffer(4, 1)
        buf.set_content(0, 0, "世", None, STYLE_DEFAULT)
        assert buf.cell(0, 0).width == 2
        assert buf.to_lines() == ["世  "]

    def test_resize_keeps_top_left(self) -> None:
        buf = CellBuffer(3, 2)
        buf.set_content(0, 0, "a", None, STYLE_DEFAULT)
        buf.set_content(2, 1, "b", None, STYLE_DEFAULT)
        buf.resize(2, 2)
        assert buf.size() == (2, 2)
        assert buf.to_lines() == ["a ", "  "]

    def test_cursor(self) -> None:
        buf = CellBuffer(3, 3)
        buf.show_cursor(1, 2)
        assert buf.cursor == (1, 2)
        buf.hide_cursor()
        assert buf.cursor is None


# ---------------------------------------------------------------------------
# ProxyScreen
# ---------------------------------------------------------------------------


class TestProxyScreen:
    """Clipped, translated views onto a parent screen."""

    def test_translates_local_coordinates(self) -> None:
        buf = CellBuffer(12, 7)
        proxy = ProxyScreen(buf, 1, 1, 10, 5)
        proxy.set_content(0, 0, "x", None, STYLE_DEFAULT)
        assert buf.get_content(1, 1)[0] == "x"

    def test_clips_to_rectangle(self) -> None:
        buf = CellBuffer(12, 7)
        proxy = ProxyScreen(buf, 1, 1, 10, 5)
        proxy.set_content(10, 0, "x", None, STYLE_DEFAULT)
        proxy.set_content(0, 5, "x", None, STYLE_DEFAULT)
        proxy.set_content(-1, 0, "x", None, STYLE_DEFAULT)
        assert all(set(line) == {" "} for line in buf.to_lines())

    def test_nested_offsets_accumulate(self) -> None:
        buf = CellBuffer(20, 10)
        outer = ProxyScreen(buf, 2, 3, 10, 5)
        inner = ProxyScreen(outer, 1, 1, 4, 2)
        inner.set_content(0, 0, "a", None, STYLE_DEFAULT)
        inner.set_content(3, 1, "b", None, STYLE_DEFAULT)
        assert buf.get_content(3, 4)[0] == "a"
        assert buf.get_content(6, 5)[0] == "b"

    def test_nested_never_escapes_any_ancestor(self) -> None:
        buf = CellBuffer(20, 10)
        outer = ProxyScreen(buf, 2, 2, 3, 3)
        # The inner view claims more room than the outer one has.
        inner = ProxyScreen(outer, 1, 1, 10, 10)
        inner.fill("#", STYLE_DEFAULT)
        lines = buf.to_lines()
        touched = {
            (x, y)
            for y, line in enumerate(lines)
            for x, ch in enumerate(line)
            if ch == "#"
        }
        assert touched == {(3, 3), (4, 3), (3, 4), (4, 4)}

    def test_size_is_clipped_by_parent(self) -> None:
        buf = CellBuffer(20, 10)
        proxy = ProxyScreen(buf, 15, 8, 10, 10)
        assert proxy.size() == (5, 2)

    def test_size_without_parent(self) -> None:
        assert ProxyScreen(None, 0, 0, 5, 5).size() == (0, 0)

    def test_zero_size_draws_nothing(self) -> None:
        buf = CellBuffer(5, 5)
        proxy = ProxyScreen(buf, 1, 1, 0, 3)
        proxy.fill("#", STYLE_DEFAULT)
        assert "#" not in "".join(buf.to_lines())

    def test_offset_past_parent_has_no_size(self) -> None:
        buf = CellBuffer(5, 5)
        proxy = ProxyScreen(buf, 7, 0, 3, 3)
        assert proxy.size() == (0, 3)

    def test_get_content_out_of_bounds(self) -> None:
        buf = CellBuffer(5, 5)
        proxy = ProxyScreen(buf, 1, 1, 2, 2)
        assert proxy.get_content(2, 0) == (" ", (), STYLE_DEFAULT, 1)

    def test_get_content_reads_through(self) -> None:
        buf = CellBuffer(5, 5)
        buf.set_content(2, 2, "q", None, STYLE_DEFAULT)
        proxy = ProxyScreen(buf, 1, 1, 2, 2)
        assert proxy.get_content(1, 1)[0] == "q"

    def test_clear_uses_own_style(self) -> None:
        buf = CellBuffer(4, 4)
        proxy = ProxyScreen(buf, 1, 1, 2, 2)
        style = Style(background="green")
        proxy.set_style(style)
        proxy.clear()
        assert buf.cell(1, 1).style == style
        assert buf.cell(0, 0).style == STYLE_DEFAULT

    def test_show_cursor_translates(self) -> None:
        buf = CellBuffer(10, 10)
        proxy = ProxyScreen(buf, 3, 4, 2, 2)
        proxy.show_cursor(1, 1)
        assert buf.cursor == (4, 5)

    def test_show_cursor_outside_is_ignored(self) -> None:
        buf = CellBuffer(10, 10)
        proxy = ProxyScreen(buf, 3, 4, 2, 2)
        proxy.show_cursor(2, 0)
        assert buf.cursor is None


class TestProxyHitTesting:
    """Half-open rectangle membership and mouse translation."""

    def test_contains_lower_bound(self) -> None:
        proxy = ProxyScreen(None, 2, 3, 4, 5)
        assert proxy.contains(2, 3)

    def test_excludes_upper_bound(self) -> None:
        proxy = ProxyScreen(None, 2, 3, 4, 5)
        assert not proxy.contains(6, 3)
        assert not proxy.contains(2, 8)
        assert proxy.contains(5, 7)

    def test_adjacent_rectangles_do_not_overlap(self) -> None:
        left = ProxyScreen(None, 0, 0, 5, 1)
        right = ProxyScreen(None, 5, 0, 5, 1)
        assert [left.contains(5, 0), right.contains(5, 0)] == [False, True]

    def test_zero_size_contains_nothing(self) -> None:
        proxy = ProxyScreen(None, 2, 2, 0, 0)
        assert not proxy.contains(2, 2)

    def test_offset_mouse_event(self) -> None:
        proxy = ProxyScreen(None, 2, 3, 4, 5)
        event = MouseEvent(4, 4, MouseButton.PRIMARY)
        moved = proxy.offset_mouse_event(event)
        assert moved.position == (2, 1)
        assert moved.buttons is MouseButton.PRIMARY
