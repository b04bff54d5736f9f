"""Tests for the leaf widgets -- TextField, Button and ProgressBar."""

from __future__ import annotations

from tessera.components.button import Button
from tessera.components.progress import BLOCKS, ProgressBar
from tessera.components.text_field import TextField
from tessera.events import Key, KeyEvent, MouseButton, MouseEvent, PasteEvent
from tessera.screen import CellBuffer
from tessera.theme import Theme


# ---------------------------------------------------------------------------
# TextField
# ---------------------------------------------------------------------------


class TestTextField:
    def test_draws_left_aligned(self) -> None:
        buf = CellBuffer(6, 1)
        TextField("hi").draw(buf)
        assert buf.to_lines() == ["hi    "]

    def test_clears_previous_text(self) -> None:
        buf = CellBuffer(6, 1)
        field = TextField("hello")
        field.draw(buf)
        field.set_text("yo")
        field.draw(buf)
        assert buf.to_lines() == ["yo    "]

    def test_truncates(self) -> None:
        buf = CellBuffer(3, 1)
        TextField("hello").draw(buf)
        assert buf.to_lines() == ["hel"]

    def test_colors(self) -> None:
        buf = CellBuffer(3, 1)
        field = TextField("a", theme=Theme(primary_text_color="cyan"))
        field.set_background_color("black")
        field.draw(buf)
        style = buf.cell(0, 0).style
        assert (style.foreground, style.background) == ("cyan", "black")
        assert buf.cell(2, 0).style.background == "black"

    def test_event_callbacks(self) -> None:
        field = TextField("a")
        assert field.on_key_event(KeyEvent(Key.ENTER)) is False
        field.on_key = lambda event: True
        assert field.on_key_event(KeyEvent(Key.ENTER)) is True


# ---------------------------------------------------------------------------
# Button
# ---------------------------------------------------------------------------


class TestButton:
    def test_draws_centered(self) -> None:
        buf = CellBuffer(8, 1)
        Button("OK").draw(buf)
        assert buf.to_lines() == ["   OK   "]

    def test_focused_style(self) -> None:
        theme = Theme(contrast_background_color="blue", more_contrast_background_color="green")
        button = Button("OK", theme=theme)
        buf = CellBuffer(4, 1)
        button.draw(buf)
        assert buf.cell(0, 0).style.background == "blue"
        button.focus()
        button.draw(buf)
        assert buf.cell(0, 0).style.background == "green"
        button.blur()
        button.draw(buf)
        assert buf.cell(0, 0).style.background == "blue"

    def test_enter_clicks(self) -> None:
        clicks: list[int] = []
        button = Button("OK", on_click=lambda: clicks.append(1))
        assert button.on_key_event(KeyEvent(Key.ENTER)) is True
        assert button.on_key_event(KeyEvent(Key.RUNE, "x")) is False
        assert clicks == [1]

    def test_left_press_clicks(self) -> None:
        clicks: list[int] = []
        button = Button("OK", on_click=lambda: clicks.append(1))
        assert button.on_mouse_event(MouseEvent(0, 0, MouseButton.PRIMARY)) is True
        assert button.on_mouse_event(MouseEvent(0, 0, MouseButton.SECONDARY)) is False
        assert clicks == [1]

    def test_click_without_callback(self) -> None:
        assert Button("OK").on_key_event(KeyEvent(Key.ENTER)) is True

    def test_paste_is_ignored(self) -> None:
        assert Button("OK").on_paste_event(PasteEvent("x")) is False


# ---------------------------------------------------------------------------
# ProgressBar
# ---------------------------------------------------------------------------


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestProgressBar:
    def test_value_is_clamped(self) -> None:
        bar = ProgressBar()
        bar.set_progress(150)
        assert bar.progress == 100
        bar.increment(-500)
        assert bar.progress == 0

    def test_lowering_max_clamps_progress(self) -> None:
        bar = ProgressBar()
        bar.set_progress(80)
        bar.set_max(50)
        assert (bar.progress, bar.max) == (50, 50)

    def test_determinate_full_blocks(self) -> None:
        bar = ProgressBar()
        bar.set_indeterminate(False)
        bar.set_progress(50)
        buf = CellBuffer(10, 1)
        bar.draw(buf)
        assert buf.to_lines() == [BLOCKS[8] * 5 + " " * 5]

    def test_determinate_partial_block(self) -> None:
        bar = ProgressBar()
        bar.set_indeterminate(False)
        bar.set_progress(55)
        buf = CellBuffer(10, 1)
        bar.draw(buf)
        assert buf.get_content(5, 0)[0] == BLOCKS[4]

    def test_determinate_complete(self) -> None:
        bar = ProgressBar()
        bar.set_indeterminate(False)
        bar.set_progress(100)
        buf = CellBuffer(4, 1)
        bar.draw(buf)
        assert buf.to_lines() == [BLOCKS[8] * 4]

    def test_indeterminate_moves_with_time(self) -> None:
        clock = FakeClock()
        bar = ProgressBar(clock=clock)
        buf = CellBuffer(12, 1)

        clock.now = 0.65  # three steps
        bar.draw(buf)
        assert buf.to_lines() == [" " + BLOCKS[8] * 2 + " " * 9]

    def test_indeterminate_wraps(self) -> None:
        clock = FakeClock()
        bar = ProgressBar(clock=clock)
        buf = CellBuffer(12, 1)
        clock.now = 2.9  # one full sweep of width + bar width
        bar.draw(buf)
        assert buf.to_lines() == [" " * 12]

    def test_zero_width(self) -> None:
        ProgressBar().draw(CellBuffer(0, 1))

    def test_ignores_events(self) -> None:
        bar = ProgressBar()
        assert bar.on_key_event(KeyEvent(Key.ENTER)) is False
        assert bar.on_mouse_event(MouseEvent(0, 0, MouseButton.PRIMARY)) is False
