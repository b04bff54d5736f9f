"""Button component - a clickable, focusable label."""

from __future__ import annotations

from typing import Callable

from tessera.events import Key, KeyEvent, MouseEvent, PasteEvent, is_left_press
from tessera.screen import STYLE_DEFAULT, Color, Screen, Style
from tessera.theme import DEFAULT_THEME, Theme
from tessera.utils import Align, print_text


class Button:
    """Button component - a clickable, focusable label.

    Enter, a left click, or ``submit`` from an enclosing ``Form`` all run
    the ``on_click`` callback.
    """

    def __init__(
        self,
        text: str,
        on_click: Callable[[], None] | None = None,
        theme: Theme | None = None,
    ) -> None:
        theme = theme or DEFAULT_THEME
        self.text = text
        self.on_click = on_click
        self.style: Style = (
            STYLE_DEFAULT.with_background(theme.contrast_background_color)
            .with_foreground(theme.primary_text_color)
        )
        self.focused_style: Style = (
            STYLE_DEFAULT.with_background(theme.more_contrast_background_color)
            .with_foreground(theme.primary_text_color)
        )
        self.focused = False

    def set_text(self, text: str) -> None:
        self.text = text

    def set_on_click(self, fn: Callable[[], None] | None) -> None:
        self.on_click = fn

    def set_foreground_color(self, color: Color) -> None:
        self.style = self.style.with_foreground(color)

    def set_background_color(self, color: Color) -> None:
        self.style = self.style.with_background(color)

    def set_focused_foreground_color(self, color: Color) -> None:
        self.focused_style = self.focused_style.with_foreground(color)

    def set_focused_background_color(self, color: Color) -> None:
        self.focused_style = self.focused_style.with_background(color)

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def _click(self) -> None:
        if self.on_click is not None:
            self.on_click()

    def draw(self, screen: Screen) -> None:
        width, _ = screen.size()
        style = self.focused_style if self.focused else self.style
        screen.set_style(style)
        screen.clear()
        print_text(screen, self.text, 0, 0, width, Align.CENTER, style)

    def submit(self, event: KeyEvent) -> bool:
        self._click()
        return True

    def on_key_event(self, event: KeyEvent) -> bool:
        if event.key is Key.ENTER:
            self._click()
            return True
        return False

    def on_mouse_event(self, event: MouseEvent) -> bool:
        if is_left_press(event):
            self._click()
            return True
        return False

    def on_paste_event(self, event: PasteEvent) -> bool:
        return False
