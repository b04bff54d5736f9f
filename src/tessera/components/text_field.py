"""TextField component - a single line of static text."""

from __future__ import annotations

from tessera.events import SimpleEventHandler
from tessera.screen import STYLE_DEFAULT, Color, Screen, Style
from tessera.theme import DEFAULT_THEME, Theme
from tessera.utils import Align, print_text


class TextField(SimpleEventHandler):
    def __init__(self, text: str = "", theme: Theme | None = None) -> None:
        super().__init__()
        theme = theme or DEFAULT_THEME
        self.text = text
        self.style: Style = STYLE_DEFAULT.with_foreground(theme.primary_text_color)

    def set_text(self, text: str) -> None:
        self.text = text

    def set_text_color(self, color: Color) -> None:
        self.style = self.style.with_foreground(color)

    def set_background_color(self, color: Color) -> None:
        self.style = self.style.with_background(color)

    def set_style(self, style: Style) -> None:
        self.style = style

    def draw(self, screen: Screen) -> None:
        width, _ = screen.size()
        screen.set_style(self.style)
        screen.clear()
        print_text(screen, self.text, 0, 0, width, Align.LEFT, self.style)
