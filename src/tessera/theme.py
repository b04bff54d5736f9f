"""Default colors and border glyphs.

A ``Theme`` is a plain value handed to components at construction time;
components fall back to ``DEFAULT_THEME`` when none is given.  Several
trees with different themes can coexist.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tessera.screen import Color


@dataclass(frozen=True)
class BorderGlyphs:
    """Box-drawing characters, with a heavier set for the focused state."""

    horizontal: str = "─"
    vertical: str = "│"
    top_left: str = "┌"
    top_right: str = "┐"
    bottom_left: str = "└"
    bottom_right: str = "┘"

    horizontal_focus: str = "═"
    vertical_focus: str = "║"
    top_left_focus: str = "╔"
    top_right_focus: str = "╗"
    bottom_left_focus: str = "╚"
    bottom_right_focus: str = "╝"

    def select(self, focused: bool) -> tuple[str, str, str, str, str, str]:
        """Return ``(horizontal, vertical, tl, tr, bl, br)`` for a state."""
        if focused:
            return (
                self.horizontal_focus,
                self.vertical_focus,
                self.top_left_focus,
                self.top_right_focus,
                self.bottom_left_focus,
                self.bottom_right_focus,
            )
        return (
            self.horizontal,
            self.vertical,
            self.top_left,
            self.top_right,
            self.bottom_left,
            self.bottom_right,
        )


@dataclass(frozen=True)
class Theme:
    primitive_background_color: Color = "black"
    contrast_background_color: Color = "blue"
    more_contrast_background_color: Color = "green"
    border_color: Color = "white"
    title_color: Color = "white"
    primary_text_color: Color = "white"
    borders: BorderGlyphs = field(default_factory=BorderGlyphs)


ASCII_BORDERS = BorderGlyphs(
    horizontal="-",
    vertical="|",
    top_left="+",
    top_right="+",
    bottom_left="+",
    bottom_right="+",
    horizontal_focus="=",
    vertical_focus="H",
    top_left_focus="#",
    top_right_focus="#",
    bottom_left_focus="#",
    bottom_right_focus="#",
)

DEFAULT_THEME = Theme()
