"""Box component - frames a single child with an optional border and title."""

from __future__ import annotations

from typing import Callable

from tessera.component import Component, is_focusable
from tessera.events import KeyEvent, MouseEvent, PasteEvent, is_left_press
from tessera.screen import STYLE_DEFAULT, Color, ProxyScreen, Screen, Style
from tessera.theme import DEFAULT_THEME, Theme
from tessera.utils import Align, print_text

KeyCaptureFunc = Callable[[KeyEvent], "KeyEvent | None"]
MouseCaptureFunc = Callable[[MouseEvent], "MouseEvent | None"]
PasteCaptureFunc = Callable[[PasteEvent], "PasteEvent | None"]
FocusCaptureFunc = Callable[[], bool]


class Box:
    """Box component - frames a single child with an optional border and title.

    The child is drawn into a ``ProxyScreen`` covering the interior, which
    is recomputed on every draw.  Capture functions run before an event is
    forwarded and may replace it, or swallow it by returning ``None``.
    """

    def __init__(
        self,
        inner: Component | None = None,
        *,
        border: bool = True,
        title: str = "",
        theme: Theme | None = None,
    ) -> None:
        self._theme = theme or DEFAULT_THEME
        self._inner = inner
        self._inner_screen = ProxyScreen()
        self._border = border
        self._border_style: Style = Style(foreground=self._theme.border_color)
        self._background_color: Color | None = self._theme.primitive_background_color
        self._title = title
        self._focused = False

        self._key_capture: KeyCaptureFunc | None = None
        self._mouse_capture: MouseCaptureFunc | None = None
        self._paste_capture: PasteCaptureFunc | None = None
        self._focus_capture: FocusCaptureFunc | None = None
        self._blur_capture: FocusCaptureFunc | None = None

    # -- configuration ------------------------------------------------------

    @property
    def inner(self) -> Component | None:
        return self._inner

    @property
    def focused(self) -> bool:
        return self._focused

    @property
    def inner_screen(self) -> ProxyScreen:
        return self._inner_screen

    def set_inner_component(self, component: Component | None) -> None:
        self._inner = component

    def set_border(self, border: bool) -> None:
        self._border = border

    def set_border_style(self, style: Style) -> None:
        self._border_style = style

    def set_title(self, title: str) -> None:
        self._title = title

    def set_background_color(self, color: Color | None) -> None:
        """Set the fill color; ``None`` leaves the area untouched."""
        self._background_color = color

    def set_key_capture_func(self, fn: KeyCaptureFunc | None) -> None:
        self._key_capture = fn

    def set_mouse_capture_func(self, fn: MouseCaptureFunc | None) -> None:
        self._mouse_capture = fn

    def set_paste_capture_func(self, fn: PasteCaptureFunc | None) -> None:
        self._paste_capture = fn

    def set_focus_capture_func(self, fn: FocusCaptureFunc | None) -> None:
        """*fn* runs on focus; returning ``True`` keeps the child unfocused."""
        self._focus_capture = fn

    def set_blur_capture_func(self, fn: FocusCaptureFunc | None) -> None:
        self._blur_capture = fn

    # -- focus --------------------------------------------------------------

    def focus(self) -> None:
        self._focused = True
        if self._focus_capture is not None and self._focus_capture():
            return
        if is_focusable(self._inner):
            self._inner.focus()  # type: ignore[union-attr]

    def blur(self) -> None:
        self._focused = False
        if self._blur_capture is not None and self._blur_capture():
            return
        if is_focusable(self._inner):
            self._inner.blur()  # type: ignore[union-attr]

    # -- drawing ------------------------------------------------------------

    def _draw_border(self, screen: Screen, width: int, height: int) -> None:
        horizontal, vertical, top_left, top_right, bottom_left, bottom_right = (
            self._theme.borders.select(self._focused)
        )
        style = self._border_style
        if self._background_color is not None:
            style = style.with_background(self._background_color)

        for x in range(width):
            screen.set_content(x, 0, horizontal, None, style)
            screen.set_content(x, height - 1, horizontal, None, style)
        for y in range(height):
            screen.set_content(0, y, vertical, None, style)
            screen.set_content(width - 1, y, vertical, None, style)
        screen.set_content(0, 0, top_left, None, style)
        screen.set_content(width - 1, 0, top_right, None, style)
        screen.set_content(0, height - 1, bottom_left, None, style)
        screen.set_content(width - 1, height - 1, bottom_right, None, style)

        if self._title:
            title_style = style.with_foreground(self._theme.title_color)
            print_text(screen, self._title, 1, 0, width - 2, Align.CENTER, title_style)

    def draw(self, screen: Screen) -> None:
        width, height = screen.size()
        if self._background_color is not None:
            screen.set_style(STYLE_DEFAULT.with_background(self._background_color))
            screen.clear()

        if self._border and width >= 2 and height >= 2:
            self._draw_border(screen, width, height)
            self._inner_screen.set_rect(1, 1, width - 2, height - 2)
        else:
            self._inner_screen.set_rect(0, 0, width, height)

        if self._inner is not None:
            self._inner_screen.parent = screen
            self._inner.draw(self._inner_screen)

    # -- events -------------------------------------------------------------

    def on_key_event(self, event: KeyEvent) -> bool:
        if self._key_capture is not None:
            captured = self._key_capture(event)
            if captured is None:
                return True
            event = captured
        if self._inner is not None:
            return self._inner.on_key_event(event)
        return False

    def on_paste_event(self, event: PasteEvent) -> bool:
        if self._paste_capture is not None:
            captured = self._paste_capture(event)
            if captured is None:
                return True
            event = captured
        if self._inner is not None:
            return self._inner.on_paste_event(event)
        return False

    def on_mouse_event(self, event: MouseEvent) -> bool:
        inner = self._inner_screen
        if not inner.contains(event.x, event.y):
            return False
        event = inner.offset_mouse_event(event)

        focus_changed = False
        if is_left_press(event) and not self._focused:
            self.focus()
            focus_changed = True

        if self._mouse_capture is not None:
            captured = self._mouse_capture(event)
            if captured is None:
                return True
            event = captured
        if self._inner is not None:
            return self._inner.on_mouse_event(event) or focus_changed
        return focus_changed
