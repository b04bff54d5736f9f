"""Centering components - place one child in the middle of the area."""

from __future__ import annotations

from tessera.component import Component, is_focusable
from tessera.events import KeyEvent, MouseEvent, PasteEvent, is_left_press
from tessera.screen import ProxyScreen, Screen


class Centerer:
    """Draws *target* at a fixed size in the middle of the available area.

    If the target does not fit on an axis it is placed at offset 0 on that
    axis instead of being shrunk.

    Focus is click-driven by default: a left press inside the target
    focuses it and a left press outside blurs it.  With
    ``always_focus_child`` the target is focused as soon as the centerer
    is, and outside clicks are swallowed without blurring it.
    """

    def __init__(
        self,
        target: Component,
        width: int,
        height: int,
        *,
        always_focus_child: bool = False,
    ) -> None:
        self._target = target
        self._screen = ProxyScreen(width=width, height=height)
        self._child_focused = False
        self.always_focus_child = always_focus_child

    @property
    def target(self) -> Component:
        return self._target

    @property
    def child_focused(self) -> bool:
        return self._child_focused

    @property
    def screen(self) -> ProxyScreen:
        return self._screen

    def set_width(self, width: int) -> None:
        self._screen.width = width

    def set_height(self, height: int) -> None:
        self._screen.height = height

    def set_size(self, width: int, height: int) -> None:
        self._screen.width = width
        self._screen.height = height

    def set_always_focus_child(self, always: bool) -> None:
        self.always_focus_child = always

    def draw(self, screen: Screen) -> None:
        total_width, total_height = screen.size()
        padding_x = (total_width - self._screen.width) // 2
        padding_y = (total_height - self._screen.height) // 2
        self._screen.offset_x = max(0, padding_x)
        self._screen.offset_y = max(0, padding_y)
        self._screen.parent = screen
        self._target.draw(self._screen)

    # -- focus --------------------------------------------------------------

    def focus(self) -> None:
        if self.always_focus_child:
            self._child_focused = True
            if is_focusable(self._target):
                self._target.focus()  # type: ignore[attr-defined]

    def blur(self) -> None:
        self._child_focused = False
        if is_focusable(self._target):
            self._target.blur()  # type: ignore[attr-defined]

    # -- events -------------------------------------------------------------

    def on_key_event(self, event: KeyEvent) -> bool:
        return self._target.on_key_event(event)

    def on_paste_event(self, event: PasteEvent) -> bool:
        return self._target.on_paste_event(event)

    def on_mouse_event(self, event: MouseEvent) -> bool:
        focusable = is_focusable(self._target)
        if not self._screen.contains(event.x, event.y):
            if focusable and is_left_press(event):
                if self.always_focus_child and not self._child_focused:
                    self._target.focus()  # type: ignore[attr-defined]
                    self._child_focused = True
                elif not self.always_focus_child and self._child_focused:
                    self.blur()
                return True
            return False

        focus_changed = False
        if focusable and not self._child_focused and is_left_press(event):
            self._target.focus()  # type: ignore[attr-defined]
            self._child_focused = True
            focus_changed = True
        handled = self._target.on_mouse_event(self._screen.offset_mouse_event(event))
        return handled or focus_changed


class FractionalCenterer(Centerer):
    """A ``Centerer`` sized as a fraction of the available area.

    The size is recomputed on every draw as ``int(available * fraction)``
    and never drops below the configured minimum.
    """

    def __init__(
        self,
        target: Component,
        min_width: int,
        min_height: int,
        fraction_width: float,
        fraction_height: float,
        *,
        always_focus_child: bool = False,
    ) -> None:
        super().__init__(target, 0, 0, always_focus_child=always_focus_child)
        self.min_width = min_width
        self.min_height = min_height
        self.fraction_width = fraction_width
        self.fraction_height = fraction_height

    def draw(self, screen: Screen) -> None:
        width, height = screen.size()
        width = max(int(width * self.fraction_width), self.min_width)
        height = max(int(height * self.fraction_height), self.min_height)
        self.set_size(width, height)
        super().draw(screen)
