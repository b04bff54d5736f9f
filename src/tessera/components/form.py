"""Form component - a grid with keyboard navigation between its items."""

from __future__ import annotations

from tessera.component import Component, FormItem
from tessera.components.grid import Grid, _GridChild
from tessera.events import Key, KeyEvent, Modifier


class Form(Grid):
    """Form component - a grid with keyboard navigation between its items.

    Form items are an ordered subset of the grid's children.  Tab and
    Backtab (or Shift+Tab) cycle focus through them, wrapping at both
    ends.  Enter on an item implementing ``FormItem`` calls its
    ``submit``; focus moves on only if ``submit`` returned ``True``.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._items: list[_GridChild] = []

    @property
    def items(self) -> list[Component]:
        return [item.target for item in self._items]

    def add_form_item(
        self, component: Component, x: int, y: int, width: int = 1, height: int = 1
    ) -> None:
        child = self._create_child(component, x, y, width, height)
        self._items.append(child)
        self._add_child(child)

    def remove_form_item(self, component: Component) -> None:
        self.remove_component(component)

    def remove_component(self, component: Component) -> None:
        self._items = [item for item in self._items if item.target is not component]
        super().remove_component(component)

    def focus_next_item(self) -> None:
        if not self._items:
            return
        if self._focused in self._items:
            index = self._items.index(self._focused)
            self._set_focused(self._items[(index + 1) % len(self._items)])
        else:
            self._set_focused(self._items[0])

    def focus_previous_item(self) -> None:
        if not self._items:
            return
        if self._focused in self._items:
            index = self._items.index(self._focused)
            self._set_focused(self._items[index - 1])
        else:
            self._set_focused(self._items[-1])

    def on_key_event(self, event: KeyEvent) -> bool:
        if self._items:
            if event.key is Key.BACKTAB or (
                event.key is Key.TAB and event.modifiers & Modifier.SHIFT
            ):
                self.focus_previous_item()
                return True
            if event.key is Key.TAB:
                self.focus_next_item()
                return True
        if event.key is Key.ENTER and self._focused is not None:
            target = self._focused.target
            if isinstance(target, FormItem):
                if target.submit(event):
                    self.focus_next_item()
                    return True
                return False
        return super().on_key_event(event)
