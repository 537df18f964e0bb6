"""A text entry with a keyboard-navigable list of completion options."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any


class Key(str, enum.Enum):
    """Names of the non-printing keys an entry reacts to."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"
    HOME = "Home"
    END = "End"
    RETURN = "Return"
    ENTER = "KP_Enter"
    ESCAPE = "Escape"
    BACKSPACE = "BackSpace"
    DELETE = "Delete"
    TAB = "Tab"


class Entry:
    """A single-line text input with a cursor."""

    def __init__(
        self,
        text: str = "",
        *,
        on_changed: Callable[[str], object] | None = None,
        on_submitted: Callable[[str], object] | None = None,
    ) -> None:
        self.text = text
        self.cursor_column = 0
        self.on_changed = on_changed
        self.on_submitted = on_submitted

    def _update(self, text: str, cursor: int) -> None:
        changed = text != self.text
        self.text = text
        self.cursor_column = max(0, min(cursor, len(text)))
        if changed and self.on_changed is not None:
            self.on_changed(text)

    def set_text(self, text: str) -> None:
        """Replace the text, keeping the cursor within it."""
        self._update(text, self.cursor_column)

    def typed_rune(self, char: str) -> None:
        """Insert ``char`` at the cursor."""
        cursor = max(0, min(self.cursor_column, len(self.text)))
        self._update(self.text[:cursor] + char + self.text[cursor:], cursor + len(char))

    def typed_key(self, key: Key) -> None:
        """Handle a non-printing key."""
        cursor = max(0, min(self.cursor_column, len(self.text)))
        if key in (Key.RETURN, Key.ENTER):
            if self.on_submitted is not None:
                self.on_submitted(self.text)
        elif key is Key.BACKSPACE:
            if cursor > 0:
                self._update(self.text[: cursor - 1] + self.text[cursor:], cursor - 1)
        elif key is Key.DELETE:
            if cursor < len(self.text):
                self._update(self.text[:cursor] + self.text[cursor + 1:], cursor)
        elif key is Key.LEFT:
            self.cursor_column = max(0, cursor - 1)
        elif key is Key.RIGHT:
            self.cursor_column = min(len(self.text), cursor + 1)
        elif key is Key.HOME:
            self.cursor_column = 0
        elif key is Key.END:
            self.cursor_column = len(self.text)


@dataclass
class _Label:
    text: str = ""


@dataclass
class _Popup:
    visible: bool = False

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False


class NavigableList:
    """The list of options, moved through with the arrow keys.

    ``rendered`` holds one item object per option, made by ``create`` and
    filled by ``update`` when they are given, and plain labels otherwise.
    """

    def __init__(
        self,
        items: Sequence[str],
        entry: Entry,
        set_text_from_menu: Callable[[str], object],
        hide: Callable[[], object],
        create: Callable[[], Any] | None = None,
        update: Callable[[int, Any], object] | None = None,
    ) -> None:
        self.entry = entry
        self.selected = -1
        self.navigating = False
        self.items = list(items)
        self.custom_create = create
        self.custom_update = update
        self._set_text_from_menu = set_text_from_menu
        self._hide = hide
        self._list_selected: int | None = None
        self.rendered: list[Any] = []
        self._refresh()

    def _make_item(self, index: int) -> Any:
        item = self.custom_create() if self.custom_create is not None else _Label()
        if self.custom_update is not None:
            self.custom_update(index, item)
        else:
            item.text = self.items[index]
        return item

    def _refresh(self) -> None:
        self.rendered = [self._make_item(index) for index in range(len(self.items))]

    def _on_selected(self, index: int) -> None:
        if not self.navigating and index > -1:
            self._set_text_from_menu(self.items[index])
        self.navigating = False

    def set_options(self, items: Sequence[str]) -> None:
        """Replace the options and clear the selection."""
        if self._list_selected == self.selected:
            self._list_selected = None
        self.items = list(items)
        self._refresh()
        self.selected = -1

    def select(self, index: int) -> None:
        """Select the item at ``index``; selecting the selected item does nothing."""
        if not 0 <= index < len(self.items) or index == self._list_selected:
            return
        self._list_selected = index
        self._on_selected(index)

    def unselect_all(self) -> None:
        """Clear the list's selection."""
        self._list_selected = None

    def typed_key(self, key: Key) -> None:
        """Move through the options, pick one, close the list or pass the key on."""
        if key is Key.DOWN:
            self.selected = self.selected + 1 if self.selected < len(self.items) - 1 else 0
            self.navigating = True
            self.select(self.selected)
        elif key is Key.UP:
            self.selected = self.selected - 1 if self.selected > 0 else len(self.items) - 1
            self.navigating = True
            self.select(self.selected)
        elif key in (Key.RETURN, Key.ENTER):
            if self.selected == -1:
                self._hide()
                self.entry.typed_key(key)
            else:
                self.navigating = False
                self._on_selected(self.selected)
        elif key is Key.ESCAPE:
            self._hide()
        else:
            self.entry.typed_key(key)

    def typed_rune(self, char: str) -> None:
        """Pass typed text on to the entry."""
        self.entry.typed_rune(char)


class CompletionEntry(Entry):
    """An entry that shows its options in a pop-up list while the user types."""

    def __init__(
        self,
        options: Sequence[str],
        *,
        custom_create: Callable[[], Any] | None = None,
        custom_update: Callable[[int, Any], object] | None = None,
    ) -> None:
        super().__init__()
        self.options = list(options)
        self.custom_create = custom_create
        self.custom_update = custom_update
        self.popup: _Popup | None = None
        self.navigable_list: NavigableList | None = None
        self._pause = False

    def set_options(self, items: Sequence[str]) -> None:
        """Replace the completion options and update the list."""
        self.options = list(items)
        if self.navigable_list is not None:
            self.navigable_list.set_options(self.options)

    def show_completion(self) -> None:
        """Show the options, or hide the list when there are none."""
        if self._pause:
            return
        if not self.options:
            self.hide_completion()
            return
        if self.navigable_list is None:
            self.navigable_list = NavigableList(
                self.options,
                self,
                self._set_text_from_menu,
                self.hide_completion,
                self.custom_create,
                self.custom_update,
            )
        else:
            self.navigable_list.unselect_all()
            self.navigable_list.selected = -1
        if self.popup is None:
            self.popup = _Popup()
        self.popup.show()

    def hide_completion(self) -> None:
        """Hide the options."""
        if self.popup is not None:
            self.popup.hide()

    def focused(self) -> Entry | NavigableList:
        """Return what receives key presses: the list while shown, else the entry."""
        if self.popup is not None and self.popup.visible and self.navigable_list is not None:
            return self.navigable_list
        return self

    def _set_text_from_menu(self, text: str) -> None:
        self._pause = True
        try:
            self.set_text(text)
            self.cursor_column = len(text)
        finally:
            self._pause = False
        if self.popup is not None:
            self.popup.hide()