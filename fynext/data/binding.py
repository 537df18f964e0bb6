"""Observable values that notify their listeners when they change."""

from __future__ import annotations

import re
import threading
from collections.abc import Callable
from typing import Any

Listener = Callable[[], object]

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Binding:
    """A value that calls its listeners whenever it is set to something new.

    A listener is a callable taking no arguments. It is called once when it
    is added, then after every change of the value.
    """

    def __init__(self, value: Any = None) -> None:
        self._value = value
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    def get(self) -> Any:
        """Return the current value."""
        with self._lock:
            return self._value

    def set(self, value: Any) -> None:
        """Store ``value`` and notify the listeners if it differs from the current one."""
        with self._lock:
            if value == self._value:
                return
            self._value = value
        self._notify()

    def add_listener(self, listener: Listener) -> None:
        """Register ``listener`` and call it straight away."""
        with self._lock:
            self._listeners.append(listener)
        listener()

    def remove_listener(self, listener: Listener) -> None:
        """Stop calling ``listener``; unknown listeners are ignored."""
        with self._lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

    def _notify(self) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener()


class StringCloser(Binding):
    """A string binding that holds a resource which ``close`` frees."""

    def __init__(self, value: str = "") -> None:
        super().__init__(value)
        self.closed = False

    def close(self) -> None:
        """Free the resource behind this binding. Closing twice is harmless."""
        self.closed = True

    def __enter__(self) -> StringCloser:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class _StringToInt(Binding):
    """An integer view of a string binding."""

    def __init__(self, source: Binding) -> None:
        super().__init__(0)
        self._source = source
        source.add_listener(self._notify)

    def get(self) -> int:
        text = self._source.get()
        if not isinstance(text, str) or not _INTEGER.fullmatch(text.strip()):
            raise ValueError(f"invalid integer: {text!r}")
        return int(text.strip())

    def set(self, value: int) -> None:
        self._source.set(str(int(value)))


def string_to_int(source: Binding) -> Binding:
    """Return an integer binding that reads and writes the decimal text of ``source``."""
    return _StringToInt(source)