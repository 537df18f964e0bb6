"""Bindings to values inside a JSON document held by a string binding."""

from __future__ import annotations

import copy
import json
import threading
from collections.abc import Callable, Sequence
from typing import Any

from .binding import Binding, Listener

PathElement = str | int


def _as_string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"not a string: {value!r}")
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_float(value: Any) -> float:
    if not _is_number(value):
        raise TypeError(f"not a number: {value!r}")
    return float(value)


def _as_int(value: Any) -> int:
    if not _is_number(value):
        raise TypeError(f"not a number: {value!r}")
    return int(value)


def _as_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"not a boolean: {value!r}")
    return value


def _check_key(node: Any, key: PathElement) -> None:
    if isinstance(key, bool) or not isinstance(key, (str, int)):
        raise TypeError(f"invalid path element: {key!r}")
    if isinstance(key, str) and not isinstance(node, dict):
        raise TypeError(f"cannot use key {key!r} on a non-object value")
    if isinstance(key, int) and not isinstance(node, list):
        raise TypeError(f"cannot use index {key} on a non-array value")


def _lookup(root: Any, path: Sequence[PathElement]) -> Any:
    node = root
    for key in path:
        _check_key(node, key)
        if isinstance(key, str):
            if key not in node:
                raise KeyError(f"not found: {key}")
            node = node[key]
        else:
            if not -len(node) <= key < len(node):
                raise IndexError(f"index out of range: {key}")
            node = node[key]
    return node


def _put(node: Any, key: PathElement, value: Any) -> None:
    _check_key(node, key)
    if isinstance(key, str):
        node[key] = value
    elif -len(node) <= key < len(node):
        node[key] = value
    elif key == len(node):
        node.append(value)
    else:
        raise IndexError(f"index out of range: {key}")


def _descend(node: Any, key: PathElement, following: PathElement) -> Any:
    _check_key(node, key)
    if isinstance(key, str):
        child = node.get(key)
    elif -len(node) <= key < len(node):
        child = node[key]
    else:
        child = None
    if not isinstance(child, (dict, list)):
        child = [] if isinstance(following, int) and not isinstance(following, bool) else {}
        _put(node, key, child)
    return child


def _assign(root: Any, path: Sequence[PathElement], value: Any) -> None:
    node = root
    for key, following in zip(path, path[1:]):
        node = _descend(node, key, following)
    _put(node, path[-1], value)


class JSONValue:
    """A JSON document kept in step with a string binding.

    The document itself is not exposed: children obtained with the
    ``get_item_*`` methods give access to the values at given paths.
    """

    def __init__(self, source: Binding) -> None:
        self._source = source
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []
        self._structured: Any = None
        self._error: Exception | None = None
        self.last = "{}"

    def is_empty(self) -> bool:
        """Return False only once a non-empty JSON object has been received."""
        try:
            value = self._get()
        except Exception:
            return True
        return not isinstance(value, dict) or not value

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

    def get_item_string(self, first: PathElement, *args: PathElement) -> JSONChild:
        """Return a binding to the string at the path ``first, *args``."""
        return self._child((first, *args), _as_string, "")

    def get_item_float(self, first: PathElement, *args: PathElement) -> JSONChild:
        """Return a binding to the number, as a float, at the path ``first, *args``."""
        return self._child((first, *args), _as_float, 0.0)

    def get_item_int(self, first: PathElement, *args: PathElement) -> JSONChild:
        """Return a binding to the number, as an int, at the path ``first, *args``."""
        return self._child((first, *args), _as_int, 0)

    def get_item_bool(self, first: PathElement, *args: PathElement) -> JSONChild:
        """Return a binding to the boolean at the path ``first, *args``."""
        return self._child((first, *args), _as_bool, False)

    def _child(
        self,
        path: Sequence[PathElement],
        convert: Callable[[Any], Any],
        default: Any,
    ) -> JSONChild:
        child = JSONChild(self, path, convert, default)
        self.add_listener(child._changed)
        return child

    def _get(self) -> Any:
        with self._lock:
            if self._error is not None:
                raise self._error
            return self._structured

    def _set(self, value: Any) -> None:
        self._source.set(json.dumps(value, separators=(",", ":"), ensure_ascii=False))

    def _changed(self) -> None:
        try:
            text = self._source.get()
        except Exception as exc:
            with self._lock:
                self._error = exc
            return

        structured: Any = None
        error: Exception | None = None
        if text:
            try:
                structured = json.loads(text)
            except ValueError as exc:
                error = exc

        with self._lock:
            self._error = error
            self._structured = structured
            self.last = text
            listeners = list(self._listeners)
        for listener in listeners:
            listener()


class JSONChild(Binding):
    """A binding to one typed value inside a ``JSONValue``."""

    def __init__(
        self,
        source: JSONValue,
        path: Sequence[PathElement],
        convert: Callable[[Any], Any],
        default: Any,
    ) -> None:
        super().__init__(default)
        self.path = tuple(path)
        self._parent = source
        self._convert = convert
        self._default = default
        self._error: Exception | None = None

    def get(self) -> Any:
        """Return the value at the path, or raise why it could not be read."""
        if self._error is not None:
            raise self._error
        return super().get()

    def set(self, value: Any) -> None:
        """Write ``value`` at the path and store the document back in the source."""
        value = self._convert(value)
        with self._parent._lock:
            structured = self._parent._get()
            root = {} if structured is None else copy.deepcopy(structured)
            _assign(root, self.path, value)
            self._parent._set(root)

    def _changed(self) -> None:
        with self._parent._lock:
            try:
                structured = self._parent._get()
            except Exception as exc:
                self._error = exc
                return
            self._error = None
            value = self._default
            if isinstance(structured, dict):
                try:
                    value = self._convert(_lookup(structured, self.path))
                except (LookupError, TypeError) as exc:
                    self._error = exc
                    return
        super().set(value)


def new_json_from_string(data: Binding) -> JSONValue:
    """Return a JSON binding kept in step with the string binding ``data``."""
    value = JSONValue(data)
    data.add_listener(value._changed)
    return value