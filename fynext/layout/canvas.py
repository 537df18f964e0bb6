"""Geometry primitives and a minimal canvas object that layouts arrange."""

from __future__ import annotations

from dataclasses import dataclass

PADDING = 4.0
"""Space, in pixels, that layouts leave between neighbouring objects."""


def _components(value: Size | Position) -> tuple[float, float]:
    if isinstance(value, Size):
        return value.width, value.height
    if isinstance(value, Position):
        return value.x, value.y
    raise TypeError(f"expected a Size or Position, got {type(value).__name__}")


@dataclass(frozen=True)
class Size:
    """A width and height pair."""

    width: float = 0.0
    height: float = 0.0

    def add(self, other: Size | Position) -> Size:
        """Return this size grown by the components of ``other``."""
        dx, dy = _components(other)
        return Size(self.width + dx, self.height + dy)

    def subtract(self, other: Size | Position) -> Size:
        """Return this size shrunk by the components of ``other``."""
        dx, dy = _components(other)
        return Size(self.width - dx, self.height - dy)


@dataclass(frozen=True)
class Position:
    """An x and y coordinate pair."""

    x: float = 0.0
    y: float = 0.0

    def add(self, other: Size | Position) -> Position:
        """Return this position offset by the components of ``other``."""
        dx, dy = _components(other)
        return Position(self.x + dx, self.y + dy)


class CanvasObject:
    """An object with a size, a position, a visibility flag and a minimum size."""

    def __init__(self, min_size: Size | None = None, *, visible: bool = True) -> None:
        self._min = min_size if min_size is not None else Size()
        self.size = Size()
        self.position = Position()
        self.visible = visible

    def resize(self, size: Size) -> None:
        """Set the current size."""
        self.size = size

    def move(self, pos: Position) -> None:
        """Set the current position relative to the parent."""
        self.position = pos

    def min_size(self) -> Size:
        """Return the smallest size this object can be drawn at."""
        return self._min

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={self.size!r}, position={self.position!r}, "
            f"visible={self.visible!r})"
        )