"""Layouts that share the available width or height out in fixed portions."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .canvas import PADDING, CanvasObject, Position, Size

logger = logging.getLogger(__name__)

_MISMATCH = "Mismatch between partitions and objects"


class _Portion:
    def __init__(self, portions: Sequence[float]) -> None:
        self.portions = list(portions)

    def _matches(self, objects: Sequence[CanvasObject]) -> bool:
        if len(self.portions) != len(objects):
            logger.warning(_MISMATCH)
            return False
        return True


class HPortion(_Portion):
    """Divides the width between objects in proportion to ``portions``.

    There must be exactly one portion per object.
    """

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Resize and place each object in its share of the width."""
        if not self._matches(objects):
            return
        total = sum(self.portions)
        available = size.width - PADDING * (len(objects) - 1)
        x = 0.0
        for portion, child in zip(self.portions, objects):
            width = portion / total * available
            child.resize(Size(width, size.height))
            child.move(Position(x, 0))
            x += width + PADDING

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """Return the smallest size that gives every object its minimum width."""
        if not self._matches(objects) or not objects:
            return Size(0, 0)
        total = sum(self.portions)
        height = 0.0
        widest = 0.0
        widest_portion = None
        for portion, child in zip(self.portions, objects):
            minimum = child.min_size()
            height = max(height, minimum.height)
            if minimum.width > widest:
                widest = minimum.width
                widest_portion = portion
        padding = (len(objects) - 1) * PADDING
        width = widest / (widest_portion / total) if widest_portion is not None else 0.0
        return Size(width + padding, height)


class VPortion(_Portion):
    """Divides the height between objects in proportion to ``portions``.

    There must be exactly one portion per object.
    """

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Resize and place each object in its share of the height."""
        if not self._matches(objects):
            return
        total = sum(self.portions)
        available = size.height - PADDING * (len(objects) - 1)
        y = 0.0
        for portion, child in zip(self.portions, objects):
            height = portion / total * available
            child.resize(Size(size.width, height))
            child.move(Position(0, y))
            y += height + PADDING

    def min_size(self, objects: Sequence[CanvasObject]) -> Size:
        """Return the smallest size that gives every object its minimum height."""
        if not self._matches(objects) or not objects:
            return Size(0, 0)
        total = sum(self.portions)
        width = 0.0
        tallest = 0.0
        tallest_portion = None
        for portion, child in zip(self.portions, objects):
            minimum = child.min_size()
            width = max(width, minimum.width)
            if minimum.height > tallest:
                tallest = minimum.height
                tallest_portion = portion
        padding = (len(objects) - 1) * PADDING
        height = tallest / (tallest_portion / total) if tallest_portion is not None else 0.0
        return Size(width, height + padding)