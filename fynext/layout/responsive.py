"""A layout that sizes objects as ratios of their container, by window width.

Each object carries one width ratio per breakpoint. Objects are placed left to
right and wrap onto a new line once the next position would overflow.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence

from .canvas import PADDING, CanvasObject, Position, Size

logger = logging.getLogger(__name__)


class Breakpoint(enum.IntEnum):
    """Window widths at which the ratio used for an object changes."""

    SMALL = 576
    MEDIUM = 768
    LARGE = 992
    XLARGE = 1200
    SM = 576
    MD = 768
    LG = 992
    XL = 1200


_ORDER = (Breakpoint.SMALL, Breakpoint.MEDIUM, Breakpoint.LARGE, Breakpoint.XLARGE)


def responsive_config(*ratios: float) -> dict[Breakpoint, float]:
    """Map each breakpoint to a ratio, in the order small, medium, large, xlarge.

    Missing ratios repeat the previous one, or are 1.0 when none is given.
    Every ratio must satisfy 0 < ratio <= 1.
    """
    if len(ratios) > 4:
        logger.warning(
            "Responsive: you declared more than 4 ratios, only the first 4 will be used"
        )
    for ratio in ratios:
        if ratio <= 0 or ratio > 1:
            raise ValueError(f"Responsive: size must be > 0 and <= 1, got: {ratio:f}")

    config: dict[Breakpoint, float] = {}
    previous = 1.0
    for index, breakpoint in enumerate(_ORDER):
        if index < len(ratios):
            previous = ratios[index]
        config[breakpoint] = previous
    return config


class ResponsiveObject(CanvasObject):
    """Wraps a canvas object together with its per-breakpoint ratios."""

    def __init__(self, inner: CanvasObject | None, config: dict[Breakpoint, float]) -> None:
        super().__init__()
        self.inner = inner
        self.config = dict(config)

    def min_size(self) -> Size:
        """Return the minimum size of the wrapped object."""
        return self.inner.min_size() if self.inner is not None else Size()

    def resize(self, size: Size) -> None:
        """Resize this wrapper and the object it fills."""
        super().resize(size)
        if self.inner is not None:
            self.inner.resize(size)

    def ratio_for(self, window_width: float) -> float:
        """Return the width ratio that applies at ``window_width``."""
        width = int(window_width)
        for breakpoint in _ORDER[:-1]:
            if width <= breakpoint:
                return self.config[breakpoint]
        return self.config[Breakpoint.XLARGE]


def responsive(obj: CanvasObject | None, *args: float) -> ResponsiveObject:
    """Wrap ``obj`` with ratios for small, medium, large and xlarge windows."""
    return ResponsiveObject(obj, responsive_config(*args))


class ResponsiveLayout:
    """Places responsive objects in lines, each sized by its ratio."""

    def layout(
        self,
        objects: Sequence[CanvasObject | None],
        container_size: Size,
        window_width: float,
    ) -> None:
        """Size and place ``objects`` inside ``container_size``."""
        if not objects or objects[0] is None:
            return

        x = y = 0.0
        max_height = 0.0
        line: list[CanvasObject] = []

        for obj in objects:
            if obj is None or not obj.visible:
                continue
            if not isinstance(obj, ResponsiveObject):
                raise TypeError(
                    "A non responsive object has been packed inside a ResponsiveLayout"
                )
            line.append(obj)
            size = Size(obj.ratio_for(window_width) * container_size.width,
                        obj.min_size().height)
            obj.resize(size)
            obj.move(Position(x, y))

            x += size.width + PADDING
            max_height = max(max_height, size.height)

            if x >= container_size.width - PADDING:
                self._fix_padding_on_line(line)
                line = []
                x = 0.0
                y += max_height
                max_height = 0.0
        self._fix_padding_on_line(line)

    def min_size(self, objects: Sequence[CanvasObject | None]) -> Size:
        """Return the minimum size needed to show ``objects``."""
        if not objects:
            return Size(0, 0)

        first = next((o for o in objects if o is not None), None)
        if first is None:
            return Size(0, 0)

        width = height = max_height = 0.0
        current_y = first.position.y
        for obj in objects:
            if obj is None or not obj.visible:
                continue
            minimum = obj.min_size()
            width = max(minimum.width, width) + PADDING
            if obj.position.y != current_y:
                current_y = obj.position.y
                height += max_height
                max_height = 0.0
            max_height = max(max_height, minimum.height)
        height += max_height + PADDING
        return Size(width, height)

    @staticmethod
    def _fix_padding_on_line(line: Sequence[CanvasObject]) -> None:
        if len(line) <= 1:
            return
        shrink = PADDING / (len(line) - 1)
        for index, obj in enumerate(line):
            obj.resize(Size(obj.size.width - shrink, obj.size.height))
            if index > 0:
                obj.move(Position(obj.position.x - PADDING * index, obj.position.y))


class ResponsiveContainer(CanvasObject):
    """A container of responsive objects arranged by a ``ResponsiveLayout``."""

    def __init__(self, objects: Sequence[ResponsiveObject]) -> None:
        super().__init__()
        self.layout = ResponsiveLayout()
        self.objects = list(objects)
        self._window_width: float | None = None

    def resize(self, size: Size, window_width: float | None = None) -> None:
        """Resize the container and lay out its objects for ``window_width``.

        Without a window width the last known one is used, or the container
        width when none is known yet.
        """
        if window_width is not None:
            self._window_width = window_width
        width = self._window_width if self._window_width is not None else size.width
        super().resize(size)
        self.layout.layout(self.objects, size, width)

    def min_size(self) -> Size:
        """Return the minimum size the layout needs for the objects."""
        return self.layout.min_size(self.objects)


def new_responsive_layout(*args: CanvasObject) -> ResponsiveContainer:
    """Return a container of ``args``, wrapping plain objects at full width."""
    objects = [
        obj if isinstance(obj, ResponsiveObject) else responsive(obj) for obj in args
    ]
    return ResponsiveContainer(objects)