"""A month calendar that reports the date picked by the user."""

from __future__ import annotations

import calendar as _calendar
import math
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta, timezone

from ..layout.canvas import PADDING, CanvasObject, Position, Size

DAYS_PER_WEEK = 7
MAX_WEEKS_PER_MONTH = 6

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_WEEKDAYS = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")


def _round(value: float) -> float:
    """Round half away from zero."""
    return float(math.copysign(math.floor(abs(value) + 0.5), value))


def _add_months(moment: datetime, months: int) -> datetime:
    """Add calendar months, letting an overflowing day spill into the next month."""
    total = moment.year * 12 + moment.month - 1 + months
    year, month = divmod(total, 12)
    return moment.replace(year=year, month=month + 1, day=1) + timedelta(days=moment.day - 1)


class _Cell(CanvasObject):
    """A text cell of the calendar: a weekday heading or a day button."""

    def __init__(
        self,
        text: str,
        day: int | None = None,
        on_tapped: Callable[[], object] | None = None,
    ) -> None:
        super().__init__()
        self.text = text
        self.day = day
        self.on_tapped = on_tapped

    def tap(self) -> None:
        if self.on_tapped is not None:
            self.on_tapped()

    def __repr__(self) -> str:
        return f"_Cell(text={self.text!r}, day={self.day!r})"


class CalendarLayout:
    """Arranges visible objects in a grid of seven columns."""

    def __init__(self) -> None:
        self.cell_size = Size()

    def _leading(self, row: int, col: int) -> Position:
        return Position(
            _round(self.cell_size.width * col),
            _round(self.cell_size.height * row),
        )

    def layout(self, objects: Sequence[CanvasObject], size: Size) -> None:
        """Share ``size`` out between the visible objects, one week per row."""
        weeks = 1
        day = 0
        for index, child in enumerate(objects):
            if not child.visible:
                continue
            if day % DAYS_PER_WEEK == 0 and index >= DAYS_PER_WEEK:
                weeks += 1
            day += 1

        self.cell_size = Size(size.width / DAYS_PER_WEEK, size.height / weeks)
        visible = [child for child in objects if child.visible]
        for index, child in enumerate(visible):
            row, col = divmod(index, DAYS_PER_WEEK)
            lead = self._leading(row, col)
            trail = self._leading(row + 1, col + 1)
            child.move(lead)
            child.resize(Size(trail.x, trail.y).subtract(lead))

    def min_size(self, cell_min: Size) -> Size:
        """Return the size of six weeks of cells no smaller than ``cell_min``."""
        return Size(
            cell_min.width * DAYS_PER_WEEK + PADDING * (DAYS_PER_WEEK - 1),
            cell_min.height * MAX_WEEKS_PER_MONTH + PADDING * (MAX_WEEKS_PER_MONTH - 1),
        )


class Calendar:
    """Shows one month at a time and calls ``on_selected`` with the picked date."""

    def __init__(
        self,
        current_time: datetime,
        on_selected: Callable[[datetime], object],
    ) -> None:
        self.current_time = current_time
        self.on_selected = on_selected
        self.layout = CalendarLayout()
        self.dates: list[CanvasObject] = self.calendar_objects()

    def month_year(self) -> str:
        """Return the shown month as e.g. ``January 2006``."""
        return f"{_MONTHS[self.current_time.month - 1]} {self.current_time.year}"

    def column_headings(self) -> list[CanvasObject]:
        """Return the weekday headings, Monday first."""
        return [_Cell(name) for name in _WEEKDAYS]

    def days_of_month(self) -> list[CanvasObject]:
        """Return blank cells up to the first weekday, then one button per day."""
        first_weekday = self.current_time.replace(day=1).isoweekday()
        cells: list[CanvasObject] = [CanvasObject() for _ in range(first_weekday - 1)]
        days = _calendar.monthrange(self.current_time.year, self.current_time.month)[1]
        for day in range(1, days + 1):
            cells.append(_Cell(str(day), day, lambda d=day: self.select_day(d)))
        return cells

    def calendar_objects(self) -> list[CanvasObject]:
        """Return the headings followed by the cells of the shown month."""
        return self.column_headings() + self.days_of_month()

    def date_for_day(self, day: int) -> datetime:
        """Return ``day`` of the shown month at the current hour and minute."""
        moment = self.current_time
        offset = moment.utcoffset() if moment.tzinfo is not None else None
        base = moment.replace(day=1, second=0, microsecond=0)
        if offset is None:
            return base + timedelta(days=day - 1)
        name = moment.tzname()
        fixed = timezone(offset, name) if name else timezone(offset)
        return (base.replace(tzinfo=fixed) + timedelta(days=day - 1)).astimezone(moment.tzinfo)

    def select_day(self, day: int) -> datetime:
        """Report ``day`` of the shown month to ``on_selected`` and return it."""
        selected = self.date_for_day(day)
        self.on_selected(selected)
        return selected

    def next_month(self) -> None:
        """Show the following month."""
        self.current_time = _add_months(self.current_time, 1)
        self.dates = self.calendar_objects()

    def previous_month(self) -> None:
        """Show the preceding month, starting from its first day at midnight."""
        moment = _add_months(self.current_time, -1)
        self.current_time = moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        self.dates = self.calendar_objects()