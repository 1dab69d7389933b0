"""Pure calendar calculations — no UI dependencies.

Months are 0-based (0 = January) and weekdays run 0 = Sunday … 6 = Saturday,
the same indexing used by ``DAY_ABBR`` and by the ``week_starts`` setting.
"""

import calendar
from dataclasses import dataclass
from enum import IntEnum
from typing import Collection

DAY_ABBR = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


@dataclass(frozen=True)
class GridCell:
    """One slot of the month grid: a blank pad (``day is None``) or a day."""

    day: int | None = None
    is_selected: bool = False
    is_disabled: bool = False

    @property
    def is_blank(self) -> bool:
        return self.day is None


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in the given 0-based month."""
    if month == 1 and calendar.isleap(year):
        return 29
    return calendar.mdays[month + 1]


def first_weekday_of_month(month: int, year: int) -> int:
    """Return the weekday (0 = Sunday) of the 1st of the month."""
    # calendar.weekday counts from Monday = 0
    return (calendar.weekday(year, month + 1, 1) + 1) % 7


def leading_blanks(month: int, year: int, week_starts: int) -> int:
    """Return how many empty cells precede day 1 in the first row."""
    first = first_weekday_of_month(month, year)
    if first >= week_starts:
        return first - week_starts
    return ((7 - week_starts) + first) % 7


def build_weeks(
    month: int,
    year: int,
    week_starts: int,
    selected_day: int | None = None,
    disabled_days: Collection[int] = (),
) -> list[list[GridCell]]:
    """Return the month as rows of up to 7 cells.

    The first row is padded with blank cells so day 1 lands in its weekday
    column; the last row is left short (no trailing blanks).
    """
    cells = [GridCell() for _ in range(leading_blanks(month, year, week_starts))]
    for day in range(1, days_in_month(month, year) + 1):
        cells.append(GridCell(
            day=day,
            is_selected=day == selected_day,
            is_disabled=day in disabled_days,
        ))

    weeks: list[list[GridCell]] = []
    for i, cell in enumerate(cells):
        if i % 7 == 0:
            weeks.append([])
        weeks[-1].append(cell)
    return weeks


def advance_month(month: int, year: int, delta: int) -> tuple[int, int]:
    """Return (month, year) moved by ``delta`` months, rolling over the year."""
    years, new_month = divmod(month + delta, 12)
    return new_month, year + years


def month_title(month: int, year: int, names: tuple[str, ...] = MONTH_ABBR) -> str:
    """Title shown above the grid, e.g. ``"Jan - 2024"``."""
    return f"{names[month]} - {year}"


def day_header(week_starts: int, names: tuple[str, ...] = DAY_ABBR) -> list[str]:
    """Column headings starting at ``week_starts``."""
    return [names[(week_starts + i) % 7] for i in range(7)]
