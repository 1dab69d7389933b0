"""Month-view calendar widget: navigation state, selection and notifications.

The widget never draws anything itself. It feeds the grid computed by
``calendar_logic`` into a renderer (see ``Renderer``) and tells registered
listeners when the selected day or the displayed month changes.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from functools import partial
from typing import Any, Callable, Iterable, Protocol

from calendar_logic import (
    GridCell,
    Weekday,
    advance_month,
    build_weeks,
    day_header,
    days_in_month,
    month_title,
)

logger = logging.getLogger(__name__)

DEFAULT_SELECTOR = ".calendar"

DAY_CHANGED = "day_changed"
MONTH_CHANGED = "month_changed"
EVENTS = (DAY_CHANGED, MONTH_CHANGED)


# ------------------------------------------------------------------
# Errors
# ------------------------------------------------------------------
class CalendarError(Exception):
    """Base class for widget errors."""


class InvalidSelection(CalendarError, ValueError):
    def __init__(self, day: int, last_day: int, reason: str = "out of range") -> None:
        super().__init__(f"cannot select day {day} (1-{last_day}): {reason}")
        self.day = day
        self.last_day = last_day


class InvalidDisableTarget(CalendarError, ValueError):
    """Raised after the valid entries of a ``disable_days`` call were applied."""

    def __init__(self, rejected: list[int], last_day: int) -> None:
        super().__init__(f"days outside 1-{last_day} not disabled: {rejected}")
        self.rejected = rejected
        self.last_day = last_day


class MissingMountTarget(CalendarError, LookupError):
    def __init__(self, selector: str) -> None:
        super().__init__(f"no mount target matches {selector!r}")
        self.selector = selector


# ------------------------------------------------------------------
# State, payloads and the renderer contract
# ------------------------------------------------------------------
@dataclass
class CalendarState:
    year: int
    month: int
    week_starts: int
    selected_day: int | None = None
    disabled_days: set[int] = field(default_factory=set)


@dataclass(frozen=True)
class EventPayload:
    date: date


Listener = Callable[[EventPayload], None]


class Renderer(Protocol):
    """What the widget needs from a UI toolkit.

    Row and cell handles are opaque to the widget; it only passes them back.
    """

    def mount(self, selector: str, previous_symbol: str, next_symbol: str,
              on_previous: Callable[[], None],
              on_next: Callable[[], None]) -> None: ...

    def clear(self) -> None: ...

    def set_title(self, text: str) -> None: ...

    def create_row(self) -> Any: ...

    def create_cell(self, row: Any, text: str) -> Any: ...

    def mark_selected(self, cell: Any) -> None: ...

    def mark_disabled(self, cell: Any) -> None: ...

    def attach_click_handler(self, cell: Any, handler: Callable[[], None]) -> None: ...


# ------------------------------------------------------------------
# Handlers bound to renderer controls
# ------------------------------------------------------------------
def show_previous_month(widget: "CalendarWidget") -> None:
    widget.previous_month()


def show_next_month(widget: "CalendarWidget") -> None:
    widget.next_month()


def select_clicked_day(widget: "CalendarWidget", day: int) -> None:
    widget.select_day(day)


class CalendarWidget:
    """Single-month calendar bound to one renderer."""

    def __init__(
        self,
        renderer: Renderer,
        selector: str = DEFAULT_SELECTOR,
        week_starts: int = Weekday.MONDAY,
        previous_symbol: str = "◀",
        next_symbol: str = "▶",
        today: date | None = None,
        on_day_changed: Listener | None = None,
        on_month_changed: Listener | None = None,
    ) -> None:
        if isinstance(week_starts, bool) or not isinstance(week_starts, int):
            raise TypeError(f"week_starts must be an int, got {week_starts!r}")
        if not 0 <= week_starts <= 6:
            raise ValueError(f"week_starts must be in 0-6, got {week_starts}")

        self._renderer = renderer
        self._listeners: dict[str, list[Listener]] = {name: [] for name in EVENTS}
        if on_day_changed is not None:
            self.add_listener(DAY_CHANGED, on_day_changed)
        if on_month_changed is not None:
            self.add_listener(MONTH_CHANGED, on_month_changed)

        today = today or date.today()
        self._state = CalendarState(
            year=today.year,
            month=today.month - 1,
            week_starts=int(week_starts),
            selected_day=today.day,
        )

        renderer.mount(
            selector, previous_symbol, next_symbol,
            partial(show_previous_month, self),
            partial(show_next_month, self),
        )
        logger.debug("Calendar mounted on %s", selector)
        self._render()
        self._emit(DAY_CHANGED)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def year(self) -> int:
        return self._state.year

    @property
    def month(self) -> int:
        return self._state.month

    @property
    def selected_day(self) -> int | None:
        return self._state.selected_day

    @property
    def week_starts(self) -> int:
        return self._state.week_starts

    @property
    def disabled_days(self) -> frozenset[int]:
        return frozenset(self._state.disabled_days)

    @property
    def current_date(self) -> date:
        """The selected day as a date (the 1st when nothing is selected)."""
        s = self._state
        return date(s.year, s.month + 1, s.selected_day or 1)

    @property
    def title(self) -> str:
        return month_title(self._state.month, self._state.year)

    def days_in_month(self) -> int:
        return days_in_month(self._state.month, self._state.year)

    def weeks(self) -> list[list[GridCell]]:
        s = self._state
        return build_weeks(s.month, s.year, s.week_starts,
                           s.selected_day, s.disabled_days)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def add_listener(self, name: str, callback: Listener) -> None:
        self._listeners_for(name).append(callback)

    def remove_listener(self, name: str, callback: Listener) -> None:
        self._listeners_for(name).remove(callback)

    def _listeners_for(self, name: str) -> list[Listener]:
        try:
            return self._listeners[name]
        except KeyError:
            raise ValueError(f"unknown calendar event {name!r}") from None

    def _emit(self, name: str) -> None:
        payload = EventPayload(self.current_date)
        for callback in list(self._listeners[name]):
            callback(payload)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select_day(self, day: int) -> date:
        last_day = self.days_in_month()
        if not 1 <= day <= last_day:
            raise InvalidSelection(day, last_day)
        if day in self._state.disabled_days:
            raise InvalidSelection(day, last_day, reason="day is disabled")

        self._state.selected_day = day
        logger.debug("Selected %s", self.current_date)
        self._render()
        self._emit(DAY_CHANGED)
        return self.current_date

    def disable_days(self, days: Iterable[int]) -> None:
        """Make days of the displayed month unclickable until the month changes."""
        last_day = self.days_in_month()
        rejected: list[int] = []
        accepted: list[int] = []
        for day in days:
            if 1 <= day <= last_day:
                accepted.append(day)
            else:
                rejected.append(day)

        if accepted:
            self._state.disabled_days.update(accepted)
            self._render()
        if rejected:
            logger.warning("Ignoring days outside %s: %s", self.title, rejected)
            raise InvalidDisableTarget(rejected, last_day)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_month(self) -> date:
        return self._step_month(1)

    def previous_month(self) -> date:
        return self._step_month(-1)

    def _step_month(self, delta: int) -> date:
        s = self._state
        month, year = advance_month(s.month, s.year, delta)
        # Raises ValueError past the date range, before any state moves
        first = date(year, month + 1, 1)
        s.month, s.year = month, year
        s.selected_day = 1
        s.disabled_days.clear()
        logger.debug("Showing %s", self.title)

        self._render()
        self._emit(MONTH_CHANGED)
        self._emit(DAY_CHANGED)
        return first

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _render(self) -> None:
        r = self._renderer
        r.clear()
        r.set_title(self.title)

        header = r.create_row()
        for name in day_header(self._state.week_starts):
            r.create_cell(header, name)

        for week in self.weeks():
            row = r.create_row()
            for cell in week:
                if cell.is_blank:
                    r.create_cell(row, "")
                    continue
                handle = r.create_cell(row, str(cell.day))
                if cell.is_selected:
                    r.mark_selected(handle)
                if cell.is_disabled:
                    r.mark_disabled(handle)
                else:
                    r.attach_click_handler(handle, partial(select_clicked_day, self, cell.day))
