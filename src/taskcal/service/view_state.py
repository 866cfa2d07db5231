"""Calendar navigation as pure transitions over an explicit view state."""

# SPDX-License-Identifier: MIT

from typing import Any, Optional

import pendulum

from taskcal.model.calendar import MONTH, WEEK, CalendarMode, ViewState
from taskcal.time import today_local, to_local_date, weekday_index

CALENDAR_MODES: tuple[CalendarMode, ...] = (MONTH, WEEK)


def initial_view_state(today: Optional[pendulum.Date] = None) -> ViewState:
    """Month view anchored on today, nothing selected."""
    if today is None:
        today = today_local()
    return {"mode": MONTH, "anchor": today, "selected": None}


def switch_mode(state: ViewState, mode: str) -> ViewState:
    """Replace the view mode. The anchor date is kept as is."""
    if mode not in CALENDAR_MODES:
        raise ValueError(f"unknown calendar mode: {mode!r}")
    new_state = state.copy()
    new_state["mode"] = mode  # type: ignore[typeddict-item]
    return new_state


def advance(state: ViewState, step: int) -> ViewState:
    """
    Move the anchor one period forward (+1) or backward (-1).

    Month mode shifts by a calendar month and lets pendulum clamp the day of
    month (Jan 31 + 1 month is the last day of February). Week mode shifts by
    seven days.
    """
    if step not in (1, -1):
        raise ValueError(f"step must be +1 or -1, got {step}")
    new_state = state.copy()
    if state["mode"] == MONTH:
        new_state["anchor"] = state["anchor"].add(months=step)
    else:
        new_state["anchor"] = state["anchor"].add(days=7 * step)
    return new_state


def go_to_today(state: ViewState, today: Optional[pendulum.Date] = None) -> ViewState:
    if today is None:
        today = today_local()
    return go_to_date(state, today)


def go_to_date(state: ViewState, date: Any) -> ViewState:
    """Anchor the view on a date. Invalid input leaves the state unchanged."""
    anchor = to_local_date(date)
    new_state = state.copy()
    if anchor is not None:
        new_state["anchor"] = anchor
    return new_state


def select_date(state: ViewState, date: Any) -> ViewState:
    """Record a selected date. Invalid input clears the selection."""
    new_state = state.copy()
    new_state["selected"] = to_local_date(date)
    return new_state


def week_range(anchor: pendulum.Date) -> tuple[pendulum.Date, pendulum.Date]:
    """Sunday through Saturday of the week containing the anchor."""
    week_start = anchor.subtract(days=weekday_index(anchor))
    return week_start, week_start.add(days=6)


def visible_range(state: ViewState) -> tuple[pendulum.Date, pendulum.Date]:
    anchor = state["anchor"]
    if state["mode"] == WEEK:
        return week_range(anchor)
    return anchor.start_of("month"), anchor.end_of("month")
