# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from taskcal.model.calendar import (
    MONTH_GRID_SIZE,
    WEEK,
    WEEK_GRID_SIZE,
    CalendarCell,
    CalendarGrid,
    ViewState,
)
from taskcal.model.task import Task
from taskcal.service.event_resolver import events_for_date
from taskcal.service.view_state import week_range
from taskcal.time import date_to_short_str, month_title, today_local, weekday_index

DEFAULT_MONTH_INDICATOR_CAP = 3
DEFAULT_MONTH_OVERFLOW_CAP = 2
DEFAULT_WEEK_INDICATOR_CAP = 5
DEFAULT_WEEK_OVERFLOW_CAP = 3


def build_cell(
    date: pendulum.Date,
    tasks: Optional[list[Task]],
    in_current_period: bool,
    today: pendulum.Date,
    selected: Optional[pendulum.Date],
    indicator_cap: int,
    overflow_cap: int,
) -> CalendarCell:
    """
    Build a single cell.

    Up to indicator_cap matched tasks get an indicator each. Past that cap the
    remainder is shown as overflow indicators, itself capped at overflow_cap,
    so the overflow count is not the exact number of hidden tasks.
    """
    events = events_for_date(date, tasks)
    overflow = 0
    if len(events) > indicator_cap:
        overflow = min(len(events) - indicator_cap, overflow_cap)
    return {
        "date": date,
        "in_current_period": in_current_period,
        "is_today": date == today,
        "is_selected": selected is not None and date == selected,
        "events": events,
        "indicators": events[:indicator_cap],
        "overflow": overflow,
    }


def build_month_grid(
    state: ViewState,
    tasks: Optional[list[Task]],
    today: Optional[pendulum.Date] = None,
    indicator_cap: int = DEFAULT_MONTH_INDICATOR_CAP,
    overflow_cap: int = DEFAULT_MONTH_OVERFLOW_CAP,
) -> CalendarGrid:
    """
    Build the fixed 6 x 7 month grid for the anchor's month.

    The grid always has 42 cells: the tail of the previous month (as many days
    as the Sunday-based weekday index of the 1st), every day of the month,
    then the head of the next month to fill the rest.
    """
    if today is None:
        today = today_local()

    month_start = state["anchor"].start_of("month")
    month_end = month_start.end_of("month")
    grid_start = month_start.subtract(days=weekday_index(month_start))

    cells: list[CalendarCell] = []
    for offset in range(MONTH_GRID_SIZE):
        current_date = grid_start.add(days=offset)
        in_month = (
            current_date.year == month_start.year
            and current_date.month == month_start.month
        )
        cells.append(
            build_cell(
                current_date,
                tasks,
                in_month,
                today,
                state["selected"],
                indicator_cap,
                overflow_cap,
            )
        )

    return {
        "mode": state["mode"],
        "anchor": state["anchor"],
        "period_start": month_start,
        "period_end": month_end,
        "title": month_title(month_start),
        "cells": cells,
    }


def build_week_grid(
    state: ViewState,
    tasks: Optional[list[Task]],
    today: Optional[pendulum.Date] = None,
    indicator_cap: int = DEFAULT_WEEK_INDICATOR_CAP,
    overflow_cap: int = DEFAULT_WEEK_OVERFLOW_CAP,
) -> CalendarGrid:
    """Build the 7-cell Sunday to Saturday grid around the anchor."""
    if today is None:
        today = today_local()

    week_start, week_end = week_range(state["anchor"])

    cells = [
        build_cell(
            week_start.add(days=offset),
            tasks,
            True,
            today,
            state["selected"],
            indicator_cap,
            overflow_cap,
        )
        for offset in range(WEEK_GRID_SIZE)
    ]

    title = f"{date_to_short_str(week_start)} - {date_to_short_str(week_end)}, {week_end.year}"

    return {
        "mode": state["mode"],
        "anchor": state["anchor"],
        "period_start": week_start,
        "period_end": week_end,
        "title": title,
        "cells": cells,
    }


def build_grid(
    state: ViewState,
    tasks: Optional[list[Task]],
    today: Optional[pendulum.Date] = None,
    month_indicator_cap: int = DEFAULT_MONTH_INDICATOR_CAP,
    month_overflow_cap: int = DEFAULT_MONTH_OVERFLOW_CAP,
    week_indicator_cap: int = DEFAULT_WEEK_INDICATOR_CAP,
    week_overflow_cap: int = DEFAULT_WEEK_OVERFLOW_CAP,
) -> CalendarGrid:
    if state["mode"] == WEEK:
        return build_week_grid(
            state, tasks, today, week_indicator_cap, week_overflow_cap
        )
    return build_month_grid(
        state, tasks, today, month_indicator_cap, month_overflow_cap
    )


def grid_rows(grid: CalendarGrid) -> list[list[CalendarCell]]:
    """Split the grid cells into rows of seven."""
    cells = grid["cells"]
    return [cells[index : index + 7] for index in range(0, len(cells), 7)]
