# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from taskcal.model.entity_id import EntityId
from taskcal.model.task import Task

CalendarMode = Literal["month", "week"]

MONTH: CalendarMode = "month"
WEEK: CalendarMode = "week"

MONTH_GRID_SIZE = 42
WEEK_GRID_SIZE = 7


class ViewState(TypedDict):
    mode: CalendarMode
    anchor: pendulum.Date
    selected: Optional[pendulum.Date]


class CalendarCell(TypedDict):
    date: pendulum.Date
    in_current_period: bool
    is_today: bool
    is_selected: bool
    events: list[Task]
    indicators: list[Task]
    overflow: int


class CalendarGrid(TypedDict):
    mode: CalendarMode
    anchor: pendulum.Date
    period_start: pendulum.Date
    period_end: pendulum.Date
    title: str
    cells: list[CalendarCell]


class PopupRow(TypedDict):
    task_id: Optional[EntityId]
    title: str
    project_name: Optional[str]
    project_color: Optional[str]
    status: str
    status_label: str
    priority_label: str
    description: Optional[str]
    date_line: Optional[str]


class DatePopup(TypedDict):
    date: pendulum.Date
    empty: bool
    rows: list[PopupRow]


class TaskDetail(TypedDict):
    task_id: Optional[EntityId]
    title: str
    project_name: Optional[str]
    project_color: Optional[str]
    status: str
    status_label: str
    priority: str
    priority_label: str
    start_date: Optional[pendulum.Date]
    due_date: Optional[pendulum.Date]
    description: Optional[str]
    actions: list[str]
