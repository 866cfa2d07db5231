# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional, Protocol

import pendulum

from taskcal.model.calendar import CalendarGrid, DatePopup, TaskDetail, ViewState
from taskcal.model.entity_id import EntityId
from taskcal.model.project import Project
from taskcal.model.task import Task
from taskcal.service import view_state
from taskcal.service.calendar_grid import (
    DEFAULT_MONTH_INDICATOR_CAP,
    DEFAULT_MONTH_OVERFLOW_CAP,
    DEFAULT_WEEK_INDICATOR_CAP,
    DEFAULT_WEEK_OVERFLOW_CAP,
    build_grid,
)
from taskcal.service.calendar_presenter import (
    ACTION_COMPLETE,
    ACTION_DELETE,
    ACTION_EDIT,
    date_popup,
    task_detail,
)
from taskcal.time import to_local_date

logger = logging.getLogger(__name__)


class CalendarDataSource(Protocol):
    def get_tasks(self) -> list[Task]: ...

    def get_projects(self) -> list[Project]: ...


class TaskActions(Protocol):
    def open_task_detail(self, task_id: EntityId) -> None: ...

    def open_edit_task(self, task_id: EntityId) -> None: ...

    def open_new_task_with_date(self, date: pendulum.Date) -> None: ...

    def delete_task(self, task_id: EntityId) -> None: ...

    def complete_task(self, task_id: EntityId) -> None: ...


class CalendarController:
    """
    Owns the current view state of a calendar session.

    Navigation replaces the state wholesale through the pure transitions in
    taskcal.service.view_state; grids and popups are recomputed from the data
    source on every call. Task mutations are handed to the TaskActions
    collaborator.
    """

    def __init__(
        self,
        data_source: CalendarDataSource,
        actions: TaskActions,
        today: Optional[pendulum.Date] = None,
        month_indicator_cap: int = DEFAULT_MONTH_INDICATOR_CAP,
        month_overflow_cap: int = DEFAULT_MONTH_OVERFLOW_CAP,
        week_indicator_cap: int = DEFAULT_WEEK_INDICATOR_CAP,
        week_overflow_cap: int = DEFAULT_WEEK_OVERFLOW_CAP,
    ) -> None:
        self.data_source = data_source
        self.actions = actions
        self.today = today
        self.state: ViewState = view_state.initial_view_state(today)
        self.month_indicator_cap = month_indicator_cap
        self.month_overflow_cap = month_overflow_cap
        self.week_indicator_cap = week_indicator_cap
        self.week_overflow_cap = week_overflow_cap

    def __tasks(self) -> list[Task]:
        return self.data_source.get_tasks() or []

    def __projects(self) -> list[Project]:
        return self.data_source.get_projects() or []

    # ---------- navigation ----------
    def switch_mode(self, mode: str) -> ViewState:
        self.state = view_state.switch_mode(self.state, mode)
        return self.state

    def next(self) -> ViewState:
        self.state = view_state.advance(self.state, 1)
        return self.state

    def previous(self) -> ViewState:
        self.state = view_state.advance(self.state, -1)
        return self.state

    def go_to_today(self) -> ViewState:
        self.state = view_state.go_to_today(self.state, self.today)
        return self.state

    def go_to_date(self, date: Any) -> ViewState:
        self.state = view_state.go_to_date(self.state, date)
        return self.state

    def select_date(self, date: Any) -> ViewState:
        self.state = view_state.select_date(self.state, date)
        return self.state

    # ---------- rendering models ----------
    def grid(self) -> CalendarGrid:
        return build_grid(
            self.state,
            self.__tasks(),
            self.today,
            self.month_indicator_cap,
            self.month_overflow_cap,
            self.week_indicator_cap,
            self.week_overflow_cap,
        )

    def popup(self, date: Any = None) -> Optional[DatePopup]:
        """Event list for a date, defaulting to the selected date."""
        if date is None:
            date = self.state["selected"]
        if date is None:
            return None
        return date_popup(date, self.__tasks(), self.__projects())

    def detail(self, task_id: EntityId) -> Optional[TaskDetail]:
        return task_detail(task_id, self.__tasks(), self.__projects())

    # ---------- delegated affordances ----------
    def open_task(self, task_id: EntityId) -> None:
        self.actions.open_task_detail(task_id)

    def new_task_on(self, date: Any = None) -> None:
        target = to_local_date(date) if date is not None else self.state["selected"]
        if target is None:
            target = self.state["anchor"]
        self.actions.open_new_task_with_date(target)

    def perform(self, action: str, task_id: EntityId) -> None:
        """Forward a detail-panel action to the task collaborator."""
        detail = self.detail(task_id)
        if detail is None or action not in detail["actions"]:
            logger.debug("ignoring %s for task %s", action, task_id)
            return
        if action == ACTION_EDIT:
            self.actions.open_edit_task(task_id)
        elif action == ACTION_DELETE:
            self.actions.delete_task(task_id)
        elif action == ACTION_COMPLETE:
            self.actions.complete_task(task_id)
