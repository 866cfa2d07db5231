# SPDX-License-Identifier: MIT

from typing import Any, Optional

import pendulum

from taskcal.model.task import Task
from taskcal.time import is_in_range, is_same_day, to_local_date


def task_covers_date(task: Task, date: pendulum.Date) -> bool:
    """
    Check whether a task's [start_date, due_date] interval covers a date.

    With both dates the interval is closed and inclusive; an inverted interval
    (start after due) never matches. With a single date only that exact day
    matches. A task without dates never matches.
    """
    start_date = to_local_date(task.get("start_date"))
    due_date = to_local_date(task.get("due_date"))

    if start_date is not None and due_date is not None:
        return is_in_range(date, start_date, due_date)
    if start_date is not None:
        return is_same_day(date, start_date)
    if due_date is not None:
        return is_same_day(date, due_date)
    return False


def events_for_date(date: Any, tasks: Optional[list[Task]]) -> list[Task]:
    """
    Return the tasks whose date interval covers the given date.

    The result keeps the order of the task collection. A missing or invalid
    date, or a missing collection, gives an empty list.
    """
    target = to_local_date(date)
    if target is None or not tasks:
        return []
    return [task for task in tasks if task_covers_date(task, target)]

