import unittest

import pendulum

from taskcal.model.calendar import MONTH, WEEK
from taskcal.service.calendar_controller import CalendarController
from taskcal.service.calendar_presenter import (
    ACTION_COMPLETE,
    ACTION_DELETE,
    ACTION_EDIT,
)
from taskcal.template.task import get_task_template

TODAY = pendulum.date(2024, 3, 15)


def make_task(id, due=None, status="pending"):
    task = get_task_template()
    task["id"] = id
    task["title"] = f"task {id}"
    task["due_date"] = pendulum.parse(due).date() if due else None
    task["status"] = status
    return task


class FakeDataSource:
    def __init__(self, tasks):
        self.tasks = tasks

    def get_tasks(self):
        return self.tasks

    def get_projects(self):
        return []


class RecordingActions:
    def __init__(self):
        self.calls = []

    def open_task_detail(self, task_id):
        self.calls.append(("detail", task_id))

    def open_edit_task(self, task_id):
        self.calls.append(("edit", task_id))

    def open_new_task_with_date(self, date):
        self.calls.append(("new", date))

    def delete_task(self, task_id):
        self.calls.append(("delete", task_id))

    def complete_task(self, task_id):
        self.calls.append(("complete", task_id))


class TestCalendarController(unittest.TestCase):
    def setUp(self):
        self.data_source = FakeDataSource(
            [
                make_task("a", due="2024-03-15"),
                make_task("b", due="2024-03-15", status="completed"),
            ]
        )
        self.actions = RecordingActions()
        self.controller = CalendarController(
            self.data_source, self.actions, today=TODAY
        )

    def test_starts_on_month_of_today(self):
        self.assertEqual(self.controller.state["mode"], MONTH)
        self.assertEqual(self.controller.grid()["title"], "March 2024")

    def test_navigation_round_trip(self):
        self.controller.next()
        self.assertEqual(self.controller.grid()["title"], "April 2024")
        self.controller.previous()
        self.controller.previous()
        self.assertEqual(self.controller.grid()["title"], "February 2024")
        self.controller.go_to_today()
        self.assertEqual(self.controller.state["anchor"], TODAY)

    def test_week_mode_grid(self):
        self.controller.switch_mode(WEEK)
        self.assertEqual(len(self.controller.grid()["cells"]), 7)

    def test_grid_reads_fresh_data(self):
        self.data_source.tasks = []
        cells = self.controller.grid()["cells"]
        self.assertTrue(all(not cell["events"] for cell in cells))

    def test_popup_uses_selected_date(self):
        self.assertIsNone(self.controller.popup())
        self.controller.select_date("2024-03-15")
        popup = self.controller.popup()
        self.assertEqual([row["task_id"] for row in popup["rows"]], ["a", "b"])

    def test_new_task_defaults_to_selected_then_anchor(self):
        self.controller.new_task_on()
        self.controller.select_date("2024-03-20")
        self.controller.new_task_on()
        self.controller.new_task_on("2024-04-01")
        self.assertEqual(
            self.actions.calls,
            [
                ("new", TODAY),
                ("new", pendulum.date(2024, 3, 20)),
                ("new", pendulum.date(2024, 4, 1)),
            ],
        )

    def test_open_task_delegates(self):
        self.controller.open_task("a")
        self.assertEqual(self.actions.calls, [("detail", "a")])

    def test_perform_forwards_allowed_actions(self):
        self.controller.perform(ACTION_EDIT, "a")
        self.controller.perform(ACTION_COMPLETE, "a")
        self.controller.perform(ACTION_DELETE, "b")
        self.assertEqual(
            self.actions.calls, [("edit", "a"), ("complete", "a"), ("delete", "b")]
        )

    def test_perform_ignores_unavailable_actions(self):
        self.controller.perform(ACTION_COMPLETE, "b")
        self.controller.perform(ACTION_EDIT, "missing")
        self.assertEqual(self.actions.calls, [])


if __name__ == "__main__":
    unittest.main(verbosity=2)
