import unittest

import pendulum

from taskcal.service.calendar_presenter import (
    ACTION_COMPLETE,
    ACTION_DELETE,
    ACTION_EDIT,
    date_line,
    date_popup,
    task_detail,
)
from taskcal.template.project import get_project_template
from taskcal.template.task import get_task_template
from taskcal.time import today_local


def make_task(id, start=None, due=None, **fields):
    task = get_task_template()
    task["id"] = id
    task["title"] = f"task {id}"
    task["start_date"] = pendulum.parse(start).date() if start else None
    task["due_date"] = pendulum.parse(due).date() if due else None
    task.update(fields)
    return task


def make_project(id, name, color):
    project = get_project_template()
    project["id"] = id
    project["name"] = name
    project["color"] = color
    return project


class TestDatePopup(unittest.TestCase):
    def setUp(self):
        self.projects = [make_project("p1", "Website", "green")]
        self.tasks = [
            make_task("a", "2024-03-10", "2024-03-12", project_id="p1"),
            make_task("b", due="2024-03-11", status="done", priority="urgent"),
        ]

    def test_rows_for_a_covered_day(self):
        popup = date_popup("2024-03-11", self.tasks, self.projects)
        self.assertFalse(popup["empty"])
        self.assertEqual(popup["date"], pendulum.date(2024, 3, 11))
        self.assertEqual([row["task_id"] for row in popup["rows"]], ["a", "b"])

        first, second = popup["rows"]
        self.assertEqual(first["project_name"], "Website")
        self.assertEqual(first["project_color"], "green")
        self.assertEqual(first["date_line"], "2024-03-10 → 2024-03-12")
        self.assertEqual(first["status_label"], "Pending")

        self.assertIsNone(second["project_name"])
        self.assertEqual(second["status"], "completed")
        self.assertEqual(second["priority_label"], "● Medium")
        self.assertEqual(second["date_line"], "due 2024-03-11")

    def test_empty_day(self):
        popup = date_popup("2024-03-20", self.tasks, self.projects)
        self.assertTrue(popup["empty"])
        self.assertEqual(popup["rows"], [])

    def test_invalid_date_shows_today_empty(self):
        popup = date_popup("garbage", self.tasks, self.projects)
        self.assertTrue(popup["empty"])
        self.assertEqual(popup["date"], today_local())

    def test_date_line_variants(self):
        self.assertEqual(date_line(make_task("x", start="2024-03-10")), "starts 2024-03-10")
        self.assertIsNone(date_line(make_task("x")))


class TestTaskDetail(unittest.TestCase):
    def test_open_task_offers_complete(self):
        detail = task_detail("a", [make_task("a", due="2024-03-11")])
        self.assertEqual(detail["actions"], [ACTION_EDIT, ACTION_DELETE, ACTION_COMPLETE])
        self.assertEqual(detail["due_date"], pendulum.date(2024, 3, 11))

    def test_completed_task_has_no_complete_action(self):
        detail = task_detail("a", [make_task("a", status="completed")])
        self.assertNotIn(ACTION_COMPLETE, detail["actions"])

    def test_unknown_task_gives_none(self):
        self.assertIsNone(task_detail("missing", [make_task("a")]))
        self.assertIsNone(task_detail("missing", None))


if __name__ == "__main__":
    unittest.main(verbosity=2)
