import unittest

import pendulum

from taskcal.service.dashboard import dashboard_stats, is_overdue, recent_tasks
from taskcal.service.display import (
    NO_PROJECT_LABEL,
    get_priority_config,
    get_status_config,
    normalize_status,
    project_label,
)
from taskcal.template.task import get_task_template


def make_task(id, created, status="pending", project_id=None, due=None):
    task = get_task_template()
    task["id"] = id
    task["created"] = pendulum.parse(created)
    task["status"] = status
    task["project_id"] = project_id
    task["due_date"] = pendulum.parse(due).date() if due else None
    return task


class TestDashboardStats(unittest.TestCase):
    def test_counts_by_normalized_status(self):
        tasks = [
            make_task("a", "2024-03-01", "pending"),
            make_task("b", "2024-03-02", "doing"),
            make_task("c", "2024-03-03", "done"),
            make_task("d", "2024-03-04", "mystery"),
        ]
        stats = dashboard_stats(tasks, [{"id": "p"}])
        self.assertEqual(
            stats,
            {
                "total": 4,
                "pending": 2,
                "in_progress": 1,
                "completed": 1,
                "projects": 1,
            },
        )

    def test_empty_collections(self):
        self.assertEqual(dashboard_stats(None, None)["total"], 0)


class TestRecentTasks(unittest.TestCase):
    def setUp(self):
        self.tasks = [
            make_task("old", "2024-01-01", "completed", "p1"),
            make_task("new", "2024-03-01", "pending", "p1"),
            make_task("mid", "2024-02-01", "todo", "p2"),
        ]

    def test_newest_first(self):
        self.assertEqual(
            [task["id"] for task in recent_tasks(self.tasks)], ["new", "mid", "old"]
        )

    def test_status_filter_understands_aliases(self):
        self.assertEqual(
            [task["id"] for task in recent_tasks(self.tasks, status="todo")],
            ["new", "mid"],
        )

    def test_project_filter_and_limit(self):
        filtered = recent_tasks(self.tasks, project_id="p1", limit=1)
        self.assertEqual([task["id"] for task in filtered], ["new"])


class TestOverdue(unittest.TestCase):
    def test_overdue_only_when_past_and_open(self):
        today = pendulum.date(2024, 3, 15)
        self.assertTrue(is_overdue(make_task("a", "2024-03-01", due="2024-03-14"), today))
        self.assertFalse(
            is_overdue(make_task("a", "2024-03-01", "completed", due="2024-03-14"), today)
        )
        self.assertFalse(is_overdue(make_task("a", "2024-03-01", due="2024-03-15"), today))
        self.assertFalse(is_overdue(make_task("a", "2024-03-01"), today))


class TestDisplayConfig(unittest.TestCase):
    def test_unknown_values_fall_back(self):
        self.assertEqual(normalize_status(None), "pending")
        self.assertEqual(get_status_config("archived")["label"], "Pending")
        self.assertEqual(get_priority_config("urgent")["label"], "● Medium")

    def test_no_project_label(self):
        self.assertEqual(project_label(None)["label"], NO_PROJECT_LABEL)


if __name__ == "__main__":
    unittest.main(verbosity=2)
