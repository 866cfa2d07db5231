import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from taskcal import configuration
from taskcal import state as app_state
from taskcal.repository.comment import COMMENT_REPO
from taskcal.repository.configuration import CONFIGURATION_REPO
from taskcal.repository.id_map import ID_MAP_REPO
from taskcal.repository.project import PROJECT_REPO
from taskcal.repository.session import SESSION_REPO
from taskcal.repository.task import TASK_REPO
from taskcal.service.sync import logout, start_demo_session
from taskcal.terminal.app import app

REPOSITORIES = (
    TASK_REPO,
    PROJECT_REPO,
    COMMENT_REPO,
    SESSION_REPO,
    ID_MAP_REPO,
    CONFIGURATION_REPO,
)


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        tmp_path = Path(self.tmp.name)

        original_data_path = configuration.DATA_PATH
        self.addCleanup(configuration.set_data_path, original_data_path)
        configuration.set_data_path(tmp_path / "data")

        for name, value in (
            ("CONFIG_PATH", tmp_path / "config"),
            ("APP_CONFIG_PATH", tmp_path / "config" / "config.yaml"),
        ):
            patcher = mock.patch.object(configuration, name, value)
            patcher.start()
            self.addCleanup(patcher.stop)

        for repository in REPOSITORIES:
            repository.__init__()
            self.addCleanup(repository.__init__)

        start_demo_session()
        self.runner = CliRunner()

    def invoke(self, *args):
        return self.runner.invoke(
            app, ["--no-header", *args], env={"COLUMNS": "200"}
        )

    def test_project_and_task_flow(self):
        result = self.invoke("project", "add", "Website", "--color", "green")
        self.assertEqual(result.exit_code, 0, result.output)

        result = self.invoke(
            "task",
            "add",
            "Write copy",
            "--project",
            "Website",
            "--start",
            "2024-03-10",
            "--due",
            "2024-03-12",
            "--status",
            "doing",
        )
        self.assertEqual(result.exit_code, 0, result.output)

        tasks = TASK_REPO.get_all_tasks()
        self.assertEqual(len(tasks), 1)
        self.assertEqual(tasks[0]["status"], "in_progress")
        self.assertEqual(
            tasks[0]["project_id"], PROJECT_REPO.find_project_by_name("Website")["id"]
        )

    def test_inverted_interval_is_a_usage_error(self):
        result = self.invoke(
            "task", "add", "Backwards", "--start", "2024-03-12", "--due", "2024-03-10"
        )
        self.assertEqual(result.exit_code, 2)
        self.assertEqual(TASK_REPO.get_all_tasks(), [])

    def test_bad_status_is_a_usage_error(self):
        result = self.invoke("task", "add", "Task", "--status", "archived")
        self.assertEqual(result.exit_code, 2)

    def test_short_ids_from_listing(self):
        self.invoke("task", "add", "First")
        self.invoke("task", "list")

        result = self.invoke("task", "complete", "1")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(TASK_REPO.get_all_tasks()[0]["status"], "completed")

    def test_calendar_month(self):
        self.invoke("task", "add", "Launch", "--due", "2024-03-12")
        result = self.invoke("calendar", "month", "--date", "2024-03-15")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("March 2024", result.output)

    def test_calendar_day_lists_tasks(self):
        self.invoke("task", "add", "Launch", "--start", "2024-03-10", "--due", "2024-03-12")
        result = self.invoke("calendar", "day", "--date", "2024-03-11")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Launch", result.output)

        result = self.invoke("calendar", "day", "--date", "2024-03-13")
        self.assertIn("No tasks on this day", result.output)

    def test_dashboard(self):
        self.invoke("task", "add", "Launch")
        result = self.invoke("dashboard")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Launch", result.output)

    def test_aliases(self):
        result = self.invoke("t", "a", "Aliased")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(TASK_REPO.get_all_tasks()[0]["title"], "Aliased")

    def test_lists_only_show_the_current_workspace(self):
        self.invoke("project", "add", "Old project")
        self.invoke("task", "add", "Old task", "--project", "Old project")

        logout()
        start_demo_session()
        self.invoke("task", "add", "New task")

        for args in (("task", "list"), ("project", "list"), ("dashboard",)):
            with self.subTest(command=args):
                result = self.invoke(*args)
                self.assertEqual(result.exit_code, 0, result.output)
                self.assertNotIn("Old task", result.output)
                self.assertNotIn("Old project", result.output)
        self.assertIn("New task", self.invoke("task", "list").output)

    def test_no_clear_ids_overrides_the_config(self):
        self.addCleanup(app_state.set_clear_ids, app_state.get_clear_ids())
        app_state.set_clear_ids(True)

        result = self.invoke("--no-clear-ids", "task", "list")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertFalse(app_state.get_clear_ids())

        result = self.invoke("--clear-ids", "task", "list")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertTrue(app_state.get_clear_ids())

    def test_browse_reprompts_on_empty_input(self):
        result = self.runner.invoke(
            app,
            ["--no-header", "calendar", "browse", "--date", "2024-03-15"],
            input="\nn\nq\n",
            env={"COLUMNS": "200"},
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("March 2024", result.output)
        self.assertIn("April 2024", result.output)


if __name__ == "__main__":
    unittest.main(verbosity=2)
