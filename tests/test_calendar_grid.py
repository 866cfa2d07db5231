import unittest

import pendulum

from taskcal.model.calendar import WEEK
from taskcal.service.calendar_grid import (
    build_cell,
    build_grid,
    build_month_grid,
    build_week_grid,
    grid_rows,
)
from taskcal.service.view_state import initial_view_state, select_date, switch_mode
from taskcal.template.task import get_task_template
from taskcal.time import weekday_index

TODAY = pendulum.date(2024, 3, 15)


def make_task(id, start=None, due=None):
    task = get_task_template()
    task["id"] = id
    task["title"] = f"task {id}"
    task["start_date"] = pendulum.parse(start).date() if start else None
    task["due_date"] = pendulum.parse(due).date() if due else None
    return task


class TestMonthGrid(unittest.TestCase):
    def test_march_2024_layout(self):
        grid = build_month_grid(initial_view_state(TODAY), [], today=TODAY)
        cells = grid["cells"]

        self.assertEqual(len(cells), 42)
        self.assertEqual(cells[0]["date"], pendulum.date(2024, 2, 25))
        self.assertFalse(cells[0]["in_current_period"])
        self.assertEqual(cells[5]["date"], pendulum.date(2024, 3, 1))
        self.assertTrue(cells[5]["in_current_period"])
        self.assertEqual(cells[41]["date"], pendulum.date(2024, 4, 6))
        self.assertEqual(grid["title"], "March 2024")

    def test_every_month_starts_on_sunday_and_is_contiguous(self):
        for month in range(1, 13):
            anchor = pendulum.date(2023, month, 17)
            cells = build_month_grid(initial_view_state(anchor), [], today=TODAY)[
                "cells"
            ]
            self.assertEqual(len(cells), 42)
            self.assertEqual(weekday_index(cells[0]["date"]), 0)
            for previous, current in zip(cells, cells[1:]):
                self.assertEqual(current["date"], previous["date"].add(days=1))

            in_month = [cell for cell in cells if cell["in_current_period"]]
            self.assertEqual(len(in_month), anchor.days_in_month)
            self.assertEqual(in_month[0]["date"].day, 1)

    def test_today_and_selected_flags(self):
        state = select_date(initial_view_state(TODAY), "2024-03-20")
        cells = build_month_grid(state, [], today=TODAY)["cells"]

        today_cells = [cell for cell in cells if cell["is_today"]]
        selected_cells = [cell for cell in cells if cell["is_selected"]]
        self.assertEqual([cell["date"] for cell in today_cells], [TODAY])
        self.assertEqual(
            [cell["date"] for cell in selected_cells], [pendulum.date(2024, 3, 20)]
        )

    def test_interval_task_lands_on_three_cells(self):
        tasks = [make_task("a", "2024-03-10", "2024-03-12")]
        cells = build_month_grid(initial_view_state(TODAY), tasks, today=TODAY)[
            "cells"
        ]
        covered = [cell["date"] for cell in cells if cell["events"]]
        self.assertEqual(
            covered,
            [
                pendulum.date(2024, 3, 10),
                pendulum.date(2024, 3, 11),
                pendulum.date(2024, 3, 12),
            ],
        )

    def test_out_of_month_cells_still_resolve_events(self):
        tasks = [make_task("a", due="2024-02-26")]
        cells = build_month_grid(initial_view_state(TODAY), tasks, today=TODAY)[
            "cells"
        ]
        self.assertEqual(len(cells[1]["events"]), 1)
        self.assertFalse(cells[1]["in_current_period"])


class TestWeekGrid(unittest.TestCase):
    def test_week_layout(self):
        state = switch_mode(initial_view_state(TODAY), WEEK)
        grid = build_week_grid(state, [], today=TODAY)
        dates = [cell["date"] for cell in grid["cells"]]

        self.assertEqual(len(dates), 7)
        self.assertEqual(dates[0], pendulum.date(2024, 3, 10))
        self.assertEqual(dates[6], pendulum.date(2024, 3, 16))
        self.assertTrue(all(cell["in_current_period"] for cell in grid["cells"]))
        self.assertEqual(grid["title"], "Mar 10 - Mar 16, 2024")

    def test_build_grid_dispatches_on_mode(self):
        state = switch_mode(initial_view_state(TODAY), WEEK)
        self.assertEqual(len(build_grid(state, [], today=TODAY)["cells"]), 7)
        self.assertEqual(
            len(build_grid(initial_view_state(TODAY), [], today=TODAY)["cells"]), 42
        )


class TestIndicatorCaps(unittest.TestCase):
    def cell_for(self, count, indicator_cap, overflow_cap):
        tasks = [make_task(str(index), due="2024-03-15") for index in range(count)]
        return build_cell(
            TODAY, tasks, True, TODAY, None, indicator_cap, overflow_cap
        )

    def test_under_the_cap_has_no_overflow(self):
        cell = self.cell_for(2, 3, 2)
        self.assertEqual(len(cell["indicators"]), 2)
        self.assertEqual(cell["overflow"], 0)

    def test_exactly_the_cap_has_no_overflow(self):
        cell = self.cell_for(3, 3, 2)
        self.assertEqual(len(cell["indicators"]), 3)
        self.assertEqual(cell["overflow"], 0)

    def test_overflow_is_capped(self):
        cell = self.cell_for(4, 3, 2)
        self.assertEqual(cell["overflow"], 1)

        cell = self.cell_for(10, 3, 2)
        self.assertEqual(len(cell["indicators"]), 3)
        self.assertEqual(cell["overflow"], 2)
        self.assertEqual(len(cell["events"]), 10)

    def test_indicators_keep_collection_order(self):
        cell = self.cell_for(5, 3, 2)
        self.assertEqual([task["id"] for task in cell["indicators"]], ["0", "1", "2"])

    def test_week_defaults(self):
        tasks = [make_task(str(index), due="2024-03-15") for index in range(12)]
        state = switch_mode(initial_view_state(TODAY), WEEK)
        cell = build_week_grid(state, tasks, today=TODAY)["cells"][5]
        self.assertEqual(len(cell["indicators"]), 5)
        self.assertEqual(cell["overflow"], 3)


class TestGridRows(unittest.TestCase):
    def test_month_splits_into_six_rows(self):
        rows = grid_rows(build_month_grid(initial_view_state(TODAY), [], today=TODAY))
        self.assertEqual(len(rows), 6)
        self.assertTrue(all(len(row) == 7 for row in rows))


if __name__ == "__main__":
    unittest.main(verbosity=2)
