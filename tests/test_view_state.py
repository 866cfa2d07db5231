import unittest

import pendulum

from taskcal.model.calendar import MONTH, WEEK
from taskcal.service.view_state import (
    advance,
    go_to_date,
    go_to_today,
    initial_view_state,
    select_date,
    switch_mode,
    visible_range,
    week_range,
)
from taskcal.time import weekday_index

TODAY = pendulum.date(2024, 3, 15)


class TestViewStateTransitions(unittest.TestCase):
    def test_initial_state(self):
        state = initial_view_state(TODAY)
        self.assertEqual(state, {"mode": MONTH, "anchor": TODAY, "selected": None})

    def test_transitions_do_not_mutate_input(self):
        state = initial_view_state(TODAY)
        advance(state, 1)
        switch_mode(state, WEEK)
        select_date(state, "2024-03-20")
        self.assertEqual(state, {"mode": MONTH, "anchor": TODAY, "selected": None})

    def test_month_advance_clamps_day_of_month(self):
        state = initial_view_state(pendulum.date(2024, 1, 31))
        self.assertEqual(advance(state, 1)["anchor"], pendulum.date(2024, 2, 29))

        state = initial_view_state(pendulum.date(2024, 3, 31))
        self.assertEqual(advance(state, -1)["anchor"], pendulum.date(2024, 2, 29))

    def test_month_advance_crosses_year(self):
        state = initial_view_state(pendulum.date(2024, 12, 15))
        self.assertEqual(advance(state, 1)["anchor"], pendulum.date(2025, 1, 15))

    def test_week_advance_moves_seven_days(self):
        state = switch_mode(initial_view_state(TODAY), WEEK)
        self.assertEqual(advance(state, 1)["anchor"], pendulum.date(2024, 3, 22))
        self.assertEqual(advance(state, -1)["anchor"], pendulum.date(2024, 3, 8))

    def test_advance_rejects_other_steps(self):
        with self.assertRaises(ValueError):
            advance(initial_view_state(TODAY), 2)

    def test_switch_mode_keeps_anchor(self):
        state = select_date(initial_view_state(TODAY), "2024-03-20")
        switched = switch_mode(state, WEEK)
        self.assertEqual(switched["mode"], WEEK)
        self.assertEqual(switched["anchor"], TODAY)
        self.assertEqual(switched["selected"], pendulum.date(2024, 3, 20))

    def test_switch_mode_rejects_unknown_mode(self):
        with self.assertRaises(ValueError):
            switch_mode(initial_view_state(TODAY), "year")

    def test_go_to_today_keeps_mode(self):
        state = switch_mode(initial_view_state(pendulum.date(2023, 1, 1)), WEEK)
        moved = go_to_today(state, TODAY)
        self.assertEqual(moved["anchor"], TODAY)
        self.assertEqual(moved["mode"], WEEK)

    def test_go_to_date_ignores_invalid_input(self):
        state = initial_view_state(TODAY)
        self.assertEqual(go_to_date(state, "nope")["anchor"], TODAY)
        self.assertEqual(
            go_to_date(state, "2025-07-04")["anchor"], pendulum.date(2025, 7, 4)
        )

    def test_invalid_selection_clears_selected(self):
        state = select_date(initial_view_state(TODAY), "2024-03-20")
        self.assertIsNone(select_date(state, "garbage")["selected"])


class TestRanges(unittest.TestCase):
    def test_week_range_is_sunday_to_saturday(self):
        start, end = week_range(TODAY)
        self.assertEqual(start, pendulum.date(2024, 3, 10))
        self.assertEqual(end, pendulum.date(2024, 3, 16))

    def test_week_range_of_a_sunday_starts_that_day(self):
        start, _ = week_range(pendulum.date(2024, 3, 10))
        self.assertEqual(start, pendulum.date(2024, 3, 10))

    def test_month_visible_range(self):
        start, end = visible_range(initial_view_state(pendulum.date(2024, 2, 10)))
        self.assertEqual(start, pendulum.date(2024, 2, 1))
        self.assertEqual(end, pendulum.date(2024, 2, 29))


class TestEveryDayOfAMonth(unittest.TestCase):
    DAYS = [pendulum.date(2024, 3, day) for day in range(1, 32)]

    def test_month_back_and_forth_returns_to_the_same_month(self):
        for day in self.DAYS:
            with self.subTest(day=day):
                state = initial_view_state(day)
                anchor = advance(advance(state, -1), 1)["anchor"]
                self.assertEqual((anchor.year, anchor.month), (2024, 3))

    def test_clamped_day_does_not_come_back(self):
        state = initial_view_state(pendulum.date(2024, 3, 31))
        back = advance(state, -1)
        self.assertEqual(back["anchor"], pendulum.date(2024, 2, 29))
        self.assertEqual(advance(back, 1)["anchor"], pendulum.date(2024, 3, 29))

    def test_week_back_and_forth_returns_to_the_anchor(self):
        for day in self.DAYS:
            with self.subTest(day=day):
                state = switch_mode(initial_view_state(day), WEEK)
                self.assertEqual(advance(advance(state, -1), 1)["anchor"], day)
                self.assertEqual(advance(advance(state, 1), -1)["anchor"], day)

    def test_week_range_always_starts_on_sunday(self):
        for day in self.DAYS:
            with self.subTest(day=day):
                start, end = week_range(day)
                self.assertEqual(weekday_index(start), 0)
                self.assertEqual(end, start.add(days=6))
                self.assertTrue(start <= day <= end)


if __name__ == "__main__":
    unittest.main(verbosity=2)
