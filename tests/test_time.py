import datetime
import unittest

import pendulum

from taskcal.time import (
    date_from_str,
    date_to_str,
    day_name,
    is_in_range,
    is_same_day,
    month_title,
    to_local_date,
    weekday_index,
)


class TestToLocalDate(unittest.TestCase):
    def test_date_string_is_parsed(self):
        self.assertEqual(to_local_date("2024-03-15"), pendulum.date(2024, 3, 15))

    def test_datetime_is_truncated_to_day(self):
        value = datetime.datetime(2024, 3, 15, 23, 59)
        self.assertEqual(to_local_date(value), pendulum.date(2024, 3, 15))

    def test_plain_date_is_kept(self):
        self.assertEqual(
            to_local_date(datetime.date(2024, 1, 31)), pendulum.date(2024, 1, 31)
        )

    def test_invalid_values_give_none(self):
        self.assertIsNone(to_local_date(None))
        self.assertIsNone(to_local_date("not a date"))
        self.assertIsNone(to_local_date("2024-13-45"))
        self.assertIsNone(to_local_date(12345))

    def test_string_with_offset_is_converted_to_local_time(self):
        expected = (
            pendulum.datetime(2024, 3, 11, 4, 30, tz="UTC").in_tz("local").date()
        )
        self.assertEqual(to_local_date("2024-03-10T23:30:00-05:00"), expected)

    def test_naive_string_keeps_its_day(self):
        self.assertEqual(
            to_local_date("2024-03-10T23:30:00"), pendulum.date(2024, 3, 10)
        )

    def test_time_only_string_gives_none(self):
        self.assertIsNone(to_local_date("23:30:00"))

    def test_date_from_str_rejects_garbage(self):
        with self.assertRaises(ValueError):
            date_from_str("yesterday-ish")

    def test_date_string_format(self):
        self.assertEqual(date_to_str(pendulum.date(2024, 3, 5)), "2024-03-05")


class TestWeekday(unittest.TestCase):
    def test_sunday_is_zero(self):
        self.assertEqual(weekday_index(pendulum.date(2024, 3, 10)), 0)
        self.assertEqual(day_name(pendulum.date(2024, 3, 10)), "Sun")

    def test_saturday_is_six(self):
        self.assertEqual(weekday_index(pendulum.date(2024, 3, 16)), 6)
        self.assertEqual(day_name(pendulum.date(2024, 3, 16)), "Sat")


class TestComparisons(unittest.TestCase):
    def test_same_day_ignores_time(self):
        self.assertTrue(
            is_same_day(datetime.datetime(2024, 3, 15, 8), pendulum.date(2024, 3, 15))
        )
        self.assertFalse(is_same_day("2024-03-15", "2024-03-16"))
        self.assertFalse(is_same_day(None, "2024-03-16"))

    def test_range_is_closed(self):
        self.assertTrue(is_in_range("2024-03-10", "2024-03-10", "2024-03-12"))
        self.assertTrue(is_in_range("2024-03-12", "2024-03-10", "2024-03-12"))
        self.assertFalse(is_in_range("2024-03-13", "2024-03-10", "2024-03-12"))
        self.assertFalse(is_in_range("2024-03-11", None, "2024-03-12"))

    def test_month_title(self):
        self.assertEqual(month_title(pendulum.date(2024, 3, 15)), "March 2024")


if __name__ == "__main__":
    unittest.main(verbosity=2)
