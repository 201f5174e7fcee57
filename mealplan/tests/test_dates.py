import unittest
from datetime import date, datetime, timezone

from mealplan.domain.errors import InvalidDateError, ValidationError
from mealplan.utilities.dates import parse_week_start, week_range


class TestParseWeekStart(unittest.TestCase):

    def test_plain_date(self):
        self.assertEqual(parse_week_start("2024-01-01"), date(2024, 1, 1))

    def test_naive_datetime_keeps_its_day(self):
        self.assertEqual(parse_week_start("2024-01-01T23:30:00"), date(2024, 1, 1))

    def test_utc_datetime_uses_local_day(self):
        expected = datetime(2024, 1, 1, 12, tzinfo=timezone.utc).astimezone().date()
        self.assertEqual(parse_week_start("2024-01-01T12:00:00.000Z"), expected)

    def test_invalid_dates(self):
        for raw in ("not-a-date", "2024-13-01", "2024-02-30", "01/02/2024"):
            with self.assertRaises(InvalidDateError, msg=raw):
                parse_week_start(raw)

    def test_missing_value_is_a_validation_error(self):
        for raw in (None, "", "   "):
            with self.assertRaises(ValidationError) as ctx:
                parse_week_start(raw)
            self.assertNotIsInstance(ctx.exception, InvalidDateError)
            self.assertEqual(ctx.exception.message, "weekStart query parameter is required")

    def test_week_range_is_seven_days(self):
        self.assertEqual(week_range(date(2024, 2, 26)), (date(2024, 2, 26), date(2024, 3, 4)))


if __name__ == '__main__':
    unittest.main()
