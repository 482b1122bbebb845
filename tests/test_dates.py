import unittest
import datetime as dt
from pyamortize._dates import add_months, normalize_start_time, to_timestamp

UTC = dt.timezone.utc


class TestDates(unittest.TestCase):

    def test_add_months_clamps_day_overflow(self):
        start = dt.datetime(2018, 1, 31, tzinfo=UTC)
        self.assertEqual(add_months(start, 1), dt.datetime(2018, 2, 28, tzinfo=UTC))
        self.assertEqual(add_months(start, 2), dt.datetime(2018, 3, 31, tzinfo=UTC))
        self.assertEqual(add_months(dt.datetime(2020, 1, 31, tzinfo=UTC), 1), dt.datetime(2020, 2, 29, tzinfo=UTC))

    def test_add_months_crosses_year(self):
        start = dt.datetime(2018, 3, 20, 10, 5, tzinfo=UTC)
        self.assertEqual(add_months(start, 12), dt.datetime(2019, 3, 20, 10, 5, tzinfo=UTC))

    def test_normalize_start_time(self):
        self.assertEqual(normalize_start_time(dt.datetime(2018, 3, 20, 10, 5)),
                         dt.datetime(2018, 3, 20, 10, 5, tzinfo=UTC))
        self.assertEqual(normalize_start_time(dt.date(2018, 3, 20)), dt.datetime(2018, 3, 20, tzinfo=UTC))
        self.assertEqual(normalize_start_time(0), dt.datetime(1970, 1, 1, tzinfo=UTC))
        self.assertEqual(normalize_start_time('2018-03-20T10:05:00'),
                         dt.datetime(2018, 3, 20, 10, 5, tzinfo=UTC))

    def test_aware_start_time_keeps_its_zone(self):
        zone = dt.timezone(dt.timedelta(hours=8))
        start = dt.datetime(2018, 3, 20, 10, 5, tzinfo=zone)
        self.assertIs(normalize_start_time(start).tzinfo, zone)

    def test_normalize_start_time_rejects_other_types(self):
        with self.assertRaises(TypeError):
            normalize_start_time(None)

    def test_to_timestamp(self):
        self.assertEqual(to_timestamp(dt.datetime(1970, 1, 2, tzinfo=UTC)), 86400)


if __name__ == '__main__':
    unittest.main()
