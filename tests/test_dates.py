import unittest
from datetime import date, datetime, timedelta, timezone

from bizhub.core.dates import as_utc


class AsUtcTest(unittest.TestCase):
    def test_naive_is_tagged_utc(self):
        value = as_utc(datetime(2026, 1, 2, 3, 4, 5))
        self.assertEqual(value, datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc))

    def test_aware_is_converted(self):
        offset = timezone(timedelta(hours=5, minutes=30))
        value = as_utc(datetime(2026, 1, 2, 9, 0, tzinfo=offset))
        self.assertEqual(value.hour, 3)
        self.assertEqual(value.minute, 30)
        self.assertEqual(value.tzinfo, timezone.utc)

    def test_date_and_none(self):
        self.assertEqual(as_utc(date(2026, 4, 1)), datetime(2026, 4, 1, tzinfo=timezone.utc))
        self.assertIsNone(as_utc(None))


if __name__ == "__main__":
    unittest.main()
