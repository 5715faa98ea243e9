import unittest
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from daily_events.models import DateStamp
from daily_events.services.normalization import clean_event, is_upcoming, normalize_events


class TestCleanEvent(unittest.TestCase):

    def setUp(self):
        self.raw_event = {
            "link": "https://example.com/e/1",
            "imageLink": "https://example.com/i/1.png",
            "date": "\n\t\tSat, 2024-06-15\n",
            "title": "the QUICK-brown fox",
            "category": "\t\n",
            "fetch_date": "15-06-2024",
        }

    def test_cleans_fields(self):
        event = clean_event(self.raw_event)

        self.assertEqual(event["date"], "Sat, 2024-06-15")
        self.assertEqual(event["category"], "Other")
        self.assertEqual(event["title"], "The Quick-brown Fox")
        self.assertEqual(event["link"], self.raw_event["link"])
        self.assertEqual(event["imageLink"], self.raw_event["imageLink"])

    def test_is_idempotent(self):
        once = clean_event(self.raw_event)
        self.assertEqual(clean_event(once), once)

    def test_does_not_mutate_input(self):
        clean_event(self.raw_event)
        self.assertEqual(self.raw_event["category"], "\t\n")

    def test_keeps_category_text(self):
        event = clean_event(dict(self.raw_event, category="\tMusic\n"))
        self.assertEqual(event["category"], "Music")


class TestIsUpcoming(unittest.TestCase):

    def setUp(self):
        self.stamp = DateStamp(formatted="15-06-2024", day=15, month=6, year=2024)

    def test_future_year(self):
        self.assertTrue(is_upcoming("2025-01-01", self.stamp))

    def test_later_month(self):
        self.assertTrue(is_upcoming("2024-07-01", self.stamp))

    def test_today(self):
        self.assertTrue(is_upcoming("2024-06-15", self.stamp))

    def test_later_day(self):
        self.assertTrue(is_upcoming("2024-06-30", self.stamp))

    def test_yesterday(self):
        self.assertFalse(is_upcoming("2024-06-14", self.stamp))

    def test_earlier_month(self):
        self.assertFalse(is_upcoming("2024-05-20", self.stamp))

    def test_past_year_with_later_month_is_kept(self):
        # Month branch only bounds the year from above.
        self.assertTrue(is_upcoming("2023-07-01", self.stamp))

    def test_past_year_same_month_is_dropped(self):
        self.assertFalse(is_upcoming("2023-06-20", self.stamp))

    def test_only_last_three_fields_count(self):
        self.assertTrue(is_upcoming("Sat, 01-2024-06-15", self.stamp))

    def test_unparseable_dates_are_dropped(self):
        self.assertFalse(is_upcoming("", self.stamp))
        self.assertFalse(is_upcoming("June 15th", self.stamp))
        self.assertFalse(is_upcoming("2024-06", self.stamp))
        self.assertFalse(is_upcoming("2024-June-15", self.stamp))


class TestNormalizeEvents(unittest.TestCase):

    def test_filters_and_cleans(self):
        stamp = DateStamp(formatted="15-06-2024", day=15, month=6, year=2024)
        events = [
            {"title": "old news", "date": "2024-06-14", "category": "Talk"},
            {"title": "TODAY", "date": "\t2024-06-15\n", "category": ""},
            {"title": "next year", "date": "2025-01-01", "category": "Music"},
        ]

        result = normalize_events(events, stamp)

        self.assertEqual([e["title"] for e in result], ["Today", "Next Year"])
        self.assertEqual(result[0]["category"], "Other")
        self.assertEqual(result[0]["date"], "2024-06-15")


if __name__ == '__main__':
    unittest.main()
