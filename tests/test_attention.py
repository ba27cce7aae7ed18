"""Tests for frencircle.core.attention — staleness thresholds."""

from datetime import datetime, timedelta, timezone

import pytest

from conftest import NOW, make_friend
from frencircle.core.attention import days_since, needs_attention


class TestDaysSince:
    def test_same_moment(self):
        assert days_since(make_friend(days_ago=0), NOW) == 0

    def test_floors_partial_days(self):
        friend = make_friend(days_ago=7.9)
        assert days_since(friend, NOW) == 7

    def test_naive_last_interaction_treated_as_utc(self):
        friend = make_friend()
        friend.last_interaction = datetime(2026, 6, 5, 12, 0)
        assert days_since(friend, NOW) == 10

    def test_other_timezone(self):
        friend = make_friend()
        # 2026-06-05 14:00 +02:00 == 12:00 UTC
        friend.last_interaction = datetime(
            2026, 6, 5, 14, 0, tzinfo=timezone(timedelta(hours=2))
        )
        assert days_since(friend, NOW) == 10


class TestNeedsAttention:
    @pytest.mark.parametrize(
        "frequency,threshold",
        [("weekly", 7), ("biweekly", 14), ("monthly", 30)],
    )
    def test_boundary(self, frequency, threshold):
        at = make_friend(contact_frequency=frequency, days_ago=threshold)
        past = make_friend(contact_frequency=frequency, days_ago=threshold + 1)
        assert needs_attention(at, NOW) is False
        assert needs_attention(past, NOW) is True

    def test_just_under_a_day_past_threshold_is_not_stale(self):
        friend = make_friend(contact_frequency="weekly", days_ago=7.99)
        assert needs_attention(friend, NOW) is False

    def test_unknown_frequency_never_stale(self):
        friend = make_friend(contact_frequency="yearly", days_ago=400)
        assert needs_attention(friend, NOW) is False

    def test_independent_of_status(self):
        friend = make_friend(status="away", days_ago=1)
        assert needs_attention(friend, NOW) is False

    def test_defaults_to_current_time(self):
        friend = make_friend(days_ago=8, now=datetime.now(timezone.utc))
        assert needs_attention(friend) is True
