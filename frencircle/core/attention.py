"""Staleness: has a friend gone longer without contact than their frequency allows."""
from datetime import datetime, timezone
from typing import Optional

from frencircle.models.friend import Friend

SECONDS_PER_DAY = 86400

# Days allowed since last interaction before a friend needs attention
FREQUENCY_THRESHOLD_DAYS = {
    "weekly": 7,
    "biweekly": 14,
    "monthly": 30,
}


def _aware(ts: datetime) -> datetime:
    """Treat naive timestamps as UTC."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def days_since(friend: Friend, now: Optional[datetime] = None) -> int:
    """Whole days elapsed since the friend's last interaction (floored)."""
    if now is None:
        now = datetime.now(timezone.utc)
    elapsed = _aware(now) - _aware(friend.last_interaction)
    return int(elapsed.total_seconds() // SECONDS_PER_DAY)


def needs_attention(friend: Friend, now: Optional[datetime] = None) -> bool:
    """True if days since last interaction exceed the friend's contact frequency.

    Unknown frequencies are never stale. Recompute on every read; `now` moves.
    """
    threshold = FREQUENCY_THRESHOLD_DAYS.get(friend.contact_frequency)
    if threshold is None:
        return False
    return days_since(friend, now) > threshold
