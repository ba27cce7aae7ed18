"""Filter and order the friend list for display."""
from datetime import date, datetime, timezone, tzinfo
from typing import Iterable, List, Optional
from zoneinfo import ZoneInfo

from frencircle.config import TIMEZONE
from frencircle.core.attention import needs_attention
from frencircle.models.friend import Friend, FriendView


def next_birthday(birthday: date, today: date) -> date:
    """Next occurrence of the birthday's month/day on or after today.

    Feb 29 falls on Feb 28 in non-leap years.
    """

    def in_year(year: int) -> date:
        try:
            return birthday.replace(year=year)
        except ValueError:
            return date(year, 2, 28)

    upcoming = in_year(today.year)
    if upcoming < today:
        upcoming = in_year(today.year + 1)
    return upcoming


def _matches(friend: Friend, view: FriendView, now: datetime) -> bool:
    if view.search and view.search.lower() not in friend.name.lower():
        return False

    if view.status_filter == "needs-attention":
        if not needs_attention(friend, now):
            return False
    elif view.status_filter != "all" and friend.status != view.status_filter:
        return False

    category = view.category
    if category is not None and friend.category != category:
        return False
    return True


def visible_friends(
    friends: Iterable[Friend],
    view: FriendView,
    now: Optional[datetime] = None,
    tz: Optional[tzinfo] = None,
) -> List[Friend]:
    """Friends matching the view, soonest birthday first.

    Friends without a birthday follow, in their original order. "Today" for
    birthdays is the calendar date in `tz` (FRENCIRCLE_TIMEZONE by default).
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    today = now.astimezone(tz or ZoneInfo(TIMEZONE)).date()
    shown = [f for f in friends if _matches(f, view, now)]
    # sorted() is stable, so friends without birthdays keep their relative order
    return sorted(
        shown,
        key=lambda f: (
            (0, next_birthday(f.birthday, today))
            if f.birthday is not None
            else (1, date.max)
        ),
    )
