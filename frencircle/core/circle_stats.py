"""Circle counters and the favorite-artist leaderboard."""
import math
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from frencircle.config import ARTIST_LEADERBOARD_SIZE, MAX_FRIENDS_PER_CATEGORY
from frencircle.core.attention import needs_attention
from frencircle.models.friend import CircleStats, CircleSummary, Friend


def compute_stats(
    friends: Iterable[Friend],
    category: str,
    now: Optional[datetime] = None,
) -> CircleStats:
    """Total, active and needs-attention counts for one category.

    Status and staleness are counted independently: an active friend can be stale.
    """
    in_circle = [f for f in friends if f.category == category]
    return CircleStats(
        total=len(in_circle),
        active=sum(1 for f in in_circle if f.status == "active"),
        needs_attention=sum(1 for f in in_circle if needs_attention(f, now)),
    )


def circle_summary(
    friends: Iterable[Friend],
    category: str,
    capacity: int = MAX_FRIENDS_PER_CATEGORY,
    now: Optional[datetime] = None,
) -> CircleSummary:
    """Stats plus how full the circle is (percent of capacity, halves round up)."""
    stats = compute_stats(friends, category, now)
    percentage = math.floor(stats.total / capacity * 100 + 0.5) if capacity > 0 else 0
    return CircleSummary(
        category=category,
        stats=stats,
        capacity=capacity,
        percentage=percentage,
    )


def artist_leaderboard(
    friends: Iterable[Friend],
    limit: int = ARTIST_LEADERBOARD_SIZE,
) -> List[Tuple[str, int]]:
    """Top artists by number of friends listing them. Ties keep first-seen order."""
    counts: dict[str, int] = {}
    for friend in friends:
        for artist in friend.favorite_artists:
            counts[artist] = counts.get(artist, 0) + 1
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return ranked[:limit]
