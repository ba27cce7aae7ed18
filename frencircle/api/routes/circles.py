"""Circle dashboards and the favorite-artist leaderboard."""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query

from frencircle.api.state import AppState, get_state
from frencircle.config import ARTIST_LEADERBOARD_SIZE
from frencircle.core.circle_stats import artist_leaderboard, circle_summary, compute_stats
from frencircle.models.friend import CATEGORIES, CircleStats

router = APIRouter()
artists_router = APIRouter()


def _stats_to_dict(s: CircleStats) -> dict:
    return {
        "total": s.total,
        "active": s.active,
        "needs_attention": s.needs_attention,
    }


@router.get("/")
def list_circles(state: AppState = Depends(get_state)):
    """Both circles: counters and how full each one is."""
    friends = state.get_friends()
    now = datetime.now(timezone.utc)
    out = []
    for category in CATEGORIES:
        summary = circle_summary(friends, category, now=now)
        out.append(
            {
                "category": summary.category,
                **_stats_to_dict(summary.stats),
                "capacity": summary.capacity,
                "percentage": summary.percentage,
            }
        )
    return out


@router.get("/{category}")
def get_circle(category: str, state: AppState = Depends(get_state)):
    if category not in CATEGORIES:
        raise HTTPException(status_code=404, detail="Unknown circle")
    return _stats_to_dict(compute_stats(state.get_friends(), category))


@artists_router.get("/leaderboard")
def get_leaderboard(
    limit: int = Query(ARTIST_LEADERBOARD_SIZE, ge=1),
    state: AppState = Depends(get_state),
):
    """Artists most often listed as favorites, with how many friends list each."""
    return [
        {"artist": artist, "friends": count}
        for artist, count in artist_leaderboard(state.get_friends(), limit=limit)
    ]
