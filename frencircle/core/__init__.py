"""Core logic: staleness, circle stats, list view, friend store."""
from frencircle.core.attention import needs_attention
from frencircle.core.circle_stats import artist_leaderboard, compute_stats
from frencircle.core.friend_view import visible_friends
from frencircle.core.supabase_client import StoreError, SupabaseClient

__all__ = [
    "StoreError",
    "SupabaseClient",
    "artist_leaderboard",
    "compute_stats",
    "needs_attention",
    "visible_friends",
]
