"""Data models for friends and circles."""
from frencircle.models.friend import (
    CircleStats,
    CircleSummary,
    Friend,
    FriendDraft,
    FriendView,
)
from frencircle.models.notice import Notice

__all__ = [
    "CircleStats",
    "CircleSummary",
    "Friend",
    "FriendDraft",
    "FriendView",
    "Notice",
]
