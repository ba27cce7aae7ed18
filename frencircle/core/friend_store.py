"""Persist and load friends and their favorite artists (Supabase tables).

Parent and child writes are separate requests with no transaction: if the
artist insert fails after the friend row was written, the friend row stays.
"""
import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from frencircle.core.supabase_client import SupabaseClient
from frencircle.models.friend import Friend, FriendDraft

logger = logging.getLogger(__name__)

FRIENDS_TABLE = "friends"
ARTISTS_TABLE = "friend_favorite_artists"
FRIEND_COLUMNS = f"*,{ARTISTS_TABLE}(artist_name)"


def parse_timestamp(value: str) -> datetime:
    """ISO 8601 -> aware datetime (naive values are UTC)."""
    ts = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def parse_birthday(value: Optional[str]) -> Optional[date]:
    """Wire birthday (date or datetime string, or empty) -> date or None."""
    if not value:
        return None
    return date.fromisoformat(value[:10])


def row_to_friend(row: dict) -> Friend:
    """Map a friends row (snake_case, joined artists) to a Friend."""
    artists = row.get(ARTISTS_TABLE) or []
    return Friend(
        id=str(row["id"]),
        name=row["name"],
        avatar=row.get("avatar") or "",
        category=row["category"],
        last_interaction=parse_timestamp(row["last_interaction"]),
        status=row.get("status") or "active",
        notes=row.get("notes") or "",
        contact_frequency=row.get("contact_frequency") or "weekly",
        birthday=parse_birthday(row.get("birthday")),
        favorite_artists=[a["artist_name"] for a in artists],
    )


def friend_to_row(friend) -> dict:
    """Mutable columns of a Friend or FriendDraft, as the friends table names them."""
    return {
        "name": friend.name,
        "avatar": friend.avatar,
        "category": friend.category,
        "contact_frequency": friend.contact_frequency,
        "status": friend.status,
        "notes": friend.notes,
        "birthday": friend.birthday.isoformat() if friend.birthday else None,
        "last_interaction": friend.last_interaction.isoformat(),
    }


def _artist_rows(friend_id: str, artists: List[str]) -> List[dict]:
    return [{"friend_id": friend_id, "artist_name": a} for a in artists]


def load_friends(client: SupabaseClient, user_id: str) -> List[Friend]:
    """All friends owned by user_id, with their favorite artists."""
    rows = client.select(
        FRIENDS_TABLE,
        FRIEND_COLUMNS,
        filters={
            "user_id": f"eq.{user_id}",
            "order": "created_at.asc",
            f"{ARTISTS_TABLE}.order": "created_at.asc",
        },
    )
    return [row_to_friend(r) for r in rows]


def create_friend(client: SupabaseClient, user_id: str, draft: FriendDraft) -> Friend:
    """Insert the friend row, then one artist row per favorite artist."""
    row = {**friend_to_row(draft), "user_id": user_id}
    inserted = client.insert(FRIENDS_TABLE, row, returning=True)
    friend_id = str(inserted[0]["id"])
    logger.info("Friend added: %s '%s'", friend_id, draft.name)

    if draft.favorite_artists:
        client.insert(ARTISTS_TABLE, _artist_rows(friend_id, draft.favorite_artists))

    return Friend(
        id=friend_id,
        name=draft.name,
        avatar=draft.avatar,
        category=draft.category,
        last_interaction=draft.last_interaction,
        status=draft.status,
        notes=draft.notes,
        contact_frequency=draft.contact_frequency,
        birthday=draft.birthday,
        favorite_artists=list(draft.favorite_artists),
    )


def update_friend(client: SupabaseClient, friend: Friend) -> Friend:
    """Overwrite the friend row, then replace its artist rows wholesale."""
    client.update(FRIENDS_TABLE, friend_to_row(friend), filters={"id": f"eq.{friend.id}"})
    client.delete(ARTISTS_TABLE, filters={"friend_id": f"eq.{friend.id}"})
    if friend.favorite_artists:
        client.insert(ARTISTS_TABLE, _artist_rows(friend.id, friend.favorite_artists))
    logger.info("Friend updated: %s", friend.id)
    return friend


def delete_friend(client: SupabaseClient, friend_id: str) -> None:
    """Delete the friend row; artist rows go with it via the foreign key cascade."""
    client.delete(FRIENDS_TABLE, filters={"id": f"eq.{friend_id}"})
    logger.info("Friend deleted: %s", friend_id)
