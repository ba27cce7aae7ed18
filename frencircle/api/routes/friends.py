"""Friends CRUD, detail edits and interaction logging (stored in Supabase)."""
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, field_validator

from frencircle.api.state import AppState, get_state
from frencircle.config import MAX_FAVORITE_ARTISTS
from frencircle.core.attention import days_since, needs_attention
from frencircle.core.friend_view import visible_friends
from frencircle.core.supabase_client import StoreError
from frencircle.models.friend import Friend, FriendDraft, FriendView

router = APIRouter()

Category = Literal["bestfren", "workfren"]
Status = Literal["active", "busy", "away"]
Frequency = Literal["weekly", "biweekly", "monthly"]


def _clean_name(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("name must not be empty")
    return v


def _clean_artists(v: List[str]) -> List[str]:
    artists = [a.strip() for a in v if a and a.strip()]
    if len(artists) > MAX_FAVORITE_ARTISTS:
        raise ValueError(f"at most {MAX_FAVORITE_ARTISTS} favorite artists")
    return artists


class CreateFriendBody(BaseModel):
    name: str
    category: Category = "bestfren"
    contact_frequency: Frequency = "weekly"
    avatar: Optional[str] = None
    birthday: Optional[date] = None
    favorite_artists: List[str] = []

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        return _clean_name(v)

    @field_validator("favorite_artists")
    @classmethod
    def check_artists(cls, v: List[str]) -> List[str]:
        return _clean_artists(v)


class UpdateFriendBody(BaseModel):
    name: Optional[str] = None
    avatar: Optional[str] = None
    category: Optional[Category] = None
    status: Optional[Status] = None
    contact_frequency: Optional[Frequency] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v: Optional[str]) -> Optional[str]:
        return _clean_name(v)


class FriendDetailsBody(BaseModel):
    notes: str = ""
    favorite_artists: List[str] = []
    birthday: Optional[date] = None

    @field_validator("favorite_artists")
    @classmethod
    def check_artists(cls, v: List[str]) -> List[str]:
        return _clean_artists(v)


def friend_to_dict(f: Friend, now: Optional[datetime] = None) -> dict:
    return {
        "id": f.id,
        "name": f.name,
        "avatar": f.avatar,
        "category": f.category,
        "last_interaction": f.last_interaction.isoformat(),
        "status": f.status,
        "notes": f.notes,
        "contact_frequency": f.contact_frequency,
        "birthday": f.birthday.isoformat() if f.birthday else None,
        "favorite_artists": list(f.favorite_artists),
        "days_since": days_since(f, now),
        "needs_attention": needs_attention(f, now),
    }


def _existing(state: AppState, friend_id: str) -> Friend:
    friend = state.get_friend(friend_id)
    if friend is None:
        raise HTTPException(status_code=404, detail="Friend not found")
    return friend


def _save(state: AppState, friend: Friend) -> dict:
    try:
        state.update_friend(friend)
    except StoreError as e:
        raise HTTPException(status_code=502, detail=e.message)
    return friend_to_dict(friend)


@router.get("/")
def list_friends(
    search: str = "",
    status: str = "all",
    tab: str = "all",
    state: AppState = Depends(get_state),
):
    """Friends matching search/status/tab, soonest birthday first.

    A failed load returns an empty list with the error message alongside.
    """
    friends = state.get_friends()
    now = datetime.now(timezone.utc)
    view = FriendView(search=search, status_filter=status, tab=tab)
    return {
        "friends": [friend_to_dict(f, now) for f in visible_friends(friends, view, now)],
        "error": state.load_error,
    }


@router.get("/{friend_id}")
def get_friend(friend_id: str, state: AppState = Depends(get_state)):
    return friend_to_dict(_existing(state, friend_id))


@router.post("/", status_code=201)
def create_friend(body: CreateFriendBody, state: AppState = Depends(get_state)):
    """Add a friend: active, no notes, last interaction now."""
    draft = FriendDraft(
        name=body.name,
        avatar=body.avatar or f"/placeholder.svg?text={body.name[0]}",
        category=body.category,
        last_interaction=datetime.now(timezone.utc),
        contact_frequency=body.contact_frequency,
        birthday=body.birthday,
        favorite_artists=body.favorite_artists,
    )
    try:
        friend = state.add_friend(draft)
    except StoreError as e:
        raise HTTPException(status_code=502, detail=e.message)
    return friend_to_dict(friend)


@router.patch("/{friend_id}")
def update_friend(
    friend_id: str,
    body: UpdateFriendBody,
    state: AppState = Depends(get_state),
):
    """Change name, avatar, category, status or contact frequency."""
    existing = _existing(state, friend_id)
    changes = body.model_dump(exclude_none=True)
    return _save(state, replace(existing, **changes))


@router.put("/{friend_id}/details")
def save_details(
    friend_id: str,
    body: FriendDetailsBody,
    state: AppState = Depends(get_state),
):
    """Save notes, favorite artists and birthday; counts as an interaction."""
    existing = _existing(state, friend_id)
    updated = replace(
        existing,
        notes=body.notes,
        favorite_artists=body.favorite_artists,
        birthday=body.birthday,
        last_interaction=datetime.now(timezone.utc),
    )
    return _save(state, updated)


@router.post("/{friend_id}/interactions")
def log_interaction(friend_id: str, state: AppState = Depends(get_state)):
    """Record contact with the friend now."""
    existing = _existing(state, friend_id)
    return _save(state, replace(existing, last_interaction=datetime.now(timezone.utc)))


@router.delete("/{friend_id}", status_code=204)
def delete_friend(friend_id: str, state: AppState = Depends(get_state)):
    _existing(state, friend_id)
    try:
        state.delete_friend(friend_id)
    except StoreError as e:
        raise HTTPException(status_code=502, detail=e.message)
