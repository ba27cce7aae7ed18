"""Shared test fixtures.

Provides an in-memory stand-in for the Supabase REST endpoint so the store,
state and routes can be exercised without a network.
"""

import json
import uuid
from datetime import datetime, timedelta, timezone

import pytest
import requests

from frencircle.api.state import AppState
from frencircle.core.supabase_client import SupabaseClient
from frencircle.models.friend import Friend

NOW = datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)
USER_ID = "user-1"


def _response(status: int, body=None) -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r.reason = "OK" if status < 400 else "Bad Request"
    r._content = b"" if body is None else json.dumps(body).encode()
    return r


def _eq(params: dict, key: str):
    value = (params or {}).get(key)
    if value is None:
        return None
    assert value.startswith("eq."), value
    return value[3:]


class FakeSupabaseSession(requests.Session):
    """Answers PostgREST requests for the friends / friend_favorite_artists tables.

    `fail` maps (method, table) to an error message returned as a 400;
    `unreachable` makes every request raise ConnectionError.
    """

    def __init__(self) -> None:
        super().__init__()
        self.friends: list[dict] = []
        self.artists: list[dict] = []
        self.fail: dict[tuple[str, str], str] = {}
        self.unreachable = False
        self.calls: list[tuple[str, str]] = []

    def request(self, method, url, params=None, json=None, headers=None, timeout=None, **kwargs):
        table = url.rsplit("/", 1)[-1]
        self.calls.append((method, table))
        if self.unreachable:
            raise requests.ConnectionError("connection refused")
        if (method, table) in self.fail:
            return _response(400, {"message": self.fail[(method, table)]})
        handler = getattr(self, f"_{method.lower()}_{table}")
        return handler(params or {}, json, headers or {})

    # friends

    def _get_friends(self, params, body, headers):
        owner = _eq(params, "user_id")
        rows = []
        for f in self.friends:
            if owner is not None and f["user_id"] != owner:
                continue
            joined = [
                {"artist_name": a["artist_name"]}
                for a in self.artists
                if a["friend_id"] == f["id"]
            ]
            rows.append({**f, "friend_favorite_artists": joined})
        return _response(200, rows)

    def _post_friends(self, params, body, headers):
        stamp = datetime.now(timezone.utc).isoformat()
        row = {
            "id": str(uuid.uuid4()),
            "avatar": None,
            "notes": None,
            "birthday": None,
            "status": "active",
            "contact_frequency": "weekly",
            "last_interaction": stamp,
            "created_at": stamp,
            "updated_at": stamp,
            **body,
        }
        self.friends.append(row)
        if headers.get("Prefer") == "return=representation":
            return _response(201, [row])
        return _response(201)

    def _patch_friends(self, params, body, headers):
        friend_id = _eq(params, "id")
        for f in self.friends:
            if f["id"] == friend_id:
                f.update(body)
        return _response(204)

    def _delete_friends(self, params, body, headers):
        friend_id = _eq(params, "id")
        self.friends = [f for f in self.friends if f["id"] != friend_id]
        # ON DELETE CASCADE
        self.artists = [a for a in self.artists if a["friend_id"] != friend_id]
        return _response(204)

    # friend_favorite_artists

    def _post_friend_favorite_artists(self, params, body, headers):
        rows = body if isinstance(body, list) else [body]
        for r in rows:
            self.artists.append({"id": str(uuid.uuid4()), **r})
        return _response(201)

    def _delete_friend_favorite_artists(self, params, body, headers):
        friend_id = _eq(params, "friend_id")
        self.artists = [a for a in self.artists if a["friend_id"] != friend_id]
        return _response(204)


@pytest.fixture
def fake_session():
    return FakeSupabaseSession()


@pytest.fixture
def store_client(fake_session):
    return SupabaseClient(
        base_url="https://example.supabase.co",
        api_key="anon-key",
        access_token="user-jwt",
        timeout=5,
        session=fake_session,
    )


@pytest.fixture
def app_state(store_client):
    return AppState(client=store_client, user_id=USER_ID)


def make_friend(
    name: str = "Alex",
    *,
    id: str | None = None,
    category: str = "bestfren",
    status: str = "active",
    contact_frequency: str = "weekly",
    days_ago: float = 0,
    birthday=None,
    favorite_artists=None,
    now: datetime = NOW,
) -> Friend:
    """Friend whose last interaction was `days_ago` days before `now`."""
    return Friend(
        id=id or f"{category}-{name}",
        name=name,
        avatar=f"/placeholder.svg?text={name[0]}",
        category=category,
        last_interaction=now - timedelta(days=days_ago),
        status=status,
        contact_frequency=contact_frequency,
        birthday=birthday,
        favorite_artists=list(favorite_artists or []),
    )
