"""Shared application state (injected into routes): cached friends and notices."""
import logging
from collections import deque
from datetime import datetime, timezone
from typing import List, Optional

from frencircle.config import FRENCIRCLE_USER_ID, NOTICE_HISTORY
from frencircle.core import friend_store
from frencircle.core.supabase_client import StoreError, SupabaseClient
from frencircle.models.friend import Friend, FriendDraft
from frencircle.models.notice import Notice

logger = logging.getLogger(__name__)


class AppState:
    def __init__(
        self,
        client: Optional[SupabaseClient] = None,
        user_id: str = FRENCIRCLE_USER_ID,
    ) -> None:
        self._client = client
        self.user_id = user_id
        self._friends: Optional[List[Friend]] = None
        # Message from the last failed load, cleared by the next successful one
        self.load_error: Optional[str] = None
        self._notices: deque = deque(maxlen=NOTICE_HISTORY)

    @property
    def client(self) -> SupabaseClient:
        if self._client is None:
            self._client = SupabaseClient()
        return self._client

    # Notices

    def _notify(self, title: str, description: str, variant: str = "default") -> None:
        self._notices.append(
            Notice(
                title=title,
                description=description,
                variant=variant,
                created_at=datetime.now(timezone.utc).isoformat(),
            )
        )

    def notices(self) -> List[Notice]:
        """Most recent last."""
        return list(self._notices)

    # Collection

    def invalidate(self) -> None:
        """Drop the cached collection; the next read re-fetches."""
        self._friends = None

    def get_friends(self) -> List[Friend]:
        """Cached collection, loading it on first read. A failed load yields []."""
        if self._friends is None:
            try:
                self._friends = friend_store.load_friends(self.client, self.user_id)
            except StoreError as e:
                logger.warning("Loading friends failed: %s", e.message)
                self.load_error = e.message
                self._notify("Error loading friends", e.message, "destructive")
                return []
            self.load_error = None
        return self._friends

    def get_friend(self, friend_id: str) -> Optional[Friend]:
        for f in self.get_friends():
            if f.id == friend_id:
                return f
        return None

    # Mutations: notify, invalidate on success, re-raise StoreError on failure

    def add_friend(self, draft: FriendDraft) -> Friend:
        try:
            friend = friend_store.create_friend(self.client, self.user_id, draft)
        except StoreError as e:
            logger.warning("Adding friend failed: %s", e.message)
            self._notify("Error adding friend", e.message, "destructive")
            raise
        self.invalidate()
        self._notify("Success", "Friend added successfully")
        return friend

    def update_friend(self, friend: Friend) -> Friend:
        try:
            friend_store.update_friend(self.client, friend)
        except StoreError as e:
            logger.warning("Updating friend %s failed: %s", friend.id, e.message)
            self._notify("Error updating friend", e.message, "destructive")
            raise
        self.invalidate()
        self._notify("Success", "Friend updated successfully")
        return friend

    def delete_friend(self, friend_id: str) -> None:
        try:
            friend_store.delete_friend(self.client, friend_id)
        except StoreError as e:
            logger.warning("Deleting friend %s failed: %s", friend_id, e.message)
            self._notify("Error deleting friend", e.message, "destructive")
            raise
        self.invalidate()
        self._notify("Success", "Friend deleted successfully")


_state = AppState()


def get_state() -> AppState:
    return _state
