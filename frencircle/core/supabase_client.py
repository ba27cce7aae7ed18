"""Supabase REST (PostgREST) client via requests; one best-effort attempt per call."""
import logging
from typing import Any, Optional

import requests

from frencircle.config import (
    STORE_TIMEOUT_SEC,
    SUPABASE_ACCESS_TOKEN,
    SUPABASE_ANON_KEY,
    SUPABASE_URL,
)

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the remote store rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: requests.Response) -> str:
    """PostgREST puts the reason in a JSON body's "message"; fall back to the status line."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"{response.status_code} {response.reason or ''}".strip()


class SupabaseClient:
    """Table-level select/insert/update/delete against <base_url>/rest/v1."""

    def __init__(
        self,
        base_url: str = SUPABASE_URL,
        api_key: str = SUPABASE_ANON_KEY,
        access_token: str = SUPABASE_ACCESS_TOKEN,
        timeout: float = STORE_TIMEOUT_SEC,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "apikey": api_key,
                "Authorization": f"Bearer {access_token or api_key}",
                "Content-Type": "application/json",
            }
        )

    def _url(self, table: str) -> str:
        return f"{self.base_url}/rest/v1/{table}"

    def _request(
        self,
        method: str,
        table: str,
        *,
        params: Optional[dict] = None,
        json: Any = None,
        prefer: Optional[str] = None,
    ) -> Any:
        headers = {"Prefer": prefer} if prefer else None
        logger.debug("%s %s %s", method, table, params or "")
        try:
            response = self._session.request(
                method,
                self._url(table),
                params=params,
                json=json,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise StoreError(f"Request to {table} failed: {e}") from e
        if not response.ok:
            raise StoreError(_error_message(response), status_code=response.status_code)
        if not response.content:
            return None
        return response.json()

    def select(self, table: str, columns: str = "*", filters: Optional[dict] = None) -> list:
        """Rows matching PostgREST filters, e.g. {"user_id": "eq.<id>"}."""
        params = {"select": columns, **(filters or {})}
        return self._request("GET", table, params=params) or []

    def insert(self, table: str, rows: Any, returning: bool = False) -> list:
        """Insert one row (dict) or many (list). Returns inserted rows when returning=True."""
        prefer = "return=representation" if returning else "return=minimal"
        return self._request("POST", table, json=rows, prefer=prefer) or []

    def update(self, table: str, values: dict, filters: dict) -> None:
        self._request("PATCH", table, params=filters, json=values, prefer="return=minimal")

    def delete(self, table: str, filters: dict) -> None:
        self._request("DELETE", table, params=filters, prefer="return=minimal")

    def __repr__(self) -> str:
        return f"<SupabaseClient base_url={self.base_url}>"
