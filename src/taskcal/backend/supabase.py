# SPDX-License-Identifier: MIT

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from taskcal.exceptions import AuthenticationError, BackendError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class SupabaseClient:
    """Thin REST client for the hosted backend (auth + PostgREST tables)."""

    def __init__(
        self,
        base_url: str,
        anon_key: str,
        access_token: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.anon_key = anon_key
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"apikey": anon_key})
        self.token: Optional[str] = None
        self.user_id: Optional[str] = None
        self.email: Optional[str] = None
        if access_token:
            self.set_token(access_token)

    def set_token(self, token: str) -> None:
        self.token = token
        self.session.headers.update({"Authorization": f"Bearer {token}"})

    # ---------- auth ----------
    def login(self, email: str, password: str) -> Dict[str, Any]:
        url = f"{self.base_url}/auth/v1/token"
        try:
            r = self.session.post(
                url,
                params={"grant_type": "password"},
                json={"email": email, "password": password},
                timeout=DEFAULT_TIMEOUT,
            )
        except requests.RequestException as e:
            logger.warning("login request to %s failed: %s", url, e)
            raise BackendError(f"Login request failed: {e}") from e
        if not r.ok:
            raise AuthenticationError(f"Login failed: {r.status_code} {r.text}")
        data = r.json()
        token = data.get("access_token")
        user = data.get("user") or {}
        if not token or not user.get("id"):
            raise AuthenticationError("Missing token or user id in login response")
        self.set_token(token)
        self.user_id = user["id"]
        self.email = user.get("email", email)
        logger.info("signed in as %s", self.email)
        return data

    # ---------- tables ----------
    def _select(self, table: str, params: Dict[str, str]) -> List[Dict[str, Any]]:
        if not self.token:
            raise AuthenticationError("Not signed in")
        url = f"{self.base_url}/rest/v1/{table}"
        query = {"select": "*"}
        query.update(params)
        try:
            r = self.session.get(url, params=query, timeout=DEFAULT_TIMEOUT)
        except requests.RequestException as e:
            logger.warning("request to %s failed: %s", url, e)
            raise BackendError(f"Fetching {table} failed: {e}") from e
        if not r.ok:
            raise BackendError(f"Fetching {table} failed: {r.status_code} {r.text}")
        rows = r.json()
        logger.debug("fetched %d rows from %s", len(rows), table)
        return rows

    def list_workspaces(self, owner_id: Optional[str] = None) -> List[Dict[str, Any]]:
        owner = owner_id or self.user_id
        params = {"order": "created_at.asc"}
        if owner:
            params["owner_id"] = f"eq.{owner}"
        return self._select("workspaces", params)

    def list_projects(self, workspace_id: str) -> List[Dict[str, Any]]:
        return self._select(
            "projects",
            {"workspace_id": f"eq.{workspace_id}", "order": "created_at.asc"},
        )

    def list_tasks(self, workspace_id: str) -> List[Dict[str, Any]]:
        return self._select(
            "tasks",
            {"workspace_id": f"eq.{workspace_id}", "order": "created_at.asc"},
        )

    def list_comments(self, task_ids: List[str]) -> List[Dict[str, Any]]:
        if not task_ids:
            return []
        return self._select(
            "comments",
            {"task_id": f"in.({','.join(task_ids)})", "order": "created_at.asc"},
        )
