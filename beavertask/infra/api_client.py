from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)

API_ENDPOINT = "/api/tasks"


class RequestFailed(Exception):
    """Raised for any non-2xx response or transport-level failure."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TaskApiClient:
    """Thin wrapper over the task collection resource.

    One HTTP request per call, no retries and no explicit timeout.
    """

    def __init__(self, base_url: str, *, session: Optional[requests.Session] = None) -> None:
        self.base_url = base_url.rstrip("/")
        self._session = session or requests.Session()

    @property
    def collection_url(self) -> str:
        return f"{self.base_url}{API_ENDPOINT}"

    def item_url(self, task_id: str) -> str:
        return f"{self.collection_url}/{quote(str(task_id), safe='')}"

    def list(self) -> Any:
        return self._request("GET", self.collection_url)

    def create(self, fields: dict[str, Any]) -> Any:
        return self._request("POST", self.collection_url, json_body=fields)

    def update(self, task_id: str, fields: dict[str, Any]) -> Any:
        return self._request("PUT", self.item_url(task_id), json_body=fields)

    def delete(self, task_id: str) -> Any:
        return self._request("DELETE", self.item_url(task_id))

    def _request(
        self,
        method: str,
        url: str,
        *,
        json_body: Optional[dict[str, Any]] = None,
    ) -> Any:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        try:
            response = self._session.request(method, url, headers=headers, json=json_body)
        except requests.RequestException as exc:
            logger.error("Request failed: %s %s: %s", method, url, exc)
            raise RequestFailed(f"{method} {url} failed: {exc}") from exc

        if not 200 <= response.status_code < 300:
            logger.error("Request failed: %s %s returned %s", method, url, response.status_code)
            raise RequestFailed(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        if not response.text:
            return None
        return response.json()
