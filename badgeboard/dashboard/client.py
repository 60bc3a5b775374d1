"""HTTP client for the badge REST API."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import requests

from badgeboard.badges.models import BadgeCollection
from badgeboard.uploads.relay import UploadResult


class ApiError(Exception):
    """Raised when an API call fails; ``message`` is safe to show."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize the error."""
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BadgeApiClient:
    """Calls the dashboard's REST API over HTTP."""

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float = 10,
    ) -> None:
        """Initialize the client for the API at ``base_url``."""
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, path: str, fallback: str, **kwargs: Any
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            ApiError: If the request fails or the server returns an error.
        """
        try:
            response = self.session.request(
                method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            raise ApiError(f"{fallback}: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.ok:
            message = fallback
            if isinstance(body, dict) and body.get("error"):
                message = str(body["error"])
            raise ApiError(message, response.status_code)
        return body

    def get_badges(self) -> BadgeCollection:
        """Fetch the full badge collection."""
        body = self._request("GET", "/api/badges", "Failed to load badges")
        if not isinstance(body, dict):
            raise ApiError("Failed to load badges")
        return body

    def add_badge(self, user_id: str, tooltip: str, badge_url: str) -> None:
        """Append a badge to a user's list."""
        self._request(
            "POST",
            "/api/badges",
            "Failed to add badge",
            json={"userId": user_id, "tooltip": tooltip, "badge": badge_url},
        )

    def delete_badge(self, user_id: str, index: int) -> None:
        """Delete the badge at ``index`` for ``user_id``."""
        self._request(
            "DELETE",
            f"/api/badges/{quote(user_id, safe='')}/{index}",
            "Failed to delete badge",
        )

    def upload_image(self, data: bytes, filename: str) -> UploadResult:
        """Upload an image and return where it was published."""
        body = self._request(
            "POST",
            "/api/upload",
            "Failed to upload image",
            files={"image": (filename, data)},
        )
        if not isinstance(body, dict) or not body.get("url"):
            raise ApiError("Failed to upload image")
        url = body["url"]
        return UploadResult(url=url, display_url=body.get("display_url") or url)
