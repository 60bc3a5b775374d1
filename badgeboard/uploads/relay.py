"""Client for the ImgBB image hosting API."""

from __future__ import annotations

import base64
import logging
import os
from dataclasses import dataclass
from typing import Any

import requests

from badgeboard.errors import UploadError

logger = logging.getLogger(__name__)

IMGBB_UPLOAD_URL = "https://api.imgbb.com/1/upload"
DEFAULT_TIMEOUT = 30


@dataclass(frozen=True)
class UploadResult:
    """Public locations of an uploaded image."""

    url: str
    display_url: str


class UploadRelay:
    """Forwards image bytes to ImgBB and returns where they were published.

    Uploaded images are public as soon as this returns and are never
    removed, even if the caller later fails to use the URL.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str = IMGBB_UPLOAD_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the relay."""
        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()

    def upload(self, data: bytes, filename: str | None = None) -> UploadResult:
        """Upload ``data`` and return its public URLs.

        Raises:
            UploadError: If the image is empty, the request fails, or the
                host does not report success.
        """
        if not data:
            raise UploadError("No image data to upload.")
        if not self.api_key:
            raise UploadError("Image upload is not configured.")

        form: dict[str, str] = {
            "key": self.api_key,
            "image": base64.b64encode(data).decode("ascii"),
        }
        if filename:
            name = os.path.splitext(os.path.basename(filename))[0]
            if name:
                form["name"] = name

        try:
            response = self.session.post(
                self.endpoint, data=form, timeout=self.timeout
            )
            response.raise_for_status()
            body: Any = response.json()
        except requests.RequestException as e:
            logger.error(f"Image upload request failed: {e}")
            raise UploadError("Failed to upload image.") from e
        except ValueError as e:
            logger.error(f"Image host returned a non-JSON response: {e}")
            raise UploadError("Failed to upload image.") from e

        if not isinstance(body, dict) or not body.get("success"):
            logger.error(f"Image host reported a failed upload: {body}")
            raise UploadError("Image host rejected the upload.")

        info = body.get("data") or {}
        url = info.get("url")
        if not url:
            logger.error(f"Image host response has no URL: {body}")
            raise UploadError("Image host returned no URL.")

        return UploadResult(url=url, display_url=info.get("display_url") or url)
