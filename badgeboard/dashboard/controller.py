"""Command handlers driving a dashboard session."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Protocol

from badgeboard.badges.models import BadgeCollection
from badgeboard.uploads.relay import UploadResult

from .client import ApiError
from .state import DashboardSession, PendingDelete, Toast, ToastKind

logger = logging.getLogger(__name__)

PREVIEW_MODAL = "preview"
DELETE_MODAL = "delete"


class BadgeApi(Protocol):
    def get_badges(self) -> BadgeCollection: ...

    def add_badge(self, user_id: str, tooltip: str, badge_url: str) -> None: ...

    def delete_badge(self, user_id: str, index: int) -> None: ...

    def upload_image(self, data: bytes, filename: str) -> UploadResult: ...


class DashboardController:
    """Applies user commands to a :class:`DashboardSession`.

    Every handler mutates ``self.session`` and returns nothing; callers
    re-render from the session afterwards.
    """

    def __init__(
        self,
        api: BadgeApi,
        session: Optional[DashboardSession] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the controller with an API and an optional session."""
        self.api = api
        self.session = session or DashboardSession()
        self.clock = clock

    # Notifications

    def notify(self, message: str, kind: ToastKind = "success") -> None:
        """Show ``message``, replacing any toast still on screen."""
        self.session.toast = Toast(message, kind, self.clock())

    def current_toast(self) -> Optional[Toast]:
        """Return the toast on screen, clearing it once it has expired."""
        toast = self.session.toast
        if toast is not None and toast.expired(self.clock()):
            self.session.toast = None
        return self.session.toast

    # Loading

    def refresh(self) -> None:
        """Re-fetch the full collection from the server."""
        try:
            self.session.badges = self.api.get_badges()
        except ApiError as e:
            logger.error(f"Error loading badges: {e.message}")
            self.notify("Failed to load badges", "error")

    # Add form

    def select_url(self, value: str) -> None:
        """Record the URL input; a non-empty URL disables the file input."""
        self.session.input_mode = "url" if value.strip() else None

    def select_file(self, filename: Optional[str]) -> None:
        """Record the file input; a chosen file disables the URL input."""
        self.session.input_mode = "file" if filename else None

    def add_badge(
        self,
        user_id: str,
        tooltip: str,
        badge_url: str = "",
        image: Optional[bytes] = None,
        filename: Optional[str] = None,
    ) -> bool:
        """Validate the add form, upload the image if any, then add the badge.

        Returns whether the badge was added.
        """
        user_id = user_id.strip()
        tooltip = tooltip.strip()
        badge_url = badge_url.strip()

        if not user_id or not tooltip:
            self.notify("Please fill in all required fields", "error")
            return False
        if not badge_url and not image:
            self.notify("Please provide either a badge URL or upload an image", "error")
            return False

        self.session.busy = True
        try:
            if image:
                badge_url = self.api.upload_image(image, filename or "badge.png").url
            self.api.add_badge(user_id, tooltip, badge_url)
        except ApiError as e:
            self.notify(e.message or "Failed to add badge", "error")
            return False
        finally:
            self.session.busy = False

        self.notify("Badge added successfully!")
        self.session.input_mode = None
        self.refresh()
        return True

    # Search

    def search(self, term: str) -> None:
        """Show only users whose id contains ``term``."""
        self.session.search_term = term

    def clear_search(self) -> None:
        """Restore the unfiltered list."""
        self.session.search_term = ""

    # Delete confirmation

    def request_delete(self, user_id: str, index: int) -> None:
        """Open the delete confirmation for a badge in the current list."""
        user_badges = self.session.badges.get(user_id) or []
        if not 0 <= index < len(user_badges):
            self.notify("Badge not found", "error")
            return
        self.session.pending_delete = PendingDelete(user_id, index, user_badges[index])

    def cancel_delete(self) -> None:
        """Close the delete confirmation without deleting."""
        self.session.pending_delete = None

    def confirm_delete(self) -> bool:
        """Delete the pending badge. Returns whether it was deleted."""
        pending = self.session.pending_delete
        if pending is None:
            return False
        try:
            self.api.delete_badge(pending.user_id, pending.index)
        except ApiError as e:
            self.notify(e.message or "Failed to delete badge", "error")
            return False

        self.notify("Badge deleted successfully!")
        self.refresh()
        self.session.pending_delete = None
        return True

    # Image preview

    def open_preview(self, image_url: str) -> None:
        """Show an enlarged badge image."""
        self.session.preview_image = image_url

    def close_preview(self) -> None:
        """Close the image preview."""
        self.session.preview_image = None

    # Dismissal

    def dismiss(self, modal: str) -> None:
        """Close ``modal`` after an overlay click or its close control."""
        if modal == PREVIEW_MODAL:
            self.close_preview()
        elif modal == DELETE_MODAL:
            self.cancel_delete()
        else:
            raise ValueError(f"Unknown modal: {modal}")

    def handle_key(self, key: str) -> None:
        """Close both modals on Escape."""
        if key == "Escape":
            self.close_preview()
            self.cancel_delete()
