"""State held by one dashboard session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

from badgeboard.badges.models import Badge, BadgeCollection

TOAST_DURATION = 3.0

ToastKind = Literal["success", "error"]
InputMode = Optional[Literal["url", "file"]]


@dataclass(frozen=True)
class Toast:
    """A transient notification."""

    message: str
    kind: ToastKind
    shown_at: float

    def expired(self, now: float) -> bool:
        return now - self.shown_at >= TOAST_DURATION


@dataclass(frozen=True)
class PendingDelete:
    """The badge awaiting delete confirmation."""

    user_id: str
    index: int
    badge: Badge


@dataclass
class DashboardSession:
    """Everything the dashboard renders from.

    ``badges`` is the last collection fetched from the server. Badge indexes
    refer to positions in it, so it must be re-fetched after each mutation.
    """

    badges: BadgeCollection = field(default_factory=dict)
    search_term: str = ""
    pending_delete: Optional[PendingDelete] = None
    preview_image: Optional[str] = None
    toast: Optional[Toast] = None
    input_mode: InputMode = None
    busy: bool = False

    @property
    def visible_badges(self) -> BadgeCollection:
        return filter_badges(self.badges, self.search_term)

    @property
    def is_searching(self) -> bool:
        return bool(self.search_term.strip())

    @property
    def url_input_enabled(self) -> bool:
        return self.input_mode != "file"

    @property
    def file_input_enabled(self) -> bool:
        return self.input_mode != "url"


def filter_badges(badges: BadgeCollection, term: str) -> BadgeCollection:
    """Keep only users whose id contains ``term``, ignoring case.

    A blank term returns the collection unchanged.
    """
    needle = term.strip().lower()
    if not needle:
        return badges
    return {
        user_id: user_badges
        for user_id, user_badges in badges.items()
        if needle in user_id.lower()
    }
