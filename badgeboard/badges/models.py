"""Data types for stored badges."""

from __future__ import annotations

from typing import Dict, List, TypedDict  # noqa: UP035


class Badge(TypedDict):
    """A tooltip-labelled image shown next to a user."""

    tooltip: str
    badge: str


# User id -> badges in the order they were added.
BadgeCollection = Dict[str, List[Badge]]  # noqa: UP006
