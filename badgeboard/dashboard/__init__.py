"""View-model and command handlers for the badge dashboard."""

from .client import ApiError, BadgeApiClient
from .controller import DashboardController
from .render import render_badge_list
from .state import DashboardSession, PendingDelete, Toast, filter_badges

__all__ = [
    "ApiError",
    "BadgeApiClient",
    "DashboardController",
    "DashboardSession",
    "PendingDelete",
    "Toast",
    "filter_badges",
    "render_badge_list",
]
