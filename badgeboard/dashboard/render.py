"""Rendering of the badge list from session state."""

from __future__ import annotations

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from .state import DashboardSession

_env = Environment(
    loader=PackageLoader("badgeboard", "templates"),
    autoescape=select_autoescape(["html"]),
)


def render_badge_list(session: DashboardSession) -> Markup:
    """Render the visible badges, or an empty/no-results message."""
    template = _env.get_template("dashboard/_badge_list.html")
    return Markup(
        template.render(
            badges=session.visible_badges,
            search_term=session.search_term.strip(),
            searching=session.is_searching,
        )
    )
