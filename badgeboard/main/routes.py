"""Routes for the main blueprint."""

from __future__ import annotations

from typing import Any

from flask import jsonify, render_template, request

from badgeboard.badges.routes import get_badge_store
from badgeboard.dashboard import DashboardSession, render_badge_list

from . import bp


@bp.route("/")
def index() -> Any:
    """Render the dashboard with the current badges."""
    session = DashboardSession(badges=get_badge_store().read_all())
    return render_template("index.html", badge_list=render_badge_list(session))


@bp.route("/badges.json")
def badges_json() -> Any:
    """Serve the raw badge collection."""
    return jsonify(get_badge_store().read_all())


@bp.route("/partials/badges")
def badge_list_partial() -> Any:
    """Render the badge list, filtered by the ``q`` search term."""
    session = DashboardSession(
        badges=get_badge_store().read_all(),
        search_term=request.args.get("q", ""),
    )
    return str(render_badge_list(session))
