"""Routes for the badges blueprint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from flask import current_app, jsonify, request

from badgeboard.errors import PersistenceError, ValidationError
from badgeboard.forms import json_formdata

from . import bp
from .forms import BadgeForm

if TYPE_CHECKING:
    from .store import BadgeStore

MISSING_FIELDS_MESSAGE = "Missing required fields: userId, tooltip, badge"


def get_badge_store() -> BadgeStore:
    """Return the badge store bound to the current app."""
    return current_app.extensions["badge_store"]


@bp.route("/badges", methods=["GET"])
def list_badges() -> Any:
    """Return every user's badges."""
    return jsonify(get_badge_store().read_all())


@bp.route("/badges", methods=["POST"])
def add_badge() -> Any:
    """Append a badge to a user's list."""
    form = BadgeForm(formdata=json_formdata(request.get_json(silent=True)))
    if not form.validate():
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    user_id = form.userId.data
    try:
        get_badge_store().add_badge(user_id, form.tooltip.data, form.badge.data)
    except PersistenceError as e:
        raise PersistenceError("Failed to save badge") from e

    current_app.logger.info(f"Added badge for user {user_id}")
    return jsonify({"success": True, "message": "Badge added successfully"})


@bp.route("/badges/<string:user_id>/<int(signed=True):index>", methods=["DELETE"])
def delete_badge(user_id: str, index: int) -> Any:
    """Remove the badge at ``index`` from a user's list."""
    try:
        get_badge_store().delete_badge(user_id, index)
    except PersistenceError as e:
        raise PersistenceError("Failed to delete badge") from e

    current_app.logger.info(f"Deleted badge {index} for user {user_id}")
    return jsonify({"success": True, "message": "Badge deleted successfully"})
