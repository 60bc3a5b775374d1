"""Badges blueprint exposing the badge collection as a JSON API."""

from flask import Blueprint

bp = Blueprint("badges", __name__, url_prefix="/api")

from . import routes  # noqa: E402, F401
