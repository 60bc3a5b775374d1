"""Uploads blueprint relaying badge images to the image host."""

from flask import Blueprint

bp = Blueprint("uploads", __name__, url_prefix="/api")

from . import routes  # noqa: E402, F401
