"""Routes for the uploads blueprint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from flask import current_app, jsonify, request
from werkzeug.utils import secure_filename

from badgeboard.errors import UploadError, ValidationError

from . import bp
from .forms import UploadForm

if TYPE_CHECKING:
    from .relay import UploadRelay


def get_upload_relay() -> UploadRelay:
    """Return the upload relay bound to the current app."""
    return current_app.extensions["upload_relay"]


@bp.route("/upload", methods=["POST"])
def upload_image() -> Any:
    """Relay an uploaded image to the image host."""
    form = UploadForm(formdata=request.files)
    if not form.validate():
        raise ValidationError("No image file provided")

    file_storage = form.image.data
    data = file_storage.read()
    if not data:
        raise ValidationError("No image file provided")

    filename = secure_filename(file_storage.filename or "")
    try:
        result = get_upload_relay().upload(data, filename or None)
    except UploadError as e:
        current_app.logger.error(f"Upload error: {e.message}")
        raise UploadError("Failed to upload image") from e

    return jsonify(
        {"success": True, "url": result.url, "display_url": result.display_url}
    )
