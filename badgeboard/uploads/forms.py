"""Forms for the uploads blueprint."""

from flask_wtf.file import FileField, FileRequired  # type: ignore

from badgeboard.forms import APIForm


class UploadForm(APIForm):
    """Multipart upload of a single badge image."""

    image = FileField("Badge Image", validators=[FileRequired()])
