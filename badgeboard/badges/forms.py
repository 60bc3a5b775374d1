"""Forms for the badges blueprint."""

from wtforms import StringField
from wtforms.validators import DataRequired

from badgeboard.forms import APIForm, strip_filter


class BadgeForm(APIForm):
    """Payload for adding a badge to a user."""

    userId = StringField("User ID", validators=[DataRequired()], filters=[strip_filter])
    tooltip = StringField("Tooltip", validators=[DataRequired()], filters=[strip_filter])
    badge = StringField("Badge URL", validators=[DataRequired()], filters=[strip_filter])
