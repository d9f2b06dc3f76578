""""""
from flask_wtf import FlaskForm
from wtforms.fields import StringField, TextAreaField

from commentboard.web.forms.filters import default


class CommentForm(FlaskForm):
    """Comment submission.

    Nothing is validated besides the CSRF token, when enabled: any text is
    accepted, missing fields fall back to their default.
    """

    name = StringField("name", filters=(default("anon"),))

    comment = TextAreaField("comment", filters=(default(""),))
