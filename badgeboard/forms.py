"""Shared form helpers."""

from __future__ import annotations

from typing import Any

from flask_wtf import FlaskForm  # type: ignore
from werkzeug.datastructures import MultiDict


def strip_filter(value: Any) -> Any:
    """Strip surrounding whitespace from submitted strings."""
    if isinstance(value, str):
        return value.strip()
    return value


def json_formdata(payload: Any) -> MultiDict:
    """Turn a decoded JSON object into form data for WTForms.

    Scalars are converted to strings, anything else is dropped so that it
    fails validation like a missing field.
    """
    if not isinstance(payload, dict):
        return MultiDict()
    data = {}
    for key, value in payload.items():
        if isinstance(value, bool) or value is None:
            continue
        if isinstance(value, (str, int, float)):
            data[key] = str(value)
    return MultiDict(data)


class APIForm(FlaskForm):
    """Base form for API endpoints, which accept requests without a CSRF token."""

    class Meta:
        csrf = False
