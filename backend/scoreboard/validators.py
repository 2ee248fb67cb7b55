"""Presence checks for incoming JSON bodies."""
from flask import request

from scoreboard.errors import ValidationError


def json_body():
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object.')
    return data


def is_missing(value):
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data, fields, message='You are missing the {field} property.'):
    """Raise ValidationError naming the first required field that is absent or blank."""
    for field in fields:
        if is_missing(data.get(field)):
            raise ValidationError(message.format(field=field))


def pick(data, fields):
    """Subset of ``data`` limited to ``fields`` that were actually sent."""
    return {f: data[f] for f in fields if f in data}
