from marshmallow import EXCLUDE, ValidationError

from .. import ma
from ..errors import InvalidArgument


class InputSchema(ma.Schema):
    """Request body schema; keys it does not declare (such as login_id) are dropped."""

    class Meta:
        unknown = EXCLUDE


def _first_error(messages, path=()):
    if isinstance(messages, dict):
        for key, value in messages.items():
            return _first_error(value, path + (str(key),))
    if isinstance(messages, list) and messages:
        return _first_error(messages[0], path)
    prefix = ".".join(path)
    return f"{prefix}: {messages}" if prefix and prefix != "_schema" else str(messages)


def load_input(schema, data):
    if data is None:
        raise InvalidArgument("Request body must be JSON")
    try:
        return schema.load(data)
    except ValidationError as err:
        raise InvalidArgument(_first_error(err.messages)) from err
