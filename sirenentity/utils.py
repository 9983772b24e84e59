import dataclasses
import json
import logging

_LOGGER = logging.getLogger(__name__)


def _to_json_default(o):
    # Mirrors the to_json() convention used by the model classes.
    if hasattr(o, "to_json"):
        return o.to_json()
    if dataclasses.is_dataclass(o) and not isinstance(o, type):
        return dataclasses.asdict(o)
    raise TypeError("Object of type {} is not JSON serializable".format(type(o).__name__))


def to_json_value(value):
    """Given any serializable value, returns the equivalent plain JSON value.

    Objects exposing a ``to_json()`` method and dataclass instances are
    converted on the way through.  Raises ``TypeError`` or ``ValueError``
    (circular references, NaN/Infinity) if the value has no JSON form.
    """
    text = json.dumps(value, default=_to_json_default, allow_nan=False)
    _LOGGER.debug("Converted {} to {} bytes of JSON".format(type(value).__name__, len(text)))
    return json.loads(text)


def json_type_name(value) -> str:
    """Given a plain JSON value, returns the name of its JSON type."""
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    # bool is a subclass of int, so must be checked first.
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if value is None:
        return "null"
    return type(value).__name__


def string_list(values) -> list:
    """Given a single string or an iterable of them, returns a new list of strings."""
    if values is None:
        return []
    if isinstance(values, str):
        return [values]
    return [str(value) for value in values]
