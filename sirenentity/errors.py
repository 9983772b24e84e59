"""Exceptions raised by sirenentity.

Everything derives from :class:`SirenError` so a host application can
catch the whole family in one place.
"""


class SirenError(Exception):
    pass


class EntityBuilderError(SirenError):
    """Raised when an entity builder step is given an unusable value."""


class NotAnObject(EntityBuilderError):
    def __init__(self, json_type):
        self.json_type = json_type
        super().__init__("does not serialize to an object (got {})".format(json_type))


class SerializationError(EntityBuilderError):
    def __init__(self, cause):
        self.cause = cause
        super().__init__("serialization failure: {}".format(cause))


class DecodeError(SirenError, ValueError):
    """An inbound document doesn't match the Siren shape expected at ``path``.

    ``errors`` holds the underlying ``jsonschema.ValidationError`` objects,
    one per candidate shape that was rejected.
    """

    def __init__(self, message, path=(), errors=()):
        self.message = message
        self.path = tuple(path)
        self.errors = list(errors)
        super().__init__(message)

    @property
    def location(self) -> str:
        return "/".join(str(part) for part in self.path)

    def __str__(self):
        if self.path:
            return "{} (at {})".format(self.message, self.location)
        return self.message
