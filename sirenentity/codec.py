"""Conversion between :class:`~sirenentity.siren.Entity` trees and Siren JSON.

Encoding is just ``to_json()`` on the tree.  Decoding walks the parsed
document, checking each node against the JSON Schema for the shape
expected there before building the model object.

Sub-entities carry no discriminator, so they are resolved against an
ordered list of candidate shapes and the first that fits wins.  The
entity link shape is tried first: it only needs ``href``, while every
field of an embedded entity is optional.  That means an object such as
``{"href": "http://x/1", "rel": ["item"]}`` always becomes a link even
though it would also pass as an empty embedded entity.
"""
import copy
import json
import logging

from jsonschema import Draft7Validator
from jsonschema.exceptions import best_match

from sirenentity import schema
from sirenentity.config import CodecSettings
from sirenentity.const import (
    KEY_ACTIONS, KEY_CLASS, KEY_ENTITIES, KEY_FIELDS, KEY_HREF, KEY_LINKS, KEY_METHOD, KEY_NAME, KEY_PROPERTIES,
    KEY_REL, KEY_TITLE, KEY_TYPE, KEY_VALUE
)
from sirenentity.errors import DecodeError
from sirenentity.siren import (
    Action, EmbeddedLinkSubEntity, EmbeddedRepresentationSubEntity, Entity, EntityLink, Field, NavigationalLink
)

_LOGGER = logging.getLogger(__name__)


def _location(path) -> str:
    return "/".join(str(part) for part in path) or "<root>"


class SirenDecoder:
    def __init__(self, settings: CodecSettings = None):
        self.__logger = logging.getLogger("%s.%s" % (self.__class__.__module__, self.__class__.__name__))
        self.settings = settings if settings is not None else CodecSettings()

        strict_rel = self.settings.strict_rel
        self._entity_validator = Draft7Validator(schema.entity_schema(strict_rel))
        # Order matters: the first candidate that accepts the object wins.
        self._sub_entity_candidates = [
            ("link", Draft7Validator(schema.entity_link_schema(strict_rel)), self._entity_link),
            ("embedded", Draft7Validator(schema.embedded_entity_schema(strict_rel)), self._embedded_entity),
        ]

    def decode(self, document) -> Entity:
        """Given a parsed JSON document, returns the Entity it describes.

        Raises :class:`DecodeError` naming the failed requirement and where
        in the document it failed.
        """
        self._check(self._entity_validator, document, ())
        try:
            entity = self._entity(document, ())
        except RecursionError as e:
            self.__logger.error("Document is nested too deeply to decode")
            raise DecodeError("document is nested too deeply") from e
        self.__logger.debug("Decoded entity with {} sub-entities".format(len(entity.entities)))
        return entity

    def _check(self, validator, value, path):
        error = best_match(validator.iter_errors(value))
        if error is not None:
            raise DecodeError(error.message, path + tuple(error.absolute_path), [error])

    def _entity(self, value, path) -> Entity:
        entities = [self._sub_entity(item, path + (KEY_ENTITIES, index))
                    for index, item in enumerate(value.get(KEY_ENTITIES, []))]
        return Entity._from_parts(
            classes=value.get(KEY_CLASS, []),
            properties=copy.deepcopy(value.get(KEY_PROPERTIES, {})),
            entities=entities,
            links=[self._navigational_link(link) for link in value.get(KEY_LINKS, [])],
            actions=[self._action(action) for action in value.get(KEY_ACTIONS, [])],
            title=value.get(KEY_TITLE),
        )

    def _sub_entity(self, value, path):
        failures = []
        for name, validator, build in self._sub_entity_candidates:
            try:
                self._check(validator, value, path)
                sub_entity = build(value, path)
            except DecodeError as e:
                self.__logger.debug("Sub-entity at {} is not a {}: {}".format(_location(path), name, e))
                failures.append((name, e))
                continue

            self.__logger.debug("Sub-entity at {} resolved as {}".format(_location(path), name))
            return sub_entity

        reasons = "; ".join("as {}: {}".format(name, e) for name, e in failures)
        raise DecodeError("sub-entity matches no known shape ({})".format(reasons), path,
                          [error for _, e in failures for error in e.errors])

    def _entity_link(self, value, path):
        return EmbeddedLinkSubEntity(EntityLink(
            href=value[KEY_HREF],
            rel=value.get(KEY_REL, []),
            classes=value.get(KEY_CLASS, []),
            title=value.get(KEY_TITLE),
            media_type=value.get(KEY_TYPE),
        ))

    def _embedded_entity(self, value, path):
        return EmbeddedRepresentationSubEntity(self._entity(value, path), value.get(KEY_REL, []))

    def _navigational_link(self, value) -> NavigationalLink:
        link = NavigationalLink(value.get(KEY_REL, []), value[KEY_HREF])
        for class_member in value.get(KEY_CLASS, []):
            link = link.with_class_member(class_member)
        if value.get(KEY_TITLE) is not None:
            link = link.with_title(value[KEY_TITLE])
        if value.get(KEY_TYPE) is not None:
            link = link.with_type(value[KEY_TYPE])
        return link

    def _action(self, value) -> Action:
        method = value.get(KEY_METHOD)
        if method is None:
            method = self.settings.default_method
        return Action(
            name=value[KEY_NAME],
            href=value[KEY_HREF],
            method=method,
            classes=value.get(KEY_CLASS, []),
            title=value.get(KEY_TITLE),
            media_type=value.get(KEY_TYPE),
            fields=[self._field(field) for field in value.get(KEY_FIELDS, [])],
        )

    def _field(self, value) -> Field:
        return Field(
            name=value[KEY_NAME],
            classes=value.get(KEY_CLASS, []),
            field_type=value.get(KEY_TYPE),
            value=value.get(KEY_VALUE),
            title=value.get(KEY_TITLE),
        )


def encode(entity: Entity) -> dict:
    return entity.to_json()


def decode(document, settings: CodecSettings = None) -> Entity:
    return SirenDecoder(settings).decode(document)


def dumps(entity: Entity, settings: CodecSettings = None) -> str:
    settings = settings if settings is not None else CodecSettings()
    return json.dumps(entity.to_json(), indent=settings.indent)


def loads(text, settings: CodecSettings = None) -> Entity:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        _LOGGER.debug("Rejecting document that isn't JSON: {}".format(e))
        raise DecodeError("invalid JSON: {}".format(e)) from e
    return decode(document, settings)
