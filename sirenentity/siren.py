"""The Siren entity model.

Every type here is a value tree: built once through its constructor or the
fluent ``with_*`` helpers (each of which returns a new object) and read
through properties afterwards.  The only in-place mutator is
:meth:`Entity.push_sub_entity`, used when assembling a tree bottom-up.

``to_json()`` on each type returns the plain JSON value for the wire.
Decoding lives in :mod:`sirenentity.codec`.
"""
import copy
import logging
from abc import ABC, abstractmethod
from types import MappingProxyType

from sirenentity.const import (
    KEY_ACTIONS, KEY_CLASS, KEY_ENTITIES, KEY_FIELDS, KEY_HREF, KEY_LINKS, KEY_METHOD, KEY_NAME, KEY_PROPERTIES,
    KEY_REL, KEY_TITLE, KEY_TYPE, KEY_VALUE, DEFAULT_METHOD, DEFAULT_FIELD_TYPE
)
from sirenentity.errors import NotAnObject, SerializationError
from sirenentity.utils import json_type_name, string_list, to_json_value

_LOGGER = logging.getLogger(__name__)


def _put_optional(response: dict, key: str, value):
    # Unset optional scalars are left off the wire rather than sent as null.
    if value is not None:
        response[key] = value


class _SirenObject:

    def _state(self) -> dict:
        raise NotImplementedError()

    def _clone(self):
        clone = copy.copy(self)
        for attribute, value in vars(self).items():
            if isinstance(value, list):
                setattr(clone, attribute, list(value))
        return clone

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._state() == other._state()

    def __repr__(self):
        state = ", ".join("{}={!r}".format(key, value) for key, value in self._state().items())
        return "{}({})".format(self.__class__.__name__, state)


class Field(_SirenObject):
    """A single input of an :class:`Action`.

    ``value`` is carried as a string; no type-specific parsing is done here.
    """

    def __init__(self, name: str, classes=None, field_type: str = None, value: str = None, title: str = None):
        self._name = name
        self._class = string_list(classes)
        self._type = field_type
        self._value = value
        self._title = title

    @property
    def name(self):
        return self._name

    @property
    def classes(self):
        return tuple(self._class)

    @property
    def type(self):
        return self._type

    @property
    def effective_type(self):
        return self._type if self._type is not None else DEFAULT_FIELD_TYPE

    @property
    def value(self):
        return self._value

    @property
    def title(self):
        return self._title

    def _state(self):
        return {"name": self._name, "class": self._class, "type": self._type, "value": self._value,
                "title": self._title}

    def to_json(self):
        response = {KEY_NAME: self._name, KEY_CLASS: list(self._class)}
        _put_optional(response, KEY_TYPE, self._type)
        _put_optional(response, KEY_VALUE, self._value)
        _put_optional(response, KEY_TITLE, self._title)
        return response


class Action(_SirenObject):
    """An operation a client may invoke against the resource.

    ``method`` always holds a concrete verb; leaving it out gives GET.
    Action names should be unique within an entity, but that is not
    checked.
    """

    def __init__(self, name: str, href: str, method: str = None, classes=None, title: str = None,
                 media_type: str = None, fields=None):
        self._name = name
        self._class = string_list(classes)
        self._method = method if method is not None else DEFAULT_METHOD
        self._href = href
        self._title = title
        self._type = media_type
        self._fields = list(fields) if fields else []

    @property
    def name(self):
        return self._name

    @property
    def classes(self):
        return tuple(self._class)

    @property
    def method(self):
        return self._method

    @property
    def href(self):
        return self._href

    @property
    def title(self):
        return self._title

    @property
    def type(self):
        return self._type

    @property
    def fields(self):
        return tuple(self._fields)

    def with_class_member(self, class_member: str):
        action = self._clone()
        action._class.append(str(class_member))
        return action

    def with_title(self, title: str):
        action = self._clone()
        action._title = title
        return action

    def with_type(self, media_type: str):
        action = self._clone()
        action._type = media_type
        return action

    def with_field(self, field: Field):
        action = self._clone()
        action._fields.append(field)
        return action

    def _state(self):
        return {"name": self._name, "class": self._class, "method": self._method, "href": self._href,
                "title": self._title, "type": self._type, "fields": self._fields}

    def to_json(self):
        response = {KEY_NAME: self._name, KEY_CLASS: list(self._class), KEY_METHOD: self._method,
                    KEY_HREF: self._href}
        _put_optional(response, KEY_TITLE, self._title)
        _put_optional(response, KEY_TYPE, self._type)
        response[KEY_FIELDS] = [field.to_json() for field in self._fields]
        return response


class NavigationalLink(_SirenObject):
    """A link from an entity to a URI, distinct from a sub-entity relationship."""

    def __init__(self, rels, href: str):
        self._rel = string_list(rels)
        self._class = []
        self._href = href
        self._title = None
        self._type = None

    @property
    def rel(self):
        return tuple(self._rel)

    @property
    def classes(self):
        return tuple(self._class)

    @property
    def href(self):
        return self._href

    @property
    def title(self):
        return self._title

    @property
    def type(self):
        return self._type

    def with_class_member(self, class_member: str):
        link = self._clone()
        link._class.append(str(class_member))
        return link

    def with_title(self, title: str):
        link = self._clone()
        link._title = title
        return link

    def with_type(self, media_type: str):
        link = self._clone()
        link._type = media_type
        return link

    def _state(self):
        return {"rel": self._rel, "class": self._class, "href": self._href, "title": self._title,
                "type": self._type}

    def to_json(self):
        response = {KEY_REL: list(self._rel), KEY_CLASS: list(self._class), KEY_HREF: self._href}
        _put_optional(response, KEY_TITLE, self._title)
        _put_optional(response, KEY_TYPE, self._type)
        return response


class EntityLink(_SirenObject):
    """A sub-entity that refers to another entity by ``href`` rather than embedding it."""

    def __init__(self, href: str, rel=None, classes=None, title: str = None, media_type: str = None):
        self._class = string_list(classes)
        self._title = title
        self._rel = string_list(rel)
        self._href = href
        self._type = media_type

    @property
    def classes(self):
        return tuple(self._class)

    @property
    def title(self):
        return self._title

    @property
    def rel(self):
        return tuple(self._rel)

    @property
    def href(self):
        return self._href

    @property
    def type(self):
        return self._type

    def _state(self):
        return {"class": self._class, "title": self._title, "rel": self._rel, "href": self._href,
                "type": self._type}

    def to_json(self):
        response = {KEY_CLASS: list(self._class)}
        _put_optional(response, KEY_TITLE, self._title)
        response[KEY_REL] = list(self._rel)
        response[KEY_HREF] = self._href
        _put_optional(response, KEY_TYPE, self._type)
        return response


class SubEntity(_SirenObject, ABC):
    """An entry of an entity's ``entities`` collection.

    Either an :class:`EmbeddedLinkSubEntity` wrapping an :class:`EntityLink`
    or an :class:`EmbeddedRepresentationSubEntity` wrapping a whole
    :class:`Entity` plus its relation to the parent.
    """

    @property
    @abstractmethod
    def rel(self):
        pass

    @abstractmethod
    def to_json(self):
        pass

    @staticmethod
    def from_link(entity_link: "EntityLink"):
        return EmbeddedLinkSubEntity(entity_link)

    @staticmethod
    def from_entity(entity: "Entity", rels):
        # Embedded by value, so the new sub-entity never shares nodes with the caller's tree.
        return EmbeddedRepresentationSubEntity(copy.deepcopy(entity), rels)


class EmbeddedLinkSubEntity(SubEntity):
    def __init__(self, link: EntityLink):
        self._link = link

    @property
    def link(self):
        return self._link

    @property
    def rel(self):
        return self._link.rel

    def _state(self):
        return {"link": self._link}

    def to_json(self):
        return self._link.to_json()


class EmbeddedRepresentationSubEntity(SubEntity):
    def __init__(self, entity: "Entity", rel=None):
        self._entity = entity
        self._rel = string_list(rel)

    @property
    def entity(self):
        return self._entity

    @property
    def rel(self):
        return tuple(self._rel)

    def _state(self):
        return {"entity": self._entity, "rel": self._rel}

    def to_json(self):
        response = self._entity.to_json()
        response[KEY_REL] = list(self._rel)
        return response


class Entity(_SirenObject):
    """A Siren entity: class, properties, sub-entities, links, actions and a title.

    Start from ``Entity()`` and chain the ``with_*`` builder steps; each
    returns a new Entity and leaves the receiver untouched.
    :meth:`with_properties` is the only step that can fail.
    """

    def __init__(self):
        self._class = []
        self._properties = {}
        self._entities = []
        self._links = []
        self._actions = []
        self._title = None

    @classmethod
    def _from_parts(cls, classes, properties, entities, links, actions, title):
        # Used by the decoder, whose input has already been validated.
        entity = cls()
        entity._class = list(classes)
        entity._properties = properties
        entity._entities = list(entities)
        entity._links = list(links)
        entity._actions = list(actions)
        entity._title = title
        return entity

    def _clone(self):
        entity = super()._clone()
        # Nested entities and property values stay mutable, so they are never shared.
        entity._entities = copy.deepcopy(self._entities)
        entity._properties = copy.deepcopy(self._properties)
        return entity

    @property
    def classes(self):
        return tuple(self._class)

    @property
    def properties(self):
        return MappingProxyType(self._properties)

    @property
    def entities(self):
        return tuple(self._entities)

    @property
    def links(self):
        return tuple(self._links)

    @property
    def actions(self):
        return tuple(self._actions)

    @property
    def title(self):
        return self._title

    def with_properties(self, serializable):
        """Returns a copy whose property bag is ``serializable`` converted to JSON.

        Raises :class:`NotAnObject` unless the value converts to a JSON object,
        or :class:`SerializationError` if it can't be converted at all.
        """
        try:
            value = to_json_value(serializable)
        except (TypeError, ValueError) as e:
            _LOGGER.debug("Properties could not be serialized: {}".format(e))
            raise SerializationError(e) from e

        if not isinstance(value, dict):
            _LOGGER.debug("Rejecting properties that serialize to {}".format(json_type_name(value)))
            raise NotAnObject(json_type_name(value))

        entity = self._clone()
        entity._properties = value
        return entity

    def with_class_member(self, class_member: str):
        entity = self._clone()
        entity._class.append(str(class_member))
        return entity

    def with_link(self, link: NavigationalLink):
        entity = self._clone()
        entity._links.append(link)
        return entity

    def with_action(self, action: Action):
        entity = self._clone()
        entity._actions.append(action)
        return entity

    def with_title(self, title: str):
        entity = self._clone()
        entity._title = title
        return entity

    def push_sub_entity(self, sub_entity: SubEntity):
        if not isinstance(sub_entity, SubEntity):
            raise TypeError("Expected a SubEntity, got {}".format(type(sub_entity).__name__))
        self._entities.append(sub_entity)
        _LOGGER.debug("Entity now has {} sub-entities".format(len(self._entities)))

    def _state(self):
        return {"class": self._class, "properties": self._properties, "entities": self._entities,
                "links": self._links, "actions": self._actions, "title": self._title}

    def to_json(self):
        response = {
            KEY_CLASS: list(self._class),
            KEY_PROPERTIES: copy.deepcopy(self._properties),
            KEY_ENTITIES: [entity.to_json() for entity in self._entities],
            KEY_LINKS: [link.to_json() for link in self._links],
            KEY_ACTIONS: [action.to_json() for action in self._actions],
        }
        _put_optional(response, KEY_TITLE, self._title)
        return response
