"""JSON Schema descriptions of the Siren shapes.

The per-shape schemas are shallow: an entity's ``entities`` are only
checked to be objects, because each sub-entity is resolved separately by
the codec.  :data:`JSONSCHEMA` describes a whole document recursively
and is what encoded output is checked against.
"""
from sirenentity.const import METHOD_PATTERN

DRAFT = "http://json-schema.org/draft-07/schema#"

_STRING = {"type": "string"}
_OPTIONAL_STRING = {"type": ["string", "null"]}
_STRING_ARRAY = {"type": "array", "items": _STRING}

FIELD_SCHEMA = {
    "type": "object",
    "required": ["name"],
    "properties": {
        "name": _STRING,
        "class": _STRING_ARRAY,
        "type": _OPTIONAL_STRING,
        "value": _OPTIONAL_STRING,
        "title": _OPTIONAL_STRING,
    },
}

ACTION_SCHEMA = {
    "type": "object",
    "required": ["name", "href"],
    "properties": {
        "name": _STRING,
        "class": _STRING_ARRAY,
        "method": {"type": ["string", "null"], "pattern": METHOD_PATTERN},
        "href": _STRING,
        "title": _OPTIONAL_STRING,
        "type": _OPTIONAL_STRING,
        "fields": {"type": "array", "items": FIELD_SCHEMA},
    },
}


def _required(names, strict_rel):
    return names + ["rel"] if strict_rel else names


def navigational_link_schema(strict_rel=False) -> dict:
    return {
        "type": "object",
        "required": _required(["href"], strict_rel),
        "properties": {
            "rel": _STRING_ARRAY,
            "class": _STRING_ARRAY,
            "href": _STRING,
            "title": _OPTIONAL_STRING,
            "type": _OPTIONAL_STRING,
        },
    }


def entity_link_schema(strict_rel=False) -> dict:
    return {
        "type": "object",
        "required": _required(["href"], strict_rel),
        "properties": {
            "class": _STRING_ARRAY,
            "title": _OPTIONAL_STRING,
            "rel": _STRING_ARRAY,
            "href": _STRING,
            "type": _OPTIONAL_STRING,
        },
    }


def _entity_schema(sub_entity_items, strict_rel, embedded):
    schema = {
        "type": "object",
        "required": [],
        "properties": {
            "class": _STRING_ARRAY,
            "properties": {"type": "object"},
            "entities": {"type": "array", "items": sub_entity_items},
            "links": {"type": "array", "items": navigational_link_schema(strict_rel)},
            "actions": {"type": "array", "items": ACTION_SCHEMA},
            "title": _OPTIONAL_STRING,
        },
    }
    if embedded:
        schema["properties"]["rel"] = _STRING_ARRAY
        schema["required"] = _required([], strict_rel)
    return schema


def entity_schema(strict_rel=False) -> dict:
    return _entity_schema({"type": "object"}, strict_rel, embedded=False)


def embedded_entity_schema(strict_rel=False) -> dict:
    return _entity_schema({"type": "object"}, strict_rel, embedded=True)


def document_schema(strict_rel=False) -> dict:
    sub_entity = {"$ref": "#/definitions/subEntity"}
    return {
        "$schema": DRAFT,
        "$ref": "#/definitions/entity",
        "definitions": {
            "entity": _entity_schema(sub_entity, strict_rel, embedded=False),
            "subEntity": {
                "anyOf": [
                    {"$ref": "#/definitions/entityLink"},
                    {"$ref": "#/definitions/embeddedEntity"},
                ]
            },
            "entityLink": entity_link_schema(strict_rel),
            "embeddedEntity": _entity_schema(sub_entity, strict_rel, embedded=True),
        },
    }


JSONSCHEMA = document_schema()
