SIREN_MEDIA_TYPE = "application/vnd.siren+json"

KEY_CLASS = "class"
KEY_PROPERTIES = "properties"
KEY_ENTITIES = "entities"
KEY_LINKS = "links"
KEY_ACTIONS = "actions"
KEY_TITLE = "title"
KEY_REL = "rel"
KEY_HREF = "href"
KEY_TYPE = "type"
KEY_NAME = "name"
KEY_METHOD = "method"
KEY_FIELDS = "fields"
KEY_VALUE = "value"

DEFAULT_METHOD = "GET"
DEFAULT_FIELD_TYPE = "text"

# RFC 7230 token, which is what an HTTP method must be.
METHOD_PATTERN = r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$"

CONFIG_FILENAME = "sirenentity.ini"
CONFIG_SECTION_CODEC = "CODEC"
CONFIG_STRICT_REL = "STRICT_REL"
CONFIG_DEFAULT_METHOD = "DEFAULT_METHOD"
CONFIG_INDENT = "INDENT"
