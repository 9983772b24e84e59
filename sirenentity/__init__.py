"""Model and (de)serialize documents in the Siren hypermedia format."""
from sirenentity.codec import SirenDecoder, decode, dumps, encode, loads
from sirenentity.config import CodecSettings, ConfigReader, read_settings
from sirenentity.const import SIREN_MEDIA_TYPE
from sirenentity.errors import DecodeError, EntityBuilderError, NotAnObject, SerializationError, SirenError
from sirenentity.schema import JSONSCHEMA
from sirenentity.siren import (
    Action, EmbeddedLinkSubEntity, EmbeddedRepresentationSubEntity, Entity, EntityLink, Field, NavigationalLink,
    SubEntity
)

__version__ = "0.1.0"
