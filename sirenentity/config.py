import configparser
import logging
import os
import re

from sirenentity.const import (
    CONFIG_FILENAME, CONFIG_SECTION_CODEC, CONFIG_STRICT_REL, CONFIG_DEFAULT_METHOD, CONFIG_INDENT, DEFAULT_METHOD,
    METHOD_PATTERN
)

# Shipped inside the package, so it is found wherever the package is installed.
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), CONFIG_FILENAME + ".default")


class ConfigReader:
    """Reads codec configuration: the packaged defaults, overlaid with one explicit file.

    Nothing is looked up implicitly; a host application that wants its own
    settings passes the file it owns.
    """

    def __init__(self, default_path=DEFAULT_CONFIG_PATH):
        self.__logger = logging.getLogger(__name__)
        self.__default_path = default_path

    def read_config(self, filename=None):
        config = configparser.RawConfigParser()

        self.__logger.debug("Reading default config from %s" % self.__default_path)
        with open(self.__default_path) as source:
            config.read_file(source)

        if filename:
            try:
                with open(filename) as source:
                    config.read_file(source)
            except OSError:
                self.__logger.error("Error reading config from %s" % filename)
                raise
            self.__logger.info("Overwrote defaults with config from %s" % filename)

        return config

    def read_settings(self, filename=None):
        return CodecSettings.from_config(self.read_config(filename))


def read_settings(filename=None):
    """Given an optional config file, returns the CodecSettings it describes."""
    return ConfigReader().read_settings(filename)


class CodecSettings:
    """How documents are encoded and decoded.

    ``strict_rel`` makes ``rel`` a required attribute on links and
    sub-entities.  It is off by default: documents missing ``rel`` decode
    with an empty relation list.
    """

    def __init__(self, strict_rel=False, default_method=DEFAULT_METHOD, indent=None):
        if not re.match(METHOD_PATTERN, default_method or ""):
            raise ValueError("Not a valid HTTP method: {!r}".format(default_method))
        self._strict_rel = strict_rel
        self._default_method = default_method
        self._indent = indent

    @property
    def strict_rel(self) -> bool:
        return self._strict_rel

    @property
    def default_method(self) -> str:
        return self._default_method

    @property
    def indent(self):
        return self._indent

    @classmethod
    def from_config(cls, config):
        if not config.has_section(CONFIG_SECTION_CODEC):
            return cls()

        section = config[CONFIG_SECTION_CODEC]
        indent = section.get(CONFIG_INDENT, fallback="").strip()
        return cls(
            strict_rel=section.getboolean(CONFIG_STRICT_REL, fallback=False),
            default_method=section.get(CONFIG_DEFAULT_METHOD, fallback=DEFAULT_METHOD).strip(),
            indent=int(indent) if indent else None,
        )

    def __repr__(self):
        return "CodecSettings(strict_rel={!r}, default_method={!r}, indent={!r})".format(
            self._strict_rel, self._default_method, self._indent)
