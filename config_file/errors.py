from __future__ import annotations

"""Errors raised while loading a configuration file.

The hierarchy is closed: callers can tell a missing/unreadable file, a file
whose contents do not parse (or do not fit the target type) and an extension we
do not know how to handle apart by catching the matching class.
"""

import os
from typing import Optional

from config_file.enums import FormatTag

__all__ = [
    "ConfigFileError",
    "FileAccessError",
    "ParseError",
    "TomlError",
    "JsonError",
    "YamlError",
    "XmlError",
    "UnsupportedFormatError",
]


class ConfigFileError(Exception):
    """Base class for every failure of :func:`config_file.load`."""

    message = "couldn't load config file"

    def __init__(self, path: Optional[str | os.PathLike[str]] = None, detail: Optional[str] = None):
        self.path = os.fspath(path) if path is not None else None
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        text = self.message
        if self.path is not None:
            text = f"{text}: {self.path}"
        if self.detail:
            text = f"{text} ({self.detail})"
        return text


class FileAccessError(ConfigFileError):
    """The file could not be opened or read."""

    message = "couldn't read config file"


class ParseError(ConfigFileError):
    """The file was read but its contents could not be decoded into the target."""

    format: FormatTag = FormatTag.UNKNOWN

    @property
    def message(self) -> str:  # type: ignore[override]
        return f"couldn't parse {self.format.value.upper()} file"


class TomlError(ParseError):
    format = FormatTag.TOML


class JsonError(ParseError):
    format = FormatTag.JSON


class YamlError(ParseError):
    format = FormatTag.YAML


class XmlError(ParseError):
    format = FormatTag.XML


class UnsupportedFormatError(ConfigFileError):
    """No enabled decoder handles the file's extension. Nothing was read."""

    message = "don't know how to parse file"
