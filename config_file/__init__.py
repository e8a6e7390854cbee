from __future__ import annotations

"""Read a configuration file and decode it by extension (TOML, JSON, YAML, XML).

Example::

    from pydantic import BaseModel
    import config_file

    class Config(BaseModel):
        host: str

    cfg = config_file.load("/etc/myconfig.toml", Config)

TOML and JSON are always available; YAML needs ``PyYAML`` and XML needs
``xmltodict`` (``pip install config-file[yaml,xml]``).
"""

from .classify import classify
from .decoders import available_formats
from .enums import FormatTag
from .errors import (
    ConfigFileError,
    FileAccessError,
    JsonError,
    ParseError,
    TomlError,
    UnsupportedFormatError,
    XmlError,
    YamlError,
)
from .loader import ConfigLoader, FromConfigFile, load

__version__ = "0.3.0"

__all__ = [
    "ConfigFileError",
    "ConfigLoader",
    "FileAccessError",
    "FormatTag",
    "FromConfigFile",
    "JsonError",
    "ParseError",
    "TomlError",
    "UnsupportedFormatError",
    "XmlError",
    "YamlError",
    "available_formats",
    "classify",
    "load",
]
