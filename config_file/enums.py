from __future__ import annotations

"""Core data types and enumerations."""

from enum import Enum


class FormatTag(str, Enum):
    """Enumeration of configuration file syntaxes."""

    TOML = "toml"
    JSON = "json"
    YAML = "yaml"
    XML = "xml"
    UNKNOWN = "unknown"  # no extension, or one we do not recognise


class OutputFormat(str, Enum):
    """How ``config-file show`` prints a decoded document."""

    JSON = "json"
    YAML = "yaml"
    TOML = "toml"
