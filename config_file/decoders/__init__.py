from __future__ import annotations

"""Per-format decoders and the registry that decides which ones are enabled."""

import logging
from importlib import import_module
from typing import Dict, Iterable, NamedTuple, Optional

from config_file.enums import FormatTag
from config_file.utils.lazy import is_available

from .base import Decoder

logger = logging.getLogger(__name__)


class DecoderEntry(NamedTuple):
    module: str  # module holding the decoder class
    cls: str
    requires: Optional[str]  # import name of the third-party library, None if always present
    distribution: Optional[str]  # name on the package index


# Registry mapping format to implementation
_DECODER_REGISTRY: Dict[FormatTag, DecoderEntry] = {
    FormatTag.TOML: DecoderEntry("config_file.decoders.toml", "TomlDecoder", None, None),
    FormatTag.JSON: DecoderEntry("config_file.decoders.json", "JsonDecoder", None, None),
    FormatTag.YAML: DecoderEntry("config_file.decoders.yaml", "YamlDecoder", "yaml", "PyYAML"),
    FormatTag.XML: DecoderEntry("config_file.decoders.xml", "XmlDecoder", "xmltodict", "xmltodict"),
}

DEFAULT_FORMAT = FormatTag.TOML


def registered_formats() -> list[FormatTag]:
    return list(_DECODER_REGISTRY)


def entry_for(fmt: FormatTag) -> DecoderEntry:
    if fmt not in _DECODER_REGISTRY:
        raise ValueError(f"No decoder registered for format: {fmt}")
    return _DECODER_REGISTRY[fmt]


def is_format_available(fmt: FormatTag) -> bool:
    """True if the library the format needs is importable."""
    if fmt is DEFAULT_FORMAT:
        return True  # a core dependency, never optional
    if fmt not in _DECODER_REGISTRY:
        return False
    requires = _DECODER_REGISTRY[fmt].requires
    return requires is None or is_available(requires)


def available_formats() -> list[FormatTag]:
    return [fmt for fmt in _DECODER_REGISTRY if is_format_available(fmt)]


def get_decoder(fmt: FormatTag) -> Decoder:
    """Factory that resolves a decoder instance by format.

    Parameters
    ----------
    fmt: FormatTag
        The format to resolve. Must be registered.
    """
    entry = entry_for(fmt)
    return getattr(import_module(entry.module), entry.cls)()


def build_decoders(formats: Optional[Iterable[FormatTag | str]] = None) -> Dict[FormatTag, Decoder]:
    """Instantiate the enabled decoders.

    ``formats=None`` enables every available format. Formats that are requested
    but whose library is missing are left out, so they behave like an unknown
    extension rather than failing here.
    """
    wanted = available_formats() if formats is None else [FormatTag(f.lower() if isinstance(f, str) else f) for f in formats]
    decoders: Dict[FormatTag, Decoder] = {}
    for fmt in wanted:
        if fmt is FormatTag.UNKNOWN:
            raise ValueError("FormatTag.UNKNOWN cannot be enabled")
        if not is_format_available(fmt):
            logger.debug("Format %s disabled: %s is not installed", fmt.value, entry_for(fmt).distribution)
            continue
        decoders[fmt] = get_decoder(fmt)
    return decoders


__all__ = [
    "DEFAULT_FORMAT",
    "Decoder",
    "DecoderEntry",
    "available_formats",
    "build_decoders",
    "get_decoder",
    "is_format_available",
    "registered_formats",
    "entry_for",
]
