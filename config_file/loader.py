from __future__ import annotations

"""Load a configuration file into a typed value, picking the format by extension."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Type, TypeVar

from pydantic import TypeAdapter

from config_file.classify import classify
from config_file.decoders import Decoder, build_decoders
from config_file.enums import FormatTag
from config_file.errors import UnsupportedFormatError
from config_file.schema import LoaderCfg

__all__ = ["ConfigLoader", "FromConfigFile", "load"]

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Dispatches files to the decoders of the enabled formats.

    Holds no per-file state: the decoders are stateless and nothing read from
    disk is kept, so one loader can be shared between threads.
    """

    def __init__(self, formats: Optional[Iterable[FormatTag | str]] = None):
        self._decoders: Dict[FormatTag, Decoder] = build_decoders(formats)

    @classmethod
    def from_cfg(cls, cfg: LoaderCfg) -> "ConfigLoader":
        return cls(cfg.formats)

    @property
    def formats(self) -> list[FormatTag]:
        return list(self._decoders)

    def decoder_for(self, path: str | os.PathLike[str]) -> Decoder:
        fmt = classify(path)
        decoder = self._decoders.get(fmt)
        if decoder is None:
            raise UnsupportedFormatError(path, None if fmt is FormatTag.UNKNOWN else f"{fmt.value} is not enabled")
        return decoder

    def load(self, path: str | os.PathLike[str], target: Type[T]) -> T:
        """Decode the file at *path* into an instance of *target*.

        Raises:
            UnsupportedFormatError: extension unknown or its format disabled; no I/O happened.
            FileAccessError: the file could not be opened or read.
            ParseError: the contents are malformed or do not fit *target*
                (``TomlError``, ``JsonError``, ``YamlError`` or ``XmlError``).
        """
        decoder = self.decoder_for(path)
        return decoder.decode(Path(os.fspath(path)), target, TypeAdapter(target))


def load(path: str | os.PathLike[str], target: Type[T] = Dict[str, Any]) -> T:  # type: ignore[assignment]
    """Load *path* into *target* using every format that is installed."""
    return ConfigLoader().load(path, target)


class FromConfigFile:
    """Mixin adding ``from_config_file`` to pydantic models and dataclasses.

    Example::

        class Config(FromConfigFile, BaseModel):
            host: str

        cfg = Config.from_config_file("/etc/myconfig.toml")
    """

    @classmethod
    def from_config_file(cls: Type[T], path: str | os.PathLike[str]) -> T:
        return load(path, cls)
