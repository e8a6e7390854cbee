from __future__ import annotations

"""TOML decoder (default format, always available)."""

from typing import Any, BinaryIO

import toml

from config_file.enums import FormatTag
from config_file.errors import FileAccessError, TomlError

from .base import Decoder


class TomlDecoder(Decoder):
    """Reads the whole file as UTF-8 text first; ``toml`` parses strings, not streams."""

    format = FormatTag.TOML
    error_cls = TomlError
    parse_errors = (toml.TomlDecodeError, IndexError, TypeError, ValueError)

    def parse(self, stream: BinaryIO, target: Any) -> Any:
        try:
            text = stream.read().decode("utf-8")
        except UnicodeDecodeError as exc:
            # not text at all: a read failure, not a TOML one
            raise FileAccessError(getattr(stream, "name", None), str(exc)) from exc
        return toml.loads(text)
