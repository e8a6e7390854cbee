from __future__ import annotations

"""JSON decoder."""

import json
from typing import Any, BinaryIO

from config_file.enums import FormatTag
from config_file.errors import JsonError

from .base import Decoder


class JsonDecoder(Decoder):
    format = FormatTag.JSON
    error_cls = JsonError
    # JSONDecodeError and UnicodeDecodeError are both ValueErrors
    parse_errors = (ValueError,)

    def parse(self, stream: BinaryIO, target: Any) -> Any:
        return json.load(stream)
