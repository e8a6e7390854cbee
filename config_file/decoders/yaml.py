from __future__ import annotations

"""YAML decoder; needs the optional ``PyYAML`` package."""

from typing import Any, BinaryIO

from config_file.enums import FormatTag
from config_file.errors import YamlError
from config_file.utils.lazy import yaml

from .base import Decoder


class YamlDecoder(Decoder):
    format = FormatTag.YAML
    error_cls = YamlError

    @property
    def parse_errors(self):  # type: ignore[override]
        return (yaml.YAMLError,)

    def parse(self, stream: BinaryIO, target: Any) -> Any:
        # safe_load: plain data only, no arbitrary object construction
        return yaml.safe_load(stream)
