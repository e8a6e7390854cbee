from __future__ import annotations

"""Map a path's extension to a :class:`FormatTag`."""

import os
from pathlib import PurePath
from typing import Dict

from config_file.enums import FormatTag

__all__ = ["EXTENSIONS", "classify"]


EXTENSIONS: Dict[str, FormatTag] = {
    "toml": FormatTag.TOML,
    "json": FormatTag.JSON,
    "yaml": FormatTag.YAML,
    "yml": FormatTag.YAML,
    "xml": FormatTag.XML,
}


def classify(path: str | os.PathLike[str]) -> FormatTag:
    """Return the format tag for *path*; never touches the filesystem.

    ``.TOML`` and ``.toml`` are the same thing. A missing extension (including
    dot-files such as ``.toml``) gives ``FormatTag.UNKNOWN``.
    """
    suffix = PurePath(os.fspath(path)).suffix
    return EXTENSIONS.get(suffix[1:].lower(), FormatTag.UNKNOWN)
