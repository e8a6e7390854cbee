from __future__ import annotations

"""Abstract decoder shared by all formats."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, BinaryIO, ClassVar, Tuple, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from config_file.enums import FormatTag
from config_file.errors import FileAccessError, ParseError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Decoder(ABC):
    """Turn the contents of one file into an instance of a target type.

    Subclasses implement :meth:`parse`, which receives an open binary stream
    and returns plain Python data (dicts, lists, scalars). Binding that data to
    the caller's type is shared here and goes through a pydantic ``TypeAdapter``.
    """

    format: ClassVar[FormatTag]
    error_cls: ClassVar[Type[ParseError]]
    # exceptions of the underlying library that mean "bad document"
    parse_errors: ClassVar[Tuple[Type[BaseException], ...]] = ()

    @abstractmethod
    def parse(self, stream: BinaryIO, target: Any) -> Any:
        """Return the raw document read from *stream*.

        *target* is the type the document will be validated into. Most formats
        ignore it; XML uses it to decide which elements are sequences.
        """

    def open(self, path: Path) -> BinaryIO:
        try:
            return path.open("rb")
        except OSError as exc:
            raise FileAccessError(path, exc.strerror) from exc

    def read(self, path: Path, target: Any = Any) -> Any:
        """Return the raw document at *path*; the handle is closed on every exit."""
        with self.open(path) as stream:
            try:
                return self.parse(stream, target)
            except (*self.parse_errors, RecursionError) as exc:
                # deeply nested input exhausts the stack in the recursive parsers
                raise self.error_cls(path, str(exc).strip() or type(exc).__name__) from exc
            except OSError as exc:
                raise FileAccessError(path, exc.strerror) from exc

    def decode(self, path: Path, target: Type[T], adapter: TypeAdapter[T] | None = None) -> T:
        """Read *path* and validate the document into *target*."""
        adapter = adapter if adapter is not None else TypeAdapter(target)
        logger.debug("Decoding %s with %r", path, self)
        raw = self.read(path, target)
        try:
            return adapter.validate_python(raw)
        except ValidationError as exc:
            raise self.error_cls(path, f"{exc.error_count()} validation error(s)") from exc
        except RecursionError as exc:
            raise self.error_cls(path, "document nested too deeply") from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(format={self.format.value!r})"
