from __future__ import annotations

"""XML decoder; needs the optional ``xmltodict`` package.

Mapping rules:

* the root element stands for the whole document, its tag name is ignored;
* child elements and attributes map to fields by name;
* element text is the value (pydantic coerces ``"443"`` to ``int``);
* repeated elements become lists, and a lone element whose target field is a
  sequence is wrapped in a one-item list.
"""

import dataclasses
import types
import typing
from collections.abc import Sequence as AbcSequence, Set as AbcSet
from typing import Any, BinaryIO, FrozenSet, Set, Tuple
from xml.parsers.expat import ExpatError

from pydantic import BaseModel
from typing_extensions import is_typeddict

from config_file.enums import FormatTag
from config_file.errors import XmlError
from config_file.utils.lazy import xmltodict

from .base import Decoder

_Path = Tuple[str, ...]

_SEQUENCE_ORIGINS = (list, tuple, set, frozenset, AbcSequence, AbcSet)


def _fields(tp: Any) -> dict[str, Any]:
    """Field name -> annotation for models, dataclasses and TypedDicts."""
    if isinstance(tp, type) and issubclass(tp, BaseModel):
        return {(info.alias or name): info.annotation for name, info in tp.model_fields.items()}
    if dataclasses.is_dataclass(tp) and isinstance(tp, type):
        hints = typing.get_type_hints(tp)
        return {f.name: hints.get(f.name, Any) for f in dataclasses.fields(tp)}
    if is_typeddict(tp):
        return typing.get_type_hints(tp)
    return {}


def _members(tp: Any) -> list[Any]:
    """Strip ``Optional``/``Union``/``Annotated`` down to the concrete types."""
    origin = typing.get_origin(tp)
    if origin is typing.Annotated:
        return _members(typing.get_args(tp)[0])
    if origin is typing.Union or isinstance(tp, types.UnionType):
        out: list[Any] = []
        for arg in typing.get_args(tp):
            if arg is not type(None):
                out.extend(_members(arg))
        return out
    return [tp]


def sequence_paths(target: Any) -> FrozenSet[_Path]:
    """Return the element paths (below the root) whose target type is a sequence."""
    found: Set[_Path] = set()
    seen: Set[Any] = set()

    def walk(tp: Any, prefix: _Path) -> None:
        for member in _members(tp):
            origin = typing.get_origin(member)
            if origin in _SEQUENCE_ORIGINS:
                # items of a repeated element live under the same path
                found.add(prefix)
                for arg in typing.get_args(member):
                    if arg is not Ellipsis:
                        walk(arg, prefix)
                continue
            if origin is dict:
                continue
            try:
                if member in seen:
                    continue
                seen.add(member)
            except TypeError:
                continue
            for name, annotation in _fields(member).items():
                walk(annotation, prefix + (name,))
            seen.discard(member)

    walk(target, ())
    found.discard(())
    return frozenset(found)


class XmlDecoder(Decoder):
    format = FormatTag.XML
    error_cls = XmlError
    parse_errors = (ExpatError, ValueError)

    def parse(self, stream: BinaryIO, target: Any) -> Any:
        lists = sequence_paths(target)

        def force_list(path, key, value) -> bool:
            if not path:
                return False  # the root element itself
            names = tuple(name for name, _ in path[1:]) + (key,)
            return names in lists

        document = xmltodict.parse(stream, attr_prefix="", force_list=force_list)
        # a well-formed document has exactly one root element
        (root,) = document.values()
        return root
