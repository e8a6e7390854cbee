from __future__ import annotations

"""Settings schema using Pydantic for validation and type-safety."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from config_file.enums import FormatTag
from config_file.utils.logging_utils import parse_level

__all__ = [
    "LoaderCfg",
    "LoggingCfg",
    "CliCfg",
]


class LoaderCfg(BaseModel):
    # None enables every format whose library is installed; [] enables none
    formats: Optional[List[FormatTag]] = None

    @field_validator("formats", mode="before")
    def normalise_formats(cls, v):
        """Accept ``"yaml,json"`` as well as a list, in any case."""
        if isinstance(v, str):
            v = [part for part in v.split(",") if part.strip()]
        if isinstance(v, list):
            return [p.strip().lower() if isinstance(p, str) else p for p in v]
        return v

    @field_validator("formats")
    def reject_unknown(cls, v):
        if v and FormatTag.UNKNOWN in v:
            raise ValueError("'unknown' is not a format that can be enabled")
        return v


class LoggingCfg(BaseModel):
    level: str = "warning"
    suppress: list[str] = Field(default_factory=list)

    @field_validator("level")
    def known_level(cls, v: str) -> str:
        parse_level(v)
        return v.strip().lower()


class CliCfg(BaseModel):
    loader: LoaderCfg = Field(default_factory=LoaderCfg)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)
