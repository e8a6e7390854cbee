from pathlib import Path
from typing import List

import pytest
from pydantic import BaseModel

TESTDATA = Path(__file__).parent / "testdata"


class SampleInner(BaseModel):
    answer: int


class SampleConfig(BaseModel):
    host: str
    port: int
    tags: List[str]
    inner: SampleInner

    @classmethod
    def example(cls) -> "SampleConfig":
        return cls(
            host="example.com",
            port=443,
            tags=["example", "test"],
            inner=SampleInner(answer=42),
        )


@pytest.fixture
def testdata() -> Path:
    return TESTDATA


@pytest.fixture
def write(tmp_path):
    """Write *content* to ``tmp_path/name`` and return the path."""

    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
