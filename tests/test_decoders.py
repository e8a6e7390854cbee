from typing import Dict, List, Optional, Set

import pytest
from pydantic import BaseModel, Field

from conftest import SampleConfig
from config_file import FormatTag, XmlError, load
from config_file.decoders import (
    DEFAULT_FORMAT,
    available_formats,
    build_decoders,
    get_decoder,
    is_format_available,
    registered_formats,
)
from config_file.decoders.base import Decoder
from config_file.decoders.xml import sequence_paths


def test_registry_covers_every_known_format():
    assert set(registered_formats()) == {FormatTag.TOML, FormatTag.JSON, FormatTag.YAML, FormatTag.XML}
    assert FormatTag.UNKNOWN not in registered_formats()


def test_default_format_always_available():
    assert DEFAULT_FORMAT is FormatTag.TOML
    assert is_format_available(FormatTag.TOML)
    assert is_format_available(FormatTag.JSON)
    assert FormatTag.TOML in available_formats()


@pytest.mark.parametrize("fmt", list(FormatTag)[:-1])
def test_get_decoder(fmt):
    decoder = get_decoder(fmt)
    assert isinstance(decoder, Decoder)
    assert decoder.format is fmt


def test_get_decoder_unknown():
    with pytest.raises(ValueError):
        get_decoder(FormatTag.UNKNOWN)


def test_build_decoders_accepts_strings():
    decoders = build_decoders(["json", "TOML"])
    assert list(decoders) == [FormatTag.JSON, FormatTag.TOML]


def test_build_decoders_rejects_unknown():
    with pytest.raises(ValueError):
        build_decoders([FormatTag.UNKNOWN])
    with pytest.raises(ValueError):
        build_decoders(["ini"])


def test_requested_but_missing_library_is_skipped(monkeypatch):
    monkeypatch.setattr("config_file.decoders.is_available", lambda name: False)
    assert list(build_decoders(["yaml", "xml", "toml"])) == [FormatTag.TOML]


# --- XML mapping ---------------------------------------------------------


class Server(BaseModel):
    name: str
    ports: List[int]


class Cluster(BaseModel):
    name: str
    servers: List[Server]
    labels: Optional[List[str]] = None
    owners: Set[str] = Field(default_factory=set, alias="owner")
    extra: Dict[str, str] = Field(default_factory=dict)


def test_sequence_paths_flat():
    assert sequence_paths(SampleConfig) == {("tags",)}


def test_sequence_paths_nested():
    assert sequence_paths(Cluster) == {("servers",), ("servers", "ports"), ("labels",), ("owner",)}


def test_sequence_paths_untyped_target():
    assert sequence_paths(dict) == frozenset()


@pytest.fixture
def xml_doc(write):
    pytest.importorskip("xmltodict")
    return write


def test_xml_single_element_becomes_list(xml_doc):
    path = xml_doc(
        "one.xml",
        "<config><host>h</host><port>1</port><tags>only</tags><inner><answer>7</answer></inner></config>",
    )
    cfg = load(path, SampleConfig)
    assert cfg.tags == ["only"]
    assert cfg.inner.answer == 7


def test_xml_attributes_map_to_fields(xml_doc):
    path = xml_doc(
        "attrs.xml",
        '<config host="example.com" port="443"><tags>example</tags><tags>test</tags>'
        '<inner answer="42"/></config>',
    )
    assert load(path, SampleConfig) == SampleConfig.example()


def test_xml_root_name_is_ignored(xml_doc, testdata):
    content = (testdata / "config.xml").read_text().replace("config>", "settings>")
    path = xml_doc("renamed.xml", content)
    assert load(path, SampleConfig) == SampleConfig.example()


def test_xml_nested_lists(xml_doc):
    path = xml_doc(
        "cluster.xml",
        """
        <cluster>
          <name>prod</name>
          <servers><name>a</name><ports>80</ports></servers>
          <servers><name>b</name><ports>80</ports><ports>443</ports></servers>
          <owner>ops</owner>
        </cluster>
        """,
    )
    cluster = load(path, Cluster)
    assert [s.name for s in cluster.servers] == ["a", "b"]
    assert cluster.servers[0].ports == [80]
    assert cluster.servers[1].ports == [80, 443]
    assert cluster.owners == {"ops"}
    assert cluster.labels is None


def test_xml_untyped_target(xml_doc, testdata):
    data = load(testdata / "config.xml", dict)
    assert data["tags"] == ["example", "test"]
    assert data["inner"] == {"answer": "42"}


def test_xml_value_does_not_fit(xml_doc):
    path = xml_doc(
        "bad.xml",
        "<config><host>h</host><port>https</port><tags>a</tags><inner><answer>1</answer></inner></config>",
    )
    with pytest.raises(XmlError):
        load(path, SampleConfig)


def test_default_format_needs_no_library(monkeypatch):
    from config_file.decoders import _DECODER_REGISTRY, DecoderEntry

    missing = DecoderEntry("config_file.decoders.json", "JsonDecoder", "lib_that_is_not_installed", "nothing")
    monkeypatch.setitem(_DECODER_REGISTRY, FormatTag.TOML, missing._replace(module="config_file.decoders.toml", cls="TomlDecoder"))
    monkeypatch.setitem(_DECODER_REGISTRY, FormatTag.JSON, missing)
    assert is_format_available(DEFAULT_FORMAT)
    assert not is_format_available(FormatTag.JSON)
    decoders = build_decoders()
    assert FormatTag.TOML in decoders
    assert FormatTag.JSON not in decoders
