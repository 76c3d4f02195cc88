import pytest

from thema.schema import Schema
from thema.version import sv
from thema.vmux.codec import Codec, JSONCodec, YAMLCodec, all_versions_string


class _Lineage:
    name = "multi"

    def __init__(self, versions):
        self.schemas = [Schema(v, {"a": "string"}, self) for v in versions]


def test_codec_is_abstract():
    with pytest.raises(TypeError):
        Codec()


def test_json_decode_values():
    codec = JSONCodec("test")
    assert codec.decode(b'{"before": "x", "unchanged": "y"}') == {
        "before": "x",
        "unchanged": "y",
    }


def test_json_encode_is_compact_and_ordered():
    codec = JSONCodec("test")
    out = codec.encode({"after": "renamedstr", "unchanged": "unchanged str val"})
    assert out == b'{"after":"renamedstr","unchanged":"unchanged str val"}'


def test_json_round_trip_normalizes():
    codec = JSONCodec("test")
    text = b'{\n\t"before": "",\n\t"unchanged": ""\n}'
    once = codec.encode(codec.decode(text))
    assert codec.encode(codec.decode(once)) == once
    assert codec.decode(once) == codec.decode(text)


def test_json_decode_error_mentions_path():
    codec = JSONCodec("input.json")
    with pytest.raises(ValueError, match="input.json"):
        codec.decode(b"{not json")


def test_yaml_round_trip():
    codec = YAMLCodec("test")
    data = {"after": "renamedstr", "unchanged": "unchanged str val", "n": 3}
    assert codec.decode(codec.encode(data)) == data


def test_yaml_decodes_json_text():
    codec = YAMLCodec("test")
    assert codec.decode(b'{"before": "renamedstr"}') == {"before": "renamedstr"}


def test_yaml_decode_error_mentions_path():
    codec = YAMLCodec("input.yaml")
    with pytest.raises(ValueError, match="input.yaml"):
        codec.decode(b"a: [unclosed")


def test_all_versions_string_lists_every_version():
    lin = _Lineage([sv(0, 0), sv(0, 1), sv(1, 0)])
    assert all_versions_string(lin.schemas[2]) == "0.0, 0.1, 1.0"
    assert all_versions_string(lin.schemas[0]) == all_versions_string(lin.schemas[1])