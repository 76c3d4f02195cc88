"""Codecs that turn raw bytes into data ready for schema validation and back.

Version multiplexing takes bytes expected to hold an object described by some
lineage, then decodes, validates and translates them to a single schema
version. The codecs here handle the decoding and encoding steps.
"""

from __future__ import annotations

import abc
import json
from typing import Any, Union

import yaml

from thema.version import format_versions

Data = Union[bytes, bytearray, str]


class Codec(abc.ABC):
    """Decodes bytes in some format into plain data, and encodes data back.

    It is customary, but not necessary, that the input and output formats
    are the same.
    """

    @abc.abstractmethod
    def decode(self, data: Data) -> Any:
        """Decode ``data`` into plain Python values."""

    @abc.abstractmethod
    def encode(self, value: Any) -> bytes:
        """Encode plain Python values into bytes."""


class JSONCodec(Codec):
    """Decodes from and encodes to JSON.

    ``path`` names the source of each input; it only shows up in error
    messages.
    """

    def __init__(self, path: str) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"JSONCodec({self.path!r})"

    def decode(self, data: Data) -> Any:
        try:
            return json.loads(data)
        except ValueError as exc:
            raise ValueError(f"{self.path}: {exc}") from exc

    def encode(self, value: Any) -> bytes:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False).encode(
            "utf-8"
        )


class YAMLCodec(Codec):
    """Decodes from and encodes to YAML.

    ``path`` names the source of each input; it only shows up in error
    messages.
    """

    def __init__(self, path: str) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"YAMLCodec({self.path!r})"

    def decode(self, data: Data) -> Any:
        try:
            return yaml.safe_load(data)
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise ValueError(f"{self.path}: {exc}") from exc

    def encode(self, value: Any) -> bytes:
        return yaml.safe_dump(value, sort_keys=False, allow_unicode=True).encode(
            "utf-8"
        )


def all_versions_string(schema: Any) -> str:
    """List every version in the schema's lineage, oldest first."""

    def walk():
        current = schema.lineage.schemas[0]
        while current is not None:
            yield current.version
            current = current.successor()

    return format_versions(walk())