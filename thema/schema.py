"""Schemas within a lineage, and validation of data against them."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from thema.validate import (
    ErrorDetail,
    Kind,
    ValidationFailure,
    munge_validate_errors,
)
from thema.version import SyntacticVersion

_F32_MAX = 340282346638528859811704183484516925440
_F32_TEXT = "340282346638528859811704183484516925440"
_F64_TEXT = "1.797693134862315708145274237317043567981E+308"


def _int_range(low: int, high: int) -> tuple:
    return (Kind.INT, low, high, f"int & >={low} & <={high}")


_NAMED: dict[str, tuple] = {
    "string": (Kind.STRING, None, None, "string"),
    "bool": (Kind.BOOL, None, None, "bool"),
    "int": (Kind.INT, None, None, "int"),
    "float": (Kind.FLOAT, None, None, "float"),
    "number": (Kind.NUMBER, None, None, "number"),
    "bytes": (Kind.BYTES, None, None, "bytes"),
    "null": (Kind.NULL, None, None, "null"),
    "struct": (Kind.STRUCT, None, None, "struct"),
    "list": (Kind.LIST, None, None, "list"),
    "int8": _int_range(-128, 127),
    "int16": _int_range(-32768, 32767),
    "int32": _int_range(-2147483648, 2147483647),
    "int64": _int_range(-9223372036854775808, 9223372036854775807),
    "uint8": _int_range(0, 255),
    "uint16": _int_range(0, 65535),
    "uint32": _int_range(0, 4294967295),
    "uint64": _int_range(0, 18446744073709551615),
    "float32": (Kind.NUMBER, -_F32_MAX, _F32_MAX, f">=-{_F32_TEXT} & <={_F32_TEXT}"),
    "float64": (
        Kind.NUMBER,
        -sys.float_info.max,
        sys.float_info.max,
        f">=-{_F64_TEXT} & <={_F64_TEXT}",
    ),
}

_PY_TYPES = {
    str: "string",
    bool: "bool",
    int: "int",
    float: "float",
    bytes: "bytes",
    type(None): "null",
    dict: "struct",
    list: "list",
}


def _kind_of(value: Any) -> Kind:
    if value is None:
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (bytes, bytearray)):
        return Kind.BYTES
    if isinstance(value, Mapping):
        return Kind.STRUCT
    if isinstance(value, (list, tuple)):
        return Kind.LIST
    raise TypeError(f"unsupported data value {value!r}")


def _literal(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return repr(bytes(value))
    return json.dumps(value, default=str)


def _named(spec: Any) -> tuple:
    if isinstance(spec, str) and spec in _NAMED:
        return _NAMED[spec]
    if isinstance(spec, type) and spec in _PY_TYPES:
        return _NAMED[_PY_TYPES[spec]]
    raise TypeError(f"unsupported schema field specification {spec!r}")


def _type_string(spec: Any) -> str:
    if isinstance(spec, Mapping):
        return "struct"
    if isinstance(spec, tuple):
        return " | ".join(_literal(alt) for alt in spec)
    return _named(spec)[3]


class _Checker:
    def __init__(self, prefix: list[str], defaults: Mapping[str, Any]) -> None:
        self.prefix = prefix
        self.defaults = defaults
        self.details: list[ErrorDetail] = []

    def _add(self, message: str, args: tuple, path: list[str]) -> None:
        self.details.append(ErrorDetail(message, args, tuple(self.prefix + path)))

    def check(self, spec: Any, value: Any, path: list[str]) -> None:
        if isinstance(spec, Mapping):
            self._check_struct(spec, value, path)
        elif isinstance(spec, tuple):
            self._check_literals(spec, value, path)
        else:
            self._check_named(spec, value, path)

    def _conflict(self, schema_text: str, schema_kind: Kind, value: Any, path: list[str]) -> None:
        self._add(
            "conflicting values %v and %v (mismatched types %v and %v)",
            (schema_text, _literal(value), schema_kind, _kind_of(value)),
            path,
        )

    def _check_struct(self, spec: Mapping, value: Any, path: list[str]) -> None:
        if not isinstance(value, Mapping):
            self._conflict("struct", Kind.STRUCT, value, path)
            return
        known = set()
        for key, field_spec in spec.items():
            optional = key.endswith("?")
            name = key[:-1] if optional else key
            known.add(name)
            if name in value:
                self.check(field_spec, value[name], path + [name])
            elif not optional and ".".join(path + [name]) not in self.defaults:
                self._add("incomplete value %v", (_type_string(field_spec),), path + [name])
        for name, item in value.items():
            if str(name) not in known:
                self._add("field not allowed: %v", (_literal(item),), path + [str(name)])

    def _check_literals(self, spec: tuple, value: Any, path: list[str]) -> None:
        kind = _kind_of(value)
        if any(kind == _kind_of(alt) and value == alt for alt in spec):
            return
        allowed = Kind(0)
        for alt in spec:
            allowed |= _kind_of(alt)
        text = _type_string(spec)
        if kind & allowed:
            self._add("conflicting values %v and %v", (text, _literal(value)), path)
        else:
            self._conflict(text, allowed, value, path)

    def _check_named(self, spec: Any, value: Any, path: list[str]) -> None:
        kind, low, high, text = _named(spec)
        if not _kind_of(value) & kind:
            self._conflict(text, kind, value, path)
        elif low is not None and not low <= value <= high:
            self._add("conflicting values %v and %v", (text, _literal(value)), path)


@dataclass
class Instance:
    """Data that has been found valid against a schema."""

    raw: Any
    schema: "Schema"
    name: str = ""
    valid: bool = True


@dataclass(eq=False)
class Schema:
    """A single schema in a lineage.

    ``definition`` maps field names to specifications. A name ending in ``?``
    is optional. A specification is a type name (``"string"``, ``"int64"``,
    ``"uint8"``, ``"float32"`` ...), a Python type (``str``, ``int`` ...), a
    nested mapping for a closed struct, or a tuple of allowed literal values.
    ``defaults`` maps dotted field paths to default values; a required field
    with a default may be absent from data. ``lineage`` is any object with a
    ``name`` and a version-ordered ``schemas`` sequence that holds this schema.
    """

    version: SyntacticVersion
    definition: Mapping[str, Any]
    lineage: Any
    defaults: Mapping[str, Any] = field(default_factory=dict)
    example_data: Mapping[str, Any] = field(default_factory=dict)

    def _index(self) -> int:
        for i, schema in enumerate(self.lineage.schemas):
            if schema is self:
                return i
        raise ValueError(f"schema {self.version} is not part of its lineage")

    def validate(self, data: Any) -> Instance:
        """Check concrete data against the schema and wrap it in an Instance.

        Raises :class:`ValidationFailure` when the data is not valid.
        """
        checker = _Checker(["schemas", str(self._index()), "_#schema"], self.defaults)
        checker.check(self.definition, data, [])
        if checker.details:
            raise munge_validate_errors(checker.details, self)
        return Instance(raw=data, schema=self, name="", valid=True)

    def successor(self) -> Optional["Schema"]:
        """The next schema in the lineage, or None for the last one."""
        schemas = self.lineage.schemas
        if schemas[-1] is self:
            return None
        return schemas[self._index() + 1]

    def predecessor(self) -> Optional["Schema"]:
        """The previous schema in the lineage, or None for the first one."""
        if self.version == SyntacticVersion(0, 0):
            return None
        return self.lineage.schemas[self._index() - 1]

    def latest_in_major(self) -> "Schema":
        """The schema with the largest minor version in this major version."""
        latest = self
        for schema in self.lineage.schemas:
            if schema.version.major == self.version.major:
                latest = schema
        return latest

    def examples(self) -> dict[str, Instance]:
        """The named examples given for this schema."""
        return {
            name: Instance(raw=value, schema=self, name=name, valid=True)
            for name, value in self.example_data.items()
        }


__all__ = ["Instance", "Schema", "ValidationFailure"]