"""Readable validation errors built from raw validation findings."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence


class ValidationCode(enum.Enum):
    """Category of a validation failure."""

    MISSING_FIELD = "missing_field"
    EXCESS_FIELD = "excess_field"
    KIND_CONFLICT = "kind_conflict"
    OUT_OF_BOUNDS = "out_of_bounds"


class Kind(enum.Flag):
    """Kinds of concrete values; members combine with ``|``."""

    NULL = 1
    BOOL = 2
    INT = 4
    FLOAT = 8
    STRING = 16
    BYTES = 32
    STRUCT = 64
    LIST = 128
    NUMBER = 12


class InvalidDataError(ValueError):
    """Raised when data is not a valid instance of a schema."""


@dataclass(frozen=True)
class Position:
    """A location in a source file."""

    filename: str
    line: int = 0
    column: int = 0


@dataclass(frozen=True)
class ErrorDetail:
    """A single raw finding reported while validating data."""

    message: str
    args: tuple = ()
    path: tuple = ()
    positions: tuple = ()


@dataclass
class Coords:
    """Where a failure happened: a schema and a field path within it."""

    schema: Any
    fieldpath: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        name = self.schema.lineage.name
        return f"<{name}@v{self.schema.version}>.{'.'.join(self.fieldpath)}"


def _format_positions(positions: Iterable[Position]) -> str:
    return "".join(
        f"\n\t\t{pos.filename}:{pos.line}:{pos.column}" for pos in positions
    )


class OneSidedError(InvalidDataError):
    """A field present on only one side: in the schema or in the data."""

    def __init__(
        self,
        coords: Coords,
        code: ValidationCode,
        value: str,
        schema_positions: Sequence[Position] = (),
        data_positions: Sequence[Position] = (),
    ) -> None:
        super().__init__()
        self.coords = coords
        self.code = code
        self.value = value
        self.schema_positions = list(schema_positions)
        self.data_positions = list(data_positions)

    def __str__(self) -> str:
        text = f"{self.coords}: validation failed, data is not an instance:"
        if self.code is ValidationCode.MISSING_FIELD:
            text += f"\n\tschema specifies that field exists with type `{self.value}`"
            text += _format_positions(self.schema_positions)
            text += "\n\tbut field was absent from data"
            text += _format_positions(self.data_positions)
        elif self.code is ValidationCode.EXCESS_FIELD:
            text += "\n\tschema is closed and does not specify field"
            text += _format_positions(self.schema_positions)
            text += f"\n\tbut field exists in data with value `{self.value}`"
            text += _format_positions(self.data_positions)
        return text


class TwoSidedError(InvalidDataError):
    """A value in the data that conflicts with what the schema expects."""

    def __init__(
        self,
        coords: Coords,
        code: ValidationCode,
        schema_value: str,
        data_value: str,
        schema_positions: Sequence[Position] = (),
        data_positions: Sequence[Position] = (),
    ) -> None:
        super().__init__()
        self.coords = coords
        self.code = code
        self.schema_value = schema_value
        self.data_value = data_value
        self.schema_positions = list(schema_positions)
        self.data_positions = list(data_positions)

    def __str__(self) -> str:
        text = (
            f"{self.coords}: validation failed, data is not an instance:"
            f"\n\tschema expected `{self.schema_value}`"
        )
        text += _format_positions(self.schema_positions)
        text += f"\n\tbut data contained `{self.data_value}`"
        text += _format_positions(self.data_positions)
        return text


class ValidationFailure(InvalidDataError):
    """A collection of validation errors."""

    def __init__(self, errors: Iterable[InvalidDataError] = ()) -> None:
        super().__init__()
        self.errors = list(errors)

    def __str__(self) -> str:
        return "".join(f"{error}\n" for error in self.errors)


_TYPE_NAMES = {
    "int & >=0 & <=255": "uint8",
    "int & >=0 & <=65535": "uint16",
    "int & >=0 & <=4294967295": "uint32",
    "int & >=0 & <=18446744073709551615": "uint64",
    ">=0 & <=255 & int": "uint8",
    ">=0 & <=65535 & int": "uint16",
    ">=0 & <=4294967295 & int": "uint32",
    ">=0 & <=18446744073709551615 & int": "uint64",
    "int & >=-128 & <=127": "int8",
    ">=-128 & <=127 & int": "int8",
    "int & >=-32768 & <=32767": "int16",
    ">=-32768 & <=32767 & int": "int16",
    "int & >=-2147483648 & <=2147483647": "int32",
    ">=-2147483648 & <=2147483647 & int": "int32",
    "int & >=-9223372036854775808 & <=9223372036854775807": "int64",
    ">=-9223372036854775808 & <=9223372036854775807 & int": "int64",
    ">=-340282346638528859811704183484516925440 & <=340282346638528859811704183484516925440": "float32",
    ">=-1.797693134862315708145274237317043567981E+308 & <=1.797693134862315708145274237317043567981E+308": "float64",
}


def human_readable_type(value: str) -> str:
    """Replace known numeric constraint spellings with their type names."""
    return " | ".join(_TYPE_NAMES.get(part, part) for part in value.split(" | "))


def split_positions(
    positions: Iterable[Position],
) -> tuple[list[Position], list[Position]]:
    """Separate schema positions (``.cue`` files) from data positions."""
    schema_positions: list[Position] = []
    data_positions: list[Position] = []
    for pos in positions:
        if pos.filename.endswith(".cue"):
            schema_positions.append(pos)
        else:
            data_positions.append(pos)
    return schema_positions, data_positions


def trim_thema_path(parts: Sequence[str]) -> list[str]:
    """Strip the lineage structure from a path, leaving the field path."""
    parts = list(parts)
    for i, part in enumerate(parts):
        if part == "schemas":
            return parts[i + 3:]
    return parts[1:]


def _data_first(positions: Sequence[Position]) -> bool:
    return len(positions) > 1 and not positions[0].filename.endswith(".cue")


def munge_validate_errors(
    details: Iterable[ErrorDetail], schema: Any
) -> ValidationFailure:
    """Turn raw findings into a :class:`ValidationFailure`.

    Findings of a shape that is not recognised are dropped.
    """
    errors: list[InvalidDataError] = []
    for detail in details:
        positions = list(detail.positions)
        schema_positions, data_positions = split_positions(positions)
        coords = Coords(schema, trim_thema_path(detail.path))
        args = detail.args

        if len(args) == 1:
            (value,) = args
            if not isinstance(value, str):
                continue
            if "incomplete" in detail.message:
                code = ValidationCode.MISSING_FIELD
            elif "not allowed" in detail.message:
                code = ValidationCode.EXCESS_FIELD
            else:
                continue
            errors.append(
                OneSidedError(
                    coords,
                    code,
                    human_readable_type(value),
                    schema_positions,
                    data_positions,
                )
            )
        elif len(args) == 2:
            if _data_first(positions):
                data_value, schema_value = args
            else:
                schema_value, data_value = args
            if not isinstance(schema_value, str) or not isinstance(data_value, str):
                continue
            errors.append(
                TwoSidedError(
                    coords,
                    ValidationCode.OUT_OF_BOUNDS,
                    human_readable_type(schema_value),
                    data_value,
                    schema_positions,
                    data_positions,
                )
            )
        elif len(args) == 4:
            if _data_first(positions):
                data_value, schema_value, data_kind, schema_kind = args
            else:
                schema_value, data_value, schema_kind, data_kind = args
            if not (
                isinstance(schema_value, str)
                and isinstance(data_value, str)
                and isinstance(schema_kind, Kind)
                and isinstance(data_kind, Kind)
            ):
                continue
            code = (
                ValidationCode.OUT_OF_BOUNDS
                if data_kind & schema_kind
                else ValidationCode.KIND_CONFLICT
            )
            errors.append(
                TwoSidedError(
                    coords,
                    code,
                    human_readable_type(schema_value),
                    data_value,
                    schema_positions,
                    data_positions,
                )
            )
    return ValidationFailure(errors)