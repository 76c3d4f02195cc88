# thema

A small library for versioned schemas: two-part version numbers, schemas
that validate plain Python data, validation errors that say which field went
wrong and why, and "version multiplexing" that accepts input written against
any schema version and hands it back at one chosen version.

## Versions (`thema.version`)

Every schema carries a `SyntacticVersion(major, minor)`.

```python
from thema.version import sv, parse_syntactic_version, format_versions

v = sv(1, 0)
assert str(v) == "1.0"
assert parse_syntactic_version("0.3").less(v)
assert format_versions([sv(0, 0), sv(1, 0)]) == "0.0, 1.0"
```

Versions are frozen, ordered first by major and then by minor number, and
reject negative or non-integer components. `parse_syntactic_version` raises
`MalformedSyntacticVersionError` (a `ValueError`) for text that is not two
dot-separated decimal numbers, each no larger than 4294967295.

## Schemas (`thema.schema`)

A `Schema` is built from a version, a field definition and the lineage it
belongs to. The lineage is any object with a `name` and a `schemas` sequence
holding its schemas in version order; this package does not supply one.

```python
from dataclasses import dataclass, field
from thema.schema import Schema
from thema.version import sv

@dataclass
class Lineage:
    name: str
    schemas: list = field(default_factory=list)

lin = Lineage("person")
v0 = Schema(
    sv(0, 0),
    {"name": "string", "age?": "uint8", "role": ("admin", "user")},
    lin,
    defaults={"role": "user"},
    example_data={"simple": {"name": "Ada", "role": "admin"}},
)
lin.schemas.append(v0)

instance = v0.validate({"name": "Ada"})
```

In a definition:

- a key ending in `?` marks an optional field;
- a value is a type name (`"string"`, `"bool"`, `"int"`, `"float"`,
  `"number"`, `"bytes"`, `"null"`, `"struct"`, `"list"`, the bounded
  `"int8"` … `"int64"`, `"uint8"` … `"uint64"`, `"float32"`, `"float64"`),
  a Python type (`str`, `int`, `dict` …), a nested mapping for a closed
  struct, or a tuple of allowed literal values;
- a required field whose dotted path appears in `defaults` may be absent.

Structs are closed: fields in the data that the definition does not name are
errors.

`Schema` also offers `successor()` and `predecessor()` (each `None` at the
end of the lineage), `latest_in_major()` and `examples()`, which returns a
`dict` of named `Instance` objects built from `example_data`. An `Instance`
holds `raw`, `schema`, `name` and `valid`.

## Validation errors (`thema.validate`)

`Schema.validate` raises `ValidationFailure` when data does not fit. Its
`errors` list holds:

- `OneSidedError` — a required field is missing (`ValidationCode.MISSING_FIELD`)
  or the data has a field the schema does not allow (`ValidationCode.EXCESS_FIELD`);
- `TwoSidedError` — a value of the wrong kind (`ValidationCode.KIND_CONFLICT`)
  or of the right kind but outside what is allowed (`ValidationCode.OUT_OF_BOUNDS`).

All of them are `InvalidDataError`, itself a `ValueError`. Messages name the
place as `<lineage@vX.Y>.field.path`; for example `v0.validate({"name": 1})`
reports

```
<person@v0.0>.name: validation failed, data is not an instance:
	schema expected `string`
	but data contained `1`
```

Bounded numeric constraints are shown by their type names (`int32`, `uint8`,
`float64` …) through `human_readable_type`. The lower-level helpers
`split_positions`, `trim_thema_path` and `munge_validate_errors` turn raw
`ErrorDetail` findings (with `Position`s and `Kind` flags) into these errors.

## Bind options (`thema.options`)

`skip_buggy_checks(force_verify)` and `imperative_lenses(*lenses)` return
option callables; `build_config(*options)` applies them in order to a fresh
`BindConfig` (`skip_buggy_checks`, `imperative_lenses`). An `ImperativeLens`
records `to`, `from_` and a `mapper(instance, target_schema)` callable.
These only collect configuration; nothing in the package consumes it.

## Version multiplexing (`thema.vmux`)

```python
from thema.vmux.codec import JSONCodec
from thema.vmux.mux import untyped_mux, byte_mux

mux = untyped_mux(target_schema, JSONCodec("input.json"))
instance, lacunas = mux(raw_bytes)

to_bytes = byte_mux(target_schema, JSONCodec("input.json"))
output, lacunas = to_bytes(raw_bytes)
```

A mux decodes its input and validates it against the target schema; on
success it returns the instance and `None`. Otherwise it tries the other
schemas from newest to oldest and passes the first match to
`lineage.translate(instance, target_version)`, returning what that gives
back. If no schema accepts the data it raises `NoMatchingVersionError`,
whose message lists every version in the lineage and the error from the
target schema. Decoding failures surface as `ValueError` naming the codec's
path.

`JSONCodec` writes compact JSON; `YAMLCodec` writes YAML keeping key order.
Both take a `path` used only in error messages. `all_versions_string(schema)`
lists a lineage's versions, oldest first.

## What this package does not do

There is no lineage type, no loading of schema declarations from files, and
no translation between versions: translating is left to the lineage object
you supply (its `translate` method). There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```