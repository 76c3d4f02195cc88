"""Version multiplexers: accept data at any schema version, yield one version.

The lineage of the target schema must offer ``translate(instance, version)``,
returning the translated instance and its lacunas.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from thema.schema import Instance
from thema.validate import InvalidDataError
from thema.vmux.codec import Codec, all_versions_string

UntypedMux = Callable[[Any], "tuple[Instance, Any]"]
ByteMux = Callable[[Any], "tuple[bytes, Any]"]


class NoMatchingVersionError(InvalidDataError):
    """Raised when data is valid against no schema in the lineage."""

    def __init__(self, versions: str, version: Any, error: Exception) -> None:
        super().__init__(
            f"data invalid against all versions ({versions}), "
            f"error against {version}: {error}"
        )
        self.versions = versions
        self.version = version
        self.error = error


def untyped_mux(schema: Any, decoder: Codec) -> UntypedMux:
    """Build a function mapping bytes at any version to an Instance of ``schema``.

    The function decodes its input, validates it against ``schema`` and, if
    that fails, against the other schemas from newest to oldest, translating
    the first match to ``schema``'s version. It returns ``(instance, lacunas)``.
    """
    versions = all_versions_string(schema)
    lineage = schema.lineage

    def mux(data: Any) -> tuple[Instance, Optional[Any]]:
        value = decoder.decode(data)
        try:
            return schema.validate(value), None
        except InvalidDataError as err:
            first_error = err

        candidate = lineage.schemas[-1]
        while candidate is not None:
            if candidate.version != schema.version:
                try:
                    inst = candidate.validate(value)
                except InvalidDataError:
                    pass
                else:
                    return lineage.translate(inst, schema.version)
            candidate = candidate.predecessor()

        raise NoMatchingVersionError(
            versions, schema.version, first_error
        ) from first_error

    return mux


def byte_mux(schema: Any, codec: Codec) -> ByteMux:
    """Build a function mapping bytes at any version to bytes at ``schema``'s version.

    It behaves like :func:`untyped_mux`, then encodes the resulting instance
    with ``codec``, returning ``(encoded, lacunas)``.
    """
    inner = untyped_mux(schema, codec)

    def mux(data: Any) -> tuple[bytes, Optional[Any]]:
        inst, lacunas = inner(data)
        return codec.encode(inst.raw), lacunas

    return mux