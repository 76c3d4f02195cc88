"""Syntactic version numbers for schemas within a lineage."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

_UINT32_MAX = 2**32 - 1
_DIGITS = re.compile(r"[0-9]+")


class MalformedSyntacticVersionError(ValueError):
    """Raised when text cannot be parsed as a syntactic version."""


@dataclass(frozen=True, order=True)
class SyntacticVersion:
    """Position of a schema within a lineage: (sequence, schema index)."""

    major: int = 0
    minor: int = 0

    def __post_init__(self) -> None:
        for part in (self.major, self.minor):
            if isinstance(part, bool) or not isinstance(part, int):
                raise TypeError(
                    f"version components must be integers, got {part!r}"
                )
            if part < 0:
                raise ValueError(
                    f"version components must be non-negative, got {part}"
                )

    def less(self, other: SyntacticVersion) -> bool:
        """Report whether this version sorts before ``other``."""
        return self < other

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"

    def __iter__(self):
        yield self.major
        yield self.minor


def sv(major: int, minor: int) -> SyntacticVersion:
    """Create a :class:`SyntacticVersion`."""
    return SyntacticVersion(major, minor)


def _parse_component(text: str, part: str, what: str) -> int:
    if not _DIGITS.fullmatch(part):
        raise MalformedSyntacticVersionError(
            f'malformed syntactic version: "{text}" has invalid {what} number "{part}"'
        )
    value = int(part)
    if value > _UINT32_MAX:
        raise MalformedSyntacticVersionError(
            f'malformed syntactic version: "{text}" has invalid {what} number "{part}"'
        )
    return value


def parse_syntactic_version(text: str) -> SyntacticVersion:
    """Parse the canonical form of a syntactic version, e.g. ``"0.0"``."""
    parts = text.split(".")
    if len(parts) != 2:
        raise MalformedSyntacticVersionError(
            f'malformed syntactic version: "{text}"'
        )
    major = _parse_component(text, parts[0], "sequence")
    minor = _parse_component(text, parts[1], "schema")
    return SyntacticVersion(major, minor)


def format_versions(versions: Iterable[SyntacticVersion]) -> str:
    """Join versions into a comma separated string."""
    return ", ".join(str(v) for v in versions)