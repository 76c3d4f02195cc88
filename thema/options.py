"""Bind-time options for lineages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from thema.version import SyntacticVersion

Mapper = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class ImperativeLens:
    """A lens transformation written as a Python callable.

    ``mapper`` receives the instance to translate and the target schema, and
    returns an instance of the target schema.
    """

    to: SyntacticVersion = field(default_factory=SyntacticVersion)
    from_: SyntacticVersion = field(default_factory=SyntacticVersion)
    mapper: Optional[Mapper] = None


@dataclass
class BindConfig:
    """Configuration collected from bind options."""

    skip_buggy_checks: bool = False
    imperative_lenses: list[ImperativeLens] = field(default_factory=list)


BindOption = Callable[[BindConfig], None]


def skip_buggy_checks(force_verify: bool = False) -> BindOption:
    """Option to skip validation checks with known bugs.

    When ``force_verify`` is true the option has no effect.
    """

    def apply(config: BindConfig) -> None:
        if not force_verify:
            config.skip_buggy_checks = True

    return apply


def imperative_lenses(*args: ImperativeLens) -> BindOption:
    """Option that adds the given lenses to the configuration."""
    lenses = list(args)

    def apply(config: BindConfig) -> None:
        config.imperative_lenses.extend(lenses)

    return apply


def build_config(*args: BindOption) -> BindConfig:
    """Apply options in order to a fresh configuration."""
    config = BindConfig()
    for option in args:
        option(config)
    return config