from thema.options import (
    BindConfig,
    ImperativeLens,
    build_config,
    imperative_lenses,
    skip_buggy_checks,
)
from thema.version import sv


def _identity(inst, to):
    return inst


def test_default_config():
    config = build_config()
    assert config == BindConfig()
    assert config.skip_buggy_checks is False
    assert config.imperative_lenses == []


def test_skip_buggy_checks_sets_flag():
    assert build_config(skip_buggy_checks(False)).skip_buggy_checks is True


def test_force_verify_overrides_skip():
    assert build_config(skip_buggy_checks(True)).skip_buggy_checks is False


def test_imperative_lenses_preserve_order():
    forward = ImperativeLens(to=sv(1, 0), from_=sv(0, 0), mapper=_identity)
    backward = ImperativeLens(to=sv(0, 0), from_=sv(1, 0), mapper=_identity)
    config = build_config(imperative_lenses(forward, backward))
    assert config.imperative_lenses == [forward, backward]


def test_imperative_lenses_accumulate_across_options():
    first = ImperativeLens(to=sv(1, 0), from_=sv(0, 0), mapper=_identity)
    second = ImperativeLens(to=sv(0, 0), from_=sv(1, 0), mapper=_identity)
    config = build_config(imperative_lenses(first), skip_buggy_checks(False), imperative_lenses(second))
    assert config.imperative_lenses == [first, second]
    assert config.skip_buggy_checks is True


def test_configs_are_independent():
    lens = ImperativeLens(to=sv(1, 0), from_=sv(0, 0), mapper=_identity)
    option = imperative_lenses(lens)
    one = build_config(option)
    two = build_config(option)
    assert one.imperative_lenses == [lens]
    assert two.imperative_lenses == [lens]
    assert one.imperative_lenses is not two.imperative_lenses


def test_lens_default_versions_are_equal():
    lens = ImperativeLens()
    assert lens.to == lens.from_ == sv(0, 0)
    assert lens.mapper is None


def test_lens_mapper_is_called():
    lens = ImperativeLens(to=sv(0, 0), from_=sv(0, 1), mapper=lambda inst, to: (inst, to))
    assert lens.mapper("data", "schema") == ("data", "schema")