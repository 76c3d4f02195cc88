import pytest

from thema.version import (
    MalformedSyntacticVersionError,
    SyntacticVersion,
    format_versions,
    parse_syntactic_version,
    sv,
)


@pytest.mark.parametrize(
    "v1, v2, expected",
    [
        (sv(0, 0), sv(0, 0), False),
        (sv(0, 0), sv(0, 1), True),
        (sv(0, 0), sv(1, 0), True),
        (sv(0, 0), sv(1, 1), True),
        (sv(0, 1), sv(0, 0), False),
        (sv(0, 1), sv(1, 0), True),
        (sv(1, 0), sv(0, 0), False),
        (sv(1, 0), sv(0, 1), False),
        (sv(1, 2), sv(0, 1), False),
    ],
)
def test_less(v1, v2, expected):
    assert v1.less(v2) is expected
    assert (v1 < v2) is expected


def test_str():
    assert str(sv(0, 0)) == "0.0"
    assert str(sv(1, 2)) == "1.2"


def test_sv_equals_constructor():
    assert sv(3, 4) == SyntacticVersion(3, 4)
    assert tuple(sv(3, 4)) == (3, 4)


def test_sorting_matches_less():
    versions = [sv(1, 0), sv(0, 1), sv(2, 0), sv(0, 0), sv(1, 1)]
    assert sorted(versions) == [sv(0, 0), sv(0, 1), sv(1, 0), sv(1, 1), sv(2, 0)]


@pytest.mark.parametrize("text, expected", [("0.0", sv(0, 0)), ("1.2", sv(1, 2)), ("4294967295.0", sv(4294967295, 0))])
def test_parse(text, expected):
    assert parse_syntactic_version(text) == expected


@pytest.mark.parametrize("version", [sv(0, 0), sv(2, 7), sv(10, 3)])
def test_round_trip(version):
    assert parse_syntactic_version(str(version)) == version


@pytest.mark.parametrize(
    "text",
    ["", "1", "1.2.3", "a.0", "0.b", "-1.0", "+1.0", "1.", ".1", "4294967296.0", "0.4294967296", " 1.0"],
)
def test_parse_malformed(text):
    with pytest.raises(MalformedSyntacticVersionError):
        parse_syntactic_version(text)


def test_parse_error_names_component():
    with pytest.raises(MalformedSyntacticVersionError, match="sequence"):
        parse_syntactic_version("x.0")
    with pytest.raises(MalformedSyntacticVersionError, match="schema"):
        parse_syntactic_version("0.x")


def test_negative_component_rejected():
    with pytest.raises(ValueError):
        sv(-1, 0)


def test_format_versions():
    assert format_versions([sv(0, 0), sv(0, 1), sv(1, 0)]) == "0.0, 0.1, 1.0"
    assert format_versions([]) == ""