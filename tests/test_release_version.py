import pytest

from changelog_keeper.release_version import ParseVersionError, ReleaseVersion


@pytest.mark.parametrize("text", ["1.1.1", "0.0.1", "1.2.3-alpha.1+build.5"])
def test_round_trip(text):
    assert str(ReleaseVersion.parse(text)) == text


def test_parse_equals_constructor():
    assert ReleaseVersion.parse("1.0.0") == ReleaseVersion("1.0.0")


def test_usable_as_key():
    table = {ReleaseVersion.parse("1.1.0"): "release"}
    assert table[ReleaseVersion.parse("1.1.0")] == "release"
    assert ReleaseVersion.parse("1.1.1") not in table


def test_leading_zeros_rejected():
    with pytest.raises(ParseVersionError) as excinfo:
        ReleaseVersion.parse("00.01.02")
    assert excinfo.value.value == "00.01.02"


@pytest.mark.parametrize("text", ["a.b.c", "1.2", "", " 1.2.3", "1.2.3\n"])
def test_invalid_versions(text):
    with pytest.raises(ParseVersionError):
        ReleaseVersion.parse(text)


def test_error_message():
    with pytest.raises(ValueError) as excinfo:
        ReleaseVersion.parse("a.b.c")
    assert str(excinfo.value).startswith("Could not parse version 'a.b.c' as semver.\nReason: ")