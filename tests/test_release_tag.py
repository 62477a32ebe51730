import pytest

from changelog_keeper.release_tag import ParseReleaseTagError, ReleaseTag


@pytest.mark.parametrize("tag", list(ReleaseTag))
def test_round_trip_through_text(tag):
    assert ReleaseTag.parse(str(tag)) is tag


def test_display_names():
    assert str(ReleaseTag.parse("yanked")) == "YANKED"
    assert str(ReleaseTag.parse("no changes")) == "NO CHANGES"


def test_parse_ignores_case():
    assert ReleaseTag.parse("yanked") is ReleaseTag.YANKED
    assert ReleaseTag.parse("No Changes") is ReleaseTag.NO_CHANGES


def test_parse_does_not_trim():
    with pytest.raises(ParseReleaseTagError):
        ReleaseTag.parse(" YANKED")


def test_unknown_tag_raises():
    with pytest.raises(ParseReleaseTagError) as excinfo:
        ReleaseTag.parse("UNKNOWN TAG")
    assert excinfo.value.value == "UNKNOWN TAG"
    assert "Expected: YANKED | NO CHANGES" in str(excinfo.value)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        ReleaseTag.parse("")