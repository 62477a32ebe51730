import pytest

from changelog_keeper.release_link import ParseReleaseLinkError, ReleaseLink


@pytest.mark.parametrize(
    "text",
    [
        "https://github.com/my-org/my-project/releases/v0.0.1",
        "https://github.com/olivierlacan/keep-a-changelog/compare/v1.1.1...HEAD",
        "https://example.com:8080/path?query=1#section",
        "mailto:someone@example.com",
        "http://[::1]:80/",
    ],
)
def test_round_trip(text):
    assert str(ReleaseLink.parse(text)) == text


def test_parse_equals_constructor():
    text = "https://example.com/releases"
    assert ReleaseLink.parse(text) == ReleaseLink(text)


@pytest.mark.parametrize(
    "text",
    [
        "not a uri",
        "",
        "/relative/path",
        "https://example.com/with space",
        "https://example.com:port/",
        "https://example.com/%zz",
        "https://example.com/#a#b",
    ],
)
def test_invalid_links(text):
    with pytest.raises(ParseReleaseLinkError) as excinfo:
        ReleaseLink.parse(text)
    assert excinfo.value.value == text


def test_error_message():
    with pytest.raises(ValueError) as excinfo:
        ReleaseLink.parse("not a uri")
    assert str(excinfo.value).startswith(
        "Could not parse release link 'not a uri' as a URI.\nReason: "
    )