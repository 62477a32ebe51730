from datetime import datetime, timedelta, timezone

import pytest
from freezegun import freeze_time

from changelog_keeper.release_date import ParseReleaseDateError, ReleaseDate


@pytest.mark.parametrize("text", ["2023-03-05", "2014-05-31", "2024-02-29"])
def test_round_trip(text):
    assert str(ReleaseDate.parse(text)) == text


def test_parse_equals_constructor():
    assert ReleaseDate.parse("2019-02-15") == ReleaseDate("2019-02-15")


def test_impossible_date_rejected():
    with pytest.raises(ParseReleaseDateError) as excinfo:
        ReleaseDate.parse("9999-99-99")
    assert excinfo.value.value == "9999-99-99"


@pytest.mark.parametrize("text", ["2023-02-30", "2023-1-1", "Jan 1, 2023", "", "2023-01-01 "])
def test_invalid_dates(text):
    with pytest.raises(ParseReleaseDateError):
        ReleaseDate.parse(text)


def test_error_message():
    with pytest.raises(ValueError) as excinfo:
        ReleaseDate.parse("9999-99-99")
    assert str(excinfo.value).startswith(
        "Could not parse release date '9999-99-99' as YYYY-MM-DD.\nReason: "
    )


@freeze_time("2023-03-05 12:00:00")
def test_today_uses_current_date():
    assert ReleaseDate.today() == ReleaseDate("2023-03-05")


def test_from_naive_datetime():
    assert ReleaseDate.from_datetime(datetime(2023, 3, 5, 12)) == ReleaseDate("2023-03-05")


def test_from_aware_datetime_converts_to_utc():
    local = datetime(2023, 1, 1, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    assert str(ReleaseDate.from_datetime(local)) == "2023-01-02"