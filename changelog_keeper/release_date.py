"""Release dates in ISO 8601 (YYYY-MM-DD) form."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone

_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


class ParseReleaseDateError(ValueError):
    """Raised when a release date is not a valid YYYY-MM-DD date."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(
            f"Could not parse release date '{value}' as YYYY-MM-DD.\nReason: {reason}"
        )


def _date_problem(value: str) -> str | None:
    match = _DATE_PATTERN.fullmatch(value)
    if match is None:
        return "input does not match the YYYY-MM-DD format"
    year, month, day = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError as exc:
        return str(exc)
    return None


@dataclass(frozen=True)
class ReleaseDate:
    """The date a release was made, kept as written."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("a release date must be given as a string")
        problem = _date_problem(self.value)
        if problem is not None:
            raise ParseReleaseDateError(self.value, problem)

    @classmethod
    def parse(cls, value: str) -> ReleaseDate:
        """Parse a YYYY-MM-DD date."""
        return cls(value)

    @classmethod
    def today(cls) -> ReleaseDate:
        """The current date in UTC."""
        return cls.from_datetime(datetime.now(timezone.utc))

    @classmethod
    def from_datetime(cls, value: datetime) -> ReleaseDate:
        """The UTC date of a datetime; a naive datetime is taken to be UTC."""
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return cls(f"{value.year:04d}-{value.month:02d}-{value.day:02d}")

    def __str__(self) -> str:
        return self.value