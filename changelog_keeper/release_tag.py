"""Tags that mark a release as yanked or as carrying no changes."""

from __future__ import annotations

from enum import Enum


class ParseReleaseTagError(ValueError):
    """Raised when text does not name a known release tag."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Could not parse release tag '{value}'\nExpected: YANKED | NO CHANGES"
        )


class ReleaseTag(Enum):
    """Marks a release as yanked, or as a version bump without changes."""

    YANKED = "YANKED"
    """A yanked release."""
    NO_CHANGES = "NO CHANGES"
    """A release with no changes."""

    @classmethod
    def parse(cls, value: str) -> ReleaseTag:
        """Parse a release tag, ignoring case."""
        key = value.lower()
        for tag in cls:
            if tag.value.lower() == key:
                return tag
        raise ParseReleaseTagError(value)

    def __str__(self) -> str:
        return self.value