"""The kinds of change a release can group its entries under."""

from __future__ import annotations

from enum import Enum


class ParseChangeGroupError(ValueError):
    """Raised when text does not name a known change group."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Could not parse release tag '{value}'\n"
            "Expected: Added | Changed | Deprecated | Removed | Fixed | Security"
        )


class ChangeGroup(Enum):
    """Changes in a release are grouped into one of several types."""

    ADDED = "Added"
    """For new features."""
    CHANGED = "Changed"
    """For changes in existing functionality."""
    DEPRECATED = "Deprecated"
    """For soon-to-be removed features."""
    FIXED = "Fixed"
    """For any bug fixes."""
    REMOVED = "Removed"
    """For now removed features."""
    SECURITY = "Security"
    """In case of vulnerabilities."""

    @classmethod
    def parse(cls, value: str) -> ChangeGroup:
        """Parse a change group name, ignoring case and surrounding whitespace."""
        key = value.strip().lower()
        for group in cls:
            if group.value.lower() == key:
                return group
        raise ParseChangeGroupError(value)

    def __str__(self) -> str:
        return self.value