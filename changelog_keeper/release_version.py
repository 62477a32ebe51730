"""Release versions in Semantic Versioning format."""

from __future__ import annotations

from dataclasses import dataclass

import semver


class ParseVersionError(ValueError):
    """Raised when a version is not a valid semantic version."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Could not parse version '{value}' as semver.\nReason: {reason}")


def _semver_problem(value: str) -> str | None:
    if any(ch.isspace() for ch in value):
        return "unexpected whitespace in version"
    try:
        semver.Version.parse(value)
    except ValueError as exc:
        return str(exc)
    return None


@dataclass(frozen=True)
class ReleaseVersion:
    """The version of a release, kept as written."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("a release version must be given as a string")
        problem = _semver_problem(self.value)
        if problem is not None:
            raise ParseVersionError(self.value, problem)

    @classmethod
    def parse(cls, value: str) -> ReleaseVersion:
        """Parse a semantic version string."""
        return cls(value)

    def __str__(self) -> str:
        return self.value