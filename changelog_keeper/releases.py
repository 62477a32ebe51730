"""The ordered list of releases in a changelog."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from changelog_keeper.release import Release
from changelog_keeper.release_version import ReleaseVersion


class Releases:
    """Releases keyed by version, newest first as written."""

    def __init__(
        self,
        releases: Mapping[ReleaseVersion, Release]
        | Iterable[tuple[ReleaseVersion, Release]] = (),
    ) -> None:
        self._releases: dict[ReleaseVersion, Release] = dict(releases)

    def get_version(self, version: ReleaseVersion) -> Release | None:
        """The release with the given version, or None."""
        return self._releases.get(version)

    def contains_version(self, version: ReleaseVersion) -> bool:
        """True if a release with the given version exists."""
        return version in self._releases

    def __iter__(self) -> Iterator[tuple[ReleaseVersion, Release]]:
        yield from list(self._releases.items())

    def __len__(self) -> int:
        return len(self._releases)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Releases):
            return NotImplemented
        return self._releases == other._releases

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Releases({self._releases!r})"