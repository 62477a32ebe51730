"""A changelog in Keep a Changelog format and its rendering to markdown."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from changelog_keeper.change_group import ChangeGroup
from changelog_keeper.changes import Changes
from changelog_keeper.release import Release
from changelog_keeper.release_date import ReleaseDate
from changelog_keeper.release_link import ReleaseLink
from changelog_keeper.release_tag import ReleaseTag
from changelog_keeper.release_version import ReleaseVersion
from changelog_keeper.releases import Releases
from changelog_keeper.unreleased import Unreleased

CHANGELOG_HEADER = (
    "# Changelog\n"
    "\n"
    "All notable changes to this project will be documented in this file.\n"
    "\n"
    "The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.1.0/),\n"
    "and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html)."
)


class PromoteUnreleasedError(ValueError):
    """Raised when promoting unreleased changes to a version that already exists."""

    def __init__(self, version: ReleaseVersion) -> None:
        self.version = version
        super().__init__(
            f"Could not promote unreleased to release version {version} because it "
            "that version already exists in the changelog"
        )


@dataclass(frozen=True)
class PromoteOptions:
    """Details of the release that unreleased changes are promoted into."""

    version: ReleaseVersion
    date: ReleaseDate | None = None
    tag: ReleaseTag | None = None
    link: ReleaseLink | None = None

    def with_date(self, date: ReleaseDate) -> PromoteOptions:
        """A copy of these options with the given release date."""
        return replace(self, date=date)

    def with_tag(self, tag: ReleaseTag) -> PromoteOptions:
        """A copy of these options with the given release tag."""
        return replace(self, tag=tag)

    def with_link(self, link: ReleaseLink) -> PromoteOptions:
        """A copy of these options with the given release link."""
        return replace(self, link=link)


def _render_groups(changes: Iterable[tuple[ChangeGroup, list[str]]]) -> str:
    return "".join(
        f"\n\n### {group}\n\n" + "\n".join(f"- {item}" for item in items)
        for group, items in changes
    )


@dataclass
class Changelog:
    """A curated, chronologically ordered list of notable changes per version."""

    unreleased: Unreleased = field(default_factory=Unreleased)
    releases: Releases = field(default_factory=Releases)

    def promote_unreleased(self, options: PromoteOptions) -> None:
        """Move all unreleased changes into a new release at the top of the changelog.

        The date defaults to today's date when the options give none.
        """
        if self.releases.contains_version(options.version):
            raise PromoteUnreleasedError(options.version)

        new_release = Release(
            version=options.version,
            date=options.date if options.date is not None else ReleaseDate.today(),
            tag=options.tag,
            link=options.link,
            changes=Changes(list(self.unreleased.changes)),
        )
        self.unreleased.changes = Changes()

        ordered = {new_release.version: new_release}
        for version, release in self.releases:
            ordered[version] = release
        self.releases = Releases(ordered)

    def __str__(self) -> str:
        parts = [CHANGELOG_HEADER, "\n\n## [Unreleased]", _render_groups(self.unreleased.changes)]

        releases = [release for _, release in self.releases]
        for release in releases:
            parts.append(f"\n\n## [{release.version}] - {release.date}")
            if release.tag is not None:
                parts.append(f" [{release.tag}]")
            parts.append(_render_groups(release.changes))

        if self.unreleased.link is not None or any(r.link is not None for r in releases):
            parts.append("\n")

        if self.unreleased.link is not None:
            parts.append(f"\n[unreleased]: {self.unreleased.link}")

        parts.extend(
            f"\n[{release.version}]: {release.link}"
            for release in releases
            if release.link is not None
        )

        parts.append("\n")
        return "".join(parts)