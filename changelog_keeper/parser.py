"""Reading a changelog in Keep a Changelog format from markdown text."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass

from changelog_keeper.change_group import ChangeGroup, ParseChangeGroupError
from changelog_keeper.changelog import Changelog
from changelog_keeper.changes import Changes
from changelog_keeper.markdown import Block, BlockKind, parse_blocks
from changelog_keeper.release import Release
from changelog_keeper.release_date import ParseReleaseDateError, ReleaseDate
from changelog_keeper.release_link import ParseReleaseLinkError, ReleaseLink
from changelog_keeper.release_tag import ParseReleaseTagError, ReleaseTag
from changelog_keeper.release_version import ParseVersionError, ReleaseVersion
from changelog_keeper.releases import Releases
from changelog_keeper.unreleased import Unreleased

_UNRELEASED = "unreleased"
_UNRELEASED_HEADER = re.compile(r"\[?unreleased\]?", re.IGNORECASE)
_VERSIONED_RELEASE_HEADER = re.compile(
    r"\[?(?P<version>\d+\.\d+\.\d+)\]?\s+-\s+(?P<release_date>\d{4}-\d{2}-\d{2})"
    r"(?:\s+\[(?P<tag>.+)\])?"
)


class ParseChangelogError(ValueError):
    """Raised when text cannot be read as a changelog.

    ``heading`` holds the heading text that could not be read, and ``value``
    the part of it that was invalid, where there is one. The underlying
    error, if any, is chained as the cause.
    """

    def __init__(self, message: str, *, heading: str, value: str | None = None) -> None:
        self.heading = heading
        self.value = value
        super().__init__(message)


@dataclass(frozen=True)
class _VersionedHeader:
    version: ReleaseVersion
    date: ReleaseDate
    tag: ReleaseTag | None


def _parse_release_heading(heading: str) -> _VersionedHeader | None:
    """Read a release heading; None stands for the Unreleased section."""
    if _UNRELEASED_HEADER.fullmatch(heading):
        return None

    match = _VERSIONED_RELEASE_HEADER.fullmatch(heading)
    if match is None:
        raise ParseChangelogError(
            "Release header did not match the expected format\n"
            "Expected: [Unreleased] | [<version>] - <yyyy>-<mm>-<dd> | "
            "[<version>] - <yyyy>-<mm>-<dd> [<tag>]\n"
            f"Value: {heading}",
            heading=heading,
        )

    version_text = match.group("version")
    try:
        version = ReleaseVersion.parse(version_text)
    except ParseVersionError as exc:
        raise ParseChangelogError(
            f"Invalid version in release entry - {heading}\nValue: {version_text}\nError: {exc}",
            heading=heading,
            value=version_text,
        ) from exc

    date_text = match.group("release_date")
    try:
        date = ReleaseDate.parse(date_text)
    except ParseReleaseDateError as exc:
        raise ParseChangelogError(
            f"Invalid date in release entry - {heading}\nValue: {date_text}\nError: {exc}",
            heading=heading,
            value=date_text,
        ) from exc

    tag_text = match.group("tag")
    tag = None
    if tag_text is not None:
        try:
            tag = ReleaseTag.parse(tag_text)
        except ParseReleaseTagError as exc:
            raise ParseChangelogError(
                f"Invalid tag in release entry - {heading}\nValue: {tag_text}\nError: {exc}",
                heading=heading,
                value=tag_text,
            ) from exc

    return _VersionedHeader(version, date, tag)


def _parse_change_group(text: str) -> ChangeGroup:
    try:
        return ChangeGroup.parse(text)
    except ParseChangeGroupError as exc:
        raise ParseChangelogError(
            f"Could not parse change group type from changelog - {text}\nError: {exc}",
            heading=text,
        ) from exc


def _parse_link(identifier: str, url: str) -> tuple[ReleaseVersion | None, ReleaseLink] | None:
    """Read a link definition; the version is None for the Unreleased link."""
    if identifier.lower() == _UNRELEASED:
        version = None
    else:
        try:
            version = ReleaseVersion.parse(identifier)
        except ParseVersionError:
            return None
    try:
        return version, ReleaseLink.parse(url)
    except ParseReleaseLinkError:
        return None


def _is_heading(block: Block, depth: int) -> bool:
    return block.kind is BlockKind.HEADING and block.depth == depth


def _read_changes(pending: deque[Block]) -> Changes:
    changes = Changes()
    while pending and _is_heading(pending[0], 3):
        group = _parse_change_group(pending.popleft().text)
        while pending and pending[0].kind is BlockKind.LIST:
            for item in pending.popleft().items:
                changes.add(group, item.lstrip("-* ").rstrip())
    return changes


def parse_changelog(text: str) -> Changelog:
    """Read a changelog written in Keep a Changelog markdown."""
    pending = deque(parse_blocks(text))

    unreleased: Unreleased | None = None
    unreleased_link: ReleaseLink | None = None
    releases: dict[ReleaseVersion, Release] = {}
    release_links: dict[ReleaseVersion, ReleaseLink] = {}

    while pending:
        block = pending.popleft()
        if _is_heading(block, 2):
            header = _parse_release_heading(block.text)
            changes = _read_changes(pending)
            if header is None:
                unreleased = Unreleased(changes=changes)
            else:
                releases[header.version] = Release(
                    version=header.version,
                    date=header.date,
                    tag=header.tag,
                    changes=changes,
                )
        elif block.kind is BlockKind.DEFINITION:
            found = _parse_link(block.identifier, block.url)
            if found is not None:
                version, link = found
                if version is None:
                    unreleased_link = link
                else:
                    release_links[version] = link

    if unreleased is not None:
        unreleased.link = unreleased_link

    for version, link in release_links.items():
        release = releases.get(version)
        if release is not None:
            release.link = link

    return Changelog(
        unreleased=unreleased if unreleased is not None else Unreleased(),
        releases=Releases(releases),
    )