"""A single released version and its changes."""

from __future__ import annotations

from dataclasses import dataclass, field

from changelog_keeper.changes import Changes
from changelog_keeper.release_date import ReleaseDate
from changelog_keeper.release_link import ReleaseLink
from changelog_keeper.release_tag import ReleaseTag
from changelog_keeper.release_version import ReleaseVersion


@dataclass
class Release:
    """Version, date, optional tag and link, and the grouped changes of a release."""

    version: ReleaseVersion
    date: ReleaseDate
    tag: ReleaseTag | None = None
    link: ReleaseLink | None = None
    changes: Changes = field(default_factory=Changes)