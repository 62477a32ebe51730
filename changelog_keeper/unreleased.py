"""The section of upcoming, not yet released changes."""

from __future__ import annotations

from dataclasses import dataclass, field

from changelog_keeper.change_group import ChangeGroup
from changelog_keeper.changes import Changes
from changelog_keeper.release_link import ReleaseLink


@dataclass
class Unreleased:
    """Upcoming changes, with an optional link to them."""

    link: ReleaseLink | None = None
    changes: Changes = field(default_factory=Changes)

    def add(self, change_group: ChangeGroup, item: str) -> None:
        """Add an entry under the given change group."""
        self.changes.add(change_group, item)