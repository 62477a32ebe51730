"""The changes that went into a release, grouped by kind."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from changelog_keeper.change_group import ChangeGroup


class Changes:
    """An ordered mapping of change groups to their entries."""

    def __init__(
        self,
        groups: Mapping[ChangeGroup, Iterable[str]]
        | Iterable[tuple[ChangeGroup, Iterable[str]]] = (),
    ) -> None:
        self._groups: dict[ChangeGroup, list[str]] = {
            group: list(items) for group, items in dict(groups).items()
        }

    def add(self, change_group: ChangeGroup, item: str) -> None:
        """Append an entry under the given change group."""
        self._groups.setdefault(change_group, []).append(str(item))

    def is_empty(self) -> bool:
        """True if no group holds any entry."""
        return all(not items for items in self._groups.values())

    def __iter__(self) -> Iterator[tuple[ChangeGroup, list[str]]]:
        for group, items in list(self._groups.items()):
            yield group, list(items)

    def __len__(self) -> int:
        return len(self._groups)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Changes):
            return NotImplemented
        return self._groups == other._groups

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Changes({self._groups!r})"