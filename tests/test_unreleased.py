from changelog_keeper.change_group import ChangeGroup
from changelog_keeper.changes import Changes
from changelog_keeper.release_link import ReleaseLink
from changelog_keeper.unreleased import Unreleased

FIX = "Fixed bug in feature X that would cause the machine to halt and catch fire."
DEPRECATION = "Feature Y will be removed from the next major release."


def test_default_is_empty():
    unreleased = Unreleased()
    assert unreleased.link is None
    assert unreleased.changes.is_empty()
    assert unreleased == Unreleased(changes=Changes())


def test_add_groups_entries_in_order():
    unreleased = Unreleased()
    unreleased.add(ChangeGroup.FIXED, FIX)
    unreleased.add(ChangeGroup.DEPRECATED, DEPRECATION)
    assert list(unreleased.changes) == [
        (ChangeGroup.FIXED, [FIX]),
        (ChangeGroup.DEPRECATED, [DEPRECATION]),
    ]


def test_link_kept():
    link = ReleaseLink.parse(
        "https://github.com/olivierlacan/keep-a-changelog/compare/v1.1.1...HEAD"
    )
    unreleased = Unreleased(link=link)
    assert unreleased.link == link
    assert not unreleased == Unreleased()


def test_default_changes_not_shared():
    first = Unreleased()
    second = Unreleased()
    first.add(ChangeGroup.ADDED, "only in first")
    assert second.changes.is_empty()
    assert not first.changes.is_empty()