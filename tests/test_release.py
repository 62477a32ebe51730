from changelog_keeper.change_group import ChangeGroup
from changelog_keeper.changes import Changes
from changelog_keeper.release import Release
from changelog_keeper.release_date import ReleaseDate
from changelog_keeper.release_link import ReleaseLink
from changelog_keeper.release_tag import ReleaseTag
from changelog_keeper.release_version import ReleaseVersion


def _release(**overrides):
    values = {
        "version": ReleaseVersion.parse("0.1.2"),
        "date": ReleaseDate.parse("2023-01-01"),
    }
    values.update(overrides)
    return Release(**values)


def test_defaults():
    release = _release()
    assert release.tag is None
    assert release.link is None
    assert release.changes.is_empty()


def test_equal_when_fields_equal():
    built = Changes()
    built.add(ChangeGroup.FIXED, "Fixed feature Y")
    from_pairs = Changes([(ChangeGroup.FIXED, ["Fixed feature Y"])])
    release = _release(changes=built)
    assert not release.changes.is_empty()
    assert release == _release(changes=from_pairs)


def test_differs_by_tag():
    assert not _release(tag=ReleaseTag.YANKED) == _release()


def test_differs_by_changes():
    assert not _release(changes=Changes([(ChangeGroup.ADDED, ["x"])])) == _release()


def test_fields_are_kept():
    link = ReleaseLink.parse("https://github.com/my-org/my-project/releases/v0.0.1")
    release = _release(tag=ReleaseTag.NO_CHANGES, link=link)
    assert str(release.version) == "0.1.2"
    assert str(release.date) == "2023-01-01"
    assert release.tag is ReleaseTag.NO_CHANGES
    assert release.link == link


def test_default_changes_not_shared():
    first = _release()
    second = _release()
    first.changes.add(ChangeGroup.ADDED, "only in first")
    assert second.changes.is_empty()