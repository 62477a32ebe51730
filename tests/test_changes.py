from changelog_keeper.change_group import ChangeGroup
from changelog_keeper.changes import Changes


def test_new_changes_are_empty():
    changes = Changes()
    assert changes.is_empty()
    assert len(changes) == 0
    assert list(changes) == []


def test_add_keeps_insertion_order():
    changes = Changes()
    changes.add(ChangeGroup.FIXED, "fix one")
    changes.add(ChangeGroup.DEPRECATED, "deprecate one")
    changes.add(ChangeGroup.FIXED, "fix two")
    assert list(changes) == [
        (ChangeGroup.FIXED, ["fix one", "fix two"]),
        (ChangeGroup.DEPRECATED, ["deprecate one"]),
    ]
    assert not changes.is_empty()
    assert len(changes) == 2


def test_group_with_no_entries_is_empty():
    changes = Changes([(ChangeGroup.ADDED, [])])
    assert changes.is_empty()
    assert len(changes) == 1


def test_built_from_mapping_and_pairs_alike():
    pairs = [(ChangeGroup.ADDED, ["a"]), (ChangeGroup.REMOVED, ["b"])]
    assert Changes(pairs) == Changes(dict(pairs))


def test_equality_ignores_group_order():
    first = Changes([(ChangeGroup.ADDED, ["a"]), (ChangeGroup.FIXED, ["b"])])
    second = Changes([(ChangeGroup.FIXED, ["b"]), (ChangeGroup.ADDED, ["a"])])
    assert first == second


def test_equality_respects_entry_order():
    first = Changes([(ChangeGroup.ADDED, ["a", "b"])])
    second = Changes([(ChangeGroup.ADDED, ["b", "a"])])
    assert not first == second


def test_copy_from_changes_is_independent():
    original = Changes([(ChangeGroup.ADDED, ["a"])])
    copy = Changes(original)
    copy.add(ChangeGroup.ADDED, "b")
    assert list(original) == [(ChangeGroup.ADDED, ["a"])]
    assert list(copy) == [(ChangeGroup.ADDED, ["a", "b"])]


def test_iteration_does_not_expose_internal_lists():
    changes = Changes([(ChangeGroup.ADDED, ["a"])])
    for _, items in changes:
        items.append("b")
    assert list(changes) == [(ChangeGroup.ADDED, ["a"])]