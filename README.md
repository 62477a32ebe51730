# changelog_keeper

Read, modify and write changelog files in the Keep a Changelog format.

A changelog is read into a `Changelog` that holds an `Unreleased` section and
an ordered `Releases` collection. Each `Release` carries:

- a `ReleaseVersion`, a semantic version kept as written;
- a `ReleaseDate`, a `YYYY-MM-DD` date;
- an optional `ReleaseTag`: `YANKED` or `NO CHANGES`;
- an optional `ReleaseLink`, an absolute URI;
- its `Changes`, entries grouped by `ChangeGroup` (`Added`, `Changed`,
  `Deprecated`, `Fixed`, `Removed`, `Security`).

## Installation

```
pip install changelog_keeper
```

The only runtime dependency is `semver`.

## Reading a changelog

```python
from changelog_keeper.parser import parse_changelog
from changelog_keeper.release_version import ReleaseVersion

with open("CHANGELOG.md", encoding="utf-8") as handle:
    changelog = parse_changelog(handle.read())

release = changelog.releases.get_version(ReleaseVersion.parse("1.1.0"))
if release is not None:
    print(release.date, release.tag)
    for group, items in release.changes:
        print(group, items)
```

Level-two headings start a section: `[Unreleased]` (any case, brackets
optional) or `[<version>] - <yyyy>-<mm>-<dd>`, optionally followed by
`[<tag>]`. Level-three headings under a section name a change group, and the
list items that follow become its entries. An entry keeps its source text,
inline markdown included, without the leading `-`/`*` marker and trailing
whitespace; continuation lines stay as written. Link definitions such as
`[unreleased]: …` and `[1.1.0]: …` become the links of the matching sections;
definitions that name no section, or whose URL is not a valid URI, are
ignored.

A document that does not follow the format raises
`changelog_keeper.parser.ParseChangelogError`. Its `heading` attribute holds
the heading that could not be read and `value` the invalid part of it (the
version, date or tag), where there is one; the underlying error is chained
as its cause. Values can also be parsed on their own, each raising its own
`ValueError` subclass: `ReleaseVersion.parse` (`ParseVersionError`),
`ReleaseDate.parse` (`ParseReleaseDateError`), `ReleaseLink.parse`
(`ParseReleaseLinkError`), `ReleaseTag.parse` (`ParseReleaseTagError`) and
`ChangeGroup.parse` (`ParseChangeGroupError`).

## Adding unreleased changes

```python
from changelog_keeper.change_group import ChangeGroup

changelog.unreleased.add(ChangeGroup.FIXED, "Fixed a crash on startup.")
changelog.unreleased.add(ChangeGroup.DEPRECATED, "Feature Y goes away in 2.0.")

print(str(changelog))
```

`str(changelog)` renders the whole document: the standard header, the
`## [Unreleased]` section, every release with its change groups in the order
they were added, and the link definitions at the bottom.

## Promoting unreleased changes to a release

```python
from changelog_keeper.changelog import PromoteOptions
from changelog_keeper.release_date import ReleaseDate
from changelog_keeper.release_link import ReleaseLink
from changelog_keeper.release_version import ReleaseVersion

options = (
    PromoteOptions(ReleaseVersion.parse("0.0.1"))
    .with_date(ReleaseDate.parse("2023-01-01"))
    .with_link(ReleaseLink.parse("https://example.com/my-project/releases/v0.0.1"))
)
changelog.promote_unreleased(options)
```

The unreleased changes move into a new release at the top of the list and
the unreleased section is emptied. Without a date, today's UTC date
(`ReleaseDate.today()`) is used. Promoting to a version that is already in
the changelog raises `PromoteUnreleasedError`.

## Markdown reading

`changelog_keeper.markdown.parse_blocks` splits a markdown document into its
top-level `Block`s (headings, lists, link definitions, paragraphs, code,
block quotes, HTML and thematic breaks). It reads block structure only, as
far as a changelog needs; it is not a full markdown renderer.

## What it does not do

There is no command-line tool: the package is a library, and reading and
writing the changelog file is left to the caller. Releases can be looked up
and iterated, but apart from promotion there is no call to add, remove or
reorder them.