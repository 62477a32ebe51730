"""A block-level markdown reader that finds headings, lists and link definitions.

Headings carry their plain text with inline markup removed, with reference
links resolved against the definitions found anywhere in the document. Lists
carry the source text of each of their items, from the item marker to the end
of the item's last non-blank line.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass, replace
from enum import Enum


class BlockKind(Enum):
    """The kinds of top-level block found in a markdown document."""

    HEADING = "heading"
    LIST = "list"
    DEFINITION = "definition"
    PARAGRAPH = "paragraph"
    CODE = "code"
    BLOCKQUOTE = "blockquote"
    HTML = "html"
    THEMATIC_BREAK = "thematic_break"


@dataclass(frozen=True)
class Block:
    """A top-level block and the source offsets it spans.

    ``text`` is the plain text of a heading, the label as written of a
    definition, and the source text of any other block. ``depth`` is set for
    headings, ``items`` for lists, ``identifier`` and ``url`` for definitions.
    """

    kind: BlockKind
    start: int
    end: int
    text: str = ""
    depth: int = 0
    items: tuple[str, ...] = ()
    identifier: str = ""
    url: str = ""


_LINE_END = re.compile(r"\r\n|\r|\n")
_ATX = re.compile(r" {0,3}(#{1,6})(?:[ \t]+(.*))?")
_ATX_CLOSING = re.compile(r"(?:^|[ \t]+)#+$")
_THEMATIC = re.compile(r" {0,3}([-*_])(?:[ \t]*\1){2,}[ \t]*")
_SETEXT = re.compile(r" {0,3}(=+|-+)[ \t]*")
_FENCE_OPEN = re.compile(r" {0,3}(`{3,}|~{3,})(.*)")
_FENCE_CLOSE = re.compile(r" {0,3}(`{3,}|~{3,})[ \t]*")
_BLOCKQUOTE = re.compile(r" {0,3}>")
_HTML_OPEN = re.compile(r" {0,3}<[A-Za-z/!?]")
_LIST_MARKER = re.compile(r"( {0,3})([-+*]|\d{1,9}[.)])(?:([ \t]+)(.*))?")
_DEFINITION = re.compile(
    r" {0,3}\[((?:[^\\\[\]]|\\.)+)\]:[ \t]*(<[^<>]*>|\S+)"
    r"(?:[ \t]+(?:\"[^\"]*\"|'[^']*'|\([^()]*\)))?[ \t]*"
)
_AUTOLINK = re.compile(
    r"<([A-Za-z][A-Za-z0-9+.\-]{1,31}:[^\s<>]*|[^\s<>@]+@[^\s<>@]+)>"
)
_ESCAPABLE = frozenset(string.punctuation)
_ESCAPED = re.compile(r"\\([" + re.escape(string.punctuation) + r"])")


def _indent_width(content: str) -> int:
    width = 0
    for ch in content:
        if ch == " ":
            width += 1
        elif ch == "\t":
            width += 4 - width % 4
        else:
            break
    return width


@dataclass(frozen=True)
class _Line:
    content: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.content)

    @property
    def blank(self) -> bool:
        return not self.content.strip(" \t")

    @property
    def indent(self) -> int:
        return _indent_width(self.content)


def _split_lines(text: str) -> list[_Line]:
    lines = []
    pos = 0
    for match in _LINE_END.finditer(text):
        lines.append(_Line(text[pos : match.start()], pos))
        pos = match.end()
    if pos < len(text):
        lines.append(_Line(text[pos:], pos))
    return lines


@dataclass(frozen=True)
class _Marker:
    kind: str
    number: int | None
    lead: int
    content_indent: int
    empty: bool

    @property
    def can_interrupt_paragraph(self) -> bool:
        return not self.empty and self.number in (None, 1)


def _list_marker(line: _Line) -> _Marker | None:
    match = _LIST_MARKER.fullmatch(line.content)
    if match is None or _THEMATIC.fullmatch(line.content):
        return None
    lead, marker = match.group(1), match.group(2)
    spaces, rest = match.group(3) or "", match.group(4) or ""
    marker_end = len(lead) + len(marker)
    empty = not rest.strip(" \t")
    space_width = len(spaces.replace("\t", "    "))
    if empty or space_width > 4:
        content_indent = marker_end + 1
    else:
        content_indent = marker_end + space_width
    bullet = marker in ("-", "+", "*")
    return _Marker(
        kind=marker if bullet else marker[-1],
        number=None if bullet else int(marker[:-1]),
        lead=len(lead),
        content_indent=content_indent,
        empty=empty,
    )


def _fence_open(content: str) -> re.Match[str] | None:
    match = _FENCE_OPEN.fullmatch(content)
    if match is None:
        return None
    if match.group(1)[0] == "`" and "`" in match.group(2):
        return None
    return match


def _starts_block(line: _Line) -> bool:
    """True if the line opens a block that may interrupt a paragraph."""
    content = line.content
    if (
        _ATX.fullmatch(content)
        or _THEMATIC.fullmatch(content)
        or _fence_open(content)
        or _BLOCKQUOTE.match(content)
        or _HTML_OPEN.match(content)
    ):
        return True
    marker = _list_marker(line)
    return marker is not None and marker.can_interrupt_paragraph


def _normalize_label(label: str) -> str:
    return " ".join(label.split()).lower()


class _Reader:
    def __init__(self, text: str) -> None:
        self._text = text
        self._lines = _split_lines(text)
        self._pos = 0

    def blocks(self) -> list[Block]:
        result = []
        while self._pos < len(self._lines):
            line = self._lines[self._pos]
            if line.blank:
                self._pos += 1
            else:
                result.append(self._block(line))
        return result

    def _raw(self, kind: BlockKind, first: int, last: int) -> Block:
        start, end = self._lines[first].start, self._lines[last].end
        return Block(kind, start, end, text=self._text[start:end])

    def _block(self, line: _Line) -> Block:
        if line.indent >= 4:
            return self._indented_code()
        fence = _fence_open(line.content)
        if fence is not None:
            return self._fenced_code(fence.group(1))
        atx = _ATX.fullmatch(line.content)
        if atx is not None:
            self._pos += 1
            content = _ATX_CLOSING.sub("", (atx.group(2) or "").strip(" \t"))
            return Block(
                BlockKind.HEADING,
                line.start,
                line.end,
                text=content.strip(" \t"),
                depth=len(atx.group(1)),
            )
        if _THEMATIC.fullmatch(line.content):
            self._pos += 1
            return self._raw(BlockKind.THEMATIC_BREAK, self._pos - 1, self._pos - 1)
        if _BLOCKQUOTE.match(line.content):
            return self._blockquote()
        if _HTML_OPEN.match(line.content):
            return self._html()
        marker = _list_marker(line)
        if marker is not None:
            return self._list(marker.kind)
        definition = _DEFINITION.fullmatch(line.content)
        if definition is not None and definition.group(1).strip():
            self._pos += 1
            url = definition.group(2)
            if url.startswith("<") and url.endswith(">"):
                url = url[1:-1]
            return Block(
                BlockKind.DEFINITION,
                line.start,
                line.end,
                text=definition.group(1),
                identifier=_normalize_label(definition.group(1)),
                url=_ESCAPED.sub(r"\1", url),
            )
        return self._paragraph()

    def _indented_code(self) -> Block:
        first = last = self._pos
        while self._pos < len(self._lines):
            line = self._lines[self._pos]
            if not line.blank and line.indent < 4:
                break
            if not line.blank:
                last = self._pos
            self._pos += 1
        self._pos = last + 1
        return self._raw(BlockKind.CODE, first, last)

    def _fenced_code(self, fence: str) -> Block:
        first = last = self._pos
        self._pos += 1
        while self._pos < len(self._lines):
            line = self._lines[self._pos]
            last = self._pos
            self._pos += 1
            close = _FENCE_CLOSE.fullmatch(line.content)
            if close and close.group(1)[0] == fence[0] and len(close.group(1)) >= len(fence):
                break
        return self._raw(BlockKind.CODE, first, last)

    def _blockquote(self) -> Block:
        first = last = self._pos
        self._pos += 1
        while self._pos < len(self._lines):
            line = self._lines[self._pos]
            if line.blank or not (_BLOCKQUOTE.match(line.content) or not _starts_block(line)):
                break
            last = self._pos
            self._pos += 1
        return self._raw(BlockKind.BLOCKQUOTE, first, last)

    def _html(self) -> Block:
        first = self._pos
        opening = self._lines[first].content
        comment_at = opening.find("<!--")
        is_comment = comment_at != -1 and not opening[:comment_at].strip(" ")
        last = first
        while self._pos < len(self._lines):
            line = self._lines[self._pos]
            if is_comment:
                tail = line.content[comment_at + 4 :] if self._pos == first else line.content
                last = self._pos
                self._pos += 1
                if "-->" in tail:
                    break
            else:
                if line.blank:
                    break
                last = self._pos
                self._pos += 1
        return self._raw(BlockKind.HTML, first, last)

    def _list(self, kind: str) -> Block:
        list_start = self._lines[self._pos].start
        list_end = list_start
        items = []
        while self._pos < len(self._lines):
            line = self._lines[self._pos]
            marker = _list_marker(line)
            if marker is None or marker.kind != kind:
                break
            item_start = line.start + marker.lead
            item_end = line.end
            started = not marker.empty
            paragraph_open = started
            self._pos += 1
            while self._pos < len(self._lines):
                following = self._lines[self._pos]
                if following.blank:
                    if not started:
                        break
                    paragraph_open = False
                elif following.indent >= marker.content_indent or (
                    paragraph_open and not _starts_block(following)
                ):
                    item_end = following.end
                    started = paragraph_open = True
                else:
                    break
                self._pos += 1
            items.append(self._text[item_start:item_end])
            list_end = item_end
        return Block(
            BlockKind.LIST,
            list_start,
            list_end,
            text=self._text[list_start:list_end],
            items=tuple(items),
        )

    def _paragraph(self) -> Block:
        first = last = self._pos
        self._pos += 1
        while self._pos < len(self._lines):
            line = self._lines[self._pos]
            if line.blank:
                break
            underline = _SETEXT.fullmatch(line.content)
            if underline is not None:
                self._pos += 1
                content = "\n".join(
                    part.content.strip(" \t") for part in self._lines[first : last + 1]
                )
                return Block(
                    BlockKind.HEADING,
                    self._lines[first].start,
                    line.end,
                    text=content,
                    depth=1 if underline.group(1)[0] == "=" else 2,
                )
            if _starts_block(line):
                break
            last = self._pos
            self._pos += 1
        return self._raw(BlockKind.PARAGRAPH, first, last)


def _closing(source: str, index: int, opener: str, closer: str) -> int:
    depth = 0
    pos = index + 1
    while pos < len(source):
        ch = source[pos]
        if ch == "\\":
            pos += 2
            continue
        if ch == opener:
            depth += 1
        elif ch == closer:
            if depth == 0:
                return pos
            depth -= 1
        pos += 1
    return -1


def _escape(source: str, index: int) -> tuple[str, int] | None:
    following = source[index + 1 : index + 2]
    if following and following in _ESCAPABLE:
        return following, index + 2
    return None


def _code_span(source: str, index: int) -> tuple[str, int]:
    run = len(source) - len(source[index:].lstrip("`"))
    closer = re.compile(r"(?<!`)" + "`" * run + r"(?!`)")
    match = closer.search(source, index + run)
    if match is None:
        return "`" * run, index + run
    content = source[index + run : match.start()].replace("\n", " ")
    if len(content) > 1 and content[0] == content[-1] == " " and content.strip(" "):
        content = content[1:-1]
    return content, match.end()


def _autolink(source: str, index: int) -> tuple[str, int] | None:
    match = _AUTOLINK.match(source, index)
    return (match.group(1), match.end()) if match else None


def _link(source: str, index: int, defined: frozenset[str]) -> tuple[str, int] | None:
    close = _closing(source, index, "[", "]")
    if close == -1:
        return None
    inner = source[index + 1 : close]
    after = close + 1
    if source.startswith("(", after):
        paren = _closing(source, after, "(", ")")
        if paren != -1:
            return _plain_text(inner, defined), paren + 1
    label_close = _closing(source, after, "[", "]") if source.startswith("[", after) else -1
    if label_close != -1:
        label = source[after + 1 : label_close]
        if _normalize_label(label or inner) in defined:
            return _plain_text(inner, defined), label_close + 1
        return None
    if _normalize_label(inner) in defined:
        return _plain_text(inner, defined), after
    return None


def _emphasis(source: str, index: int, defined: frozenset[str]) -> tuple[str, int]:
    delim = source[index]
    run = len(source) - len(source[index:].lstrip(delim))
    after = source[index + run : index + run + 1]
    before = source[index - 1] if index > 0 else ""
    if not after or after.isspace() or (delim == "_" and before.isalnum()):
        return source[index : index + run], index + run
    closer = source.find(delim * run, index + run + 1)
    while closer != -1:
        trailing = source[closer + run : closer + run + 1]
        if not source[closer - 1].isspace() and (delim == "*" or not trailing.isalnum()):
            return _plain_text(source[index + run : closer], defined), closer + run
        closer = source.find(delim * run, closer + 1)
    return source[index : index + run], index + run


def _inline_at(source: str, index: int, defined: frozenset[str]) -> tuple[str, int] | None:
    ch = source[index]
    if ch == "\\":
        return _escape(source, index)
    if ch == "`":
        return _code_span(source, index)
    if ch == "<":
        return _autolink(source, index)
    if ch == "[":
        return _link(source, index, defined)
    if ch == "!" and source.startswith("[", index + 1):
        return _link(source, index + 1, defined)
    if ch in "*_":
        return _emphasis(source, index, defined)
    return None


def _plain_text(source: str, defined: frozenset[str]) -> str:
    pieces = []
    index = 0
    while index < len(source):
        found = _inline_at(source, index, defined)
        if found is None:
            pieces.append(source[index])
            index += 1
        else:
            piece, index = found
            pieces.append(piece)
    return "".join(pieces)


def parse_blocks(text: str) -> list[Block]:
    """Split a markdown document into its top-level blocks, in order."""
    blocks = _Reader(text).blocks()
    defined = frozenset(
        block.identifier for block in blocks if block.kind is BlockKind.DEFINITION
    )
    return [
        replace(block, text=_plain_text(block.text, defined))
        if block.kind is BlockKind.HEADING
        else block
        for block in blocks
    ]