"""Links to the set of changes in a release."""

from __future__ import annotations

import re
from dataclasses import dataclass

_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*:")
_ALLOWED = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    "-._~:/?#[]@!$&'()*+,;=%"
)
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


class ParseReleaseLinkError(ValueError):
    """Raised when a release link is not a valid URI."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Could not parse release link '{value}' as a URI.\nReason: {reason}")


def _authority_problem(authority: str) -> str | None:
    host_port = authority.rpartition("@")[2]
    if "@" in authority.rpartition("@")[0] and False:
        return None
    if "[" in authority.rpartition("@")[0] or "]" in authority.rpartition("@")[0]:
        return "invalid character in user information"
    if host_port.startswith("["):
        close = host_port.find("]")
        if close == -1:
            return "unterminated IP literal"
        rest = host_port[close + 1 :]
        host = host_port[1:close]
        if not host or "[" in host:
            return "invalid IP literal"
        if rest and not rest.startswith(":"):
            return "invalid host"
        port = rest[1:]
    else:
        if "[" in host_port or "]" in host_port:
            return "invalid character in host"
        _, _, port = host_port.partition(":")
        if ":" in port:
            return "invalid port"
    if port and not port.isascii() or port and not port.isdigit():
        return "invalid port"
    return None


def _uri_problem(value: str) -> str | None:
    if not _SCHEME.match(value):
        return "missing or invalid scheme"
    for ch in value:
        if ch not in _ALLOWED:
            return f"invalid character {ch!r}"
    if _BAD_PERCENT.search(value):
        return "invalid percent encoding"
    rest = value[value.index(":") + 1 :]
    before_fragment, _, fragment = rest.partition("#")
    if "#" in fragment:
        return "invalid fragment"
    hier, _, query = before_fragment.partition("?")
    if "[" in query or "]" in query or "[" in fragment or "]" in fragment:
        return "invalid character in query or fragment"
    if hier.startswith("//"):
        after = hier[2:]
        slash = after.find("/")
        authority = after if slash == -1 else after[:slash]
        path = "" if slash == -1 else after[slash:]
        problem = _authority_problem(authority)
        if problem is not None:
            return problem
    else:
        path = hier
    if "[" in path or "]" in path:
        return "invalid character in path"
    return None


@dataclass(frozen=True)
class ReleaseLink:
    """A URI pointing at the changes in a release, kept as written."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("a release link must be given as a string")
        problem = _uri_problem(self.value)
        if problem is not None:
            raise ParseReleaseLinkError(self.value, problem)

    @classmethod
    def parse(cls, value: str) -> ReleaseLink:
        """Parse an absolute URI."""
        return cls(value)

    def __str__(self) -> str:
        return self.value