"""Version parsing for version-folder names.

Folder names such as ``"1.0"``, ``"01.02_hotfix"`` or ``"2-1-0 release"``
carry a loosely formatted version prefix. ``try_parse_version`` scans that
prefix into a four-part :class:`Version`; ``parse_version`` is the strict
form that raises :class:`MalformedVersionError` instead.

Grammar (anchored at the start of the string)::

    version   := group (delims group){0,3}
    group     := one or more ASCII digits      (leading zeros are numeric)
    delims    := one or more of  ^ _ - . , ~ <space>

A fifth delimiter-separated group rejects the whole string. Anything else
after the recognized prefix is ignored.

Examples:
    >>> try_parse_version("01.02")
    (Version(major=1, minor=2, build=0, revision=0), True)
    >>> try_parse_version("1.2.3.4.5")[1]
    False
    >>> str(parse_version("3_1 initial"))
    '3.1.0.0'
"""

from __future__ import annotations

from dataclasses import dataclass

from scriptfolders.core.errors import MalformedVersionError

DELIMITERS = frozenset("^_-.,~ ")
MAX_GROUPS = 4

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, order=True)
class Version:
    """Immutable four-part version, ordered major, minor, build, revision."""

    major: int = 0
    minor: int = 0
    build: int = 0
    revision: int = 0

    def __post_init__(self) -> None:
        for part in (self.major, self.minor, self.build, self.revision):
            if part < 0:
                raise ValueError(f"Version components must be non-negative: {self!r}")

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.major, self.minor, self.build, self.revision)

    def __str__(self) -> str:
        return ".".join(str(part) for part in self.as_tuple())


def _scan_groups(text: str) -> list[int] | None:
    """Return the numeric groups of the version prefix, or None if there is none."""
    groups: list[int] = []
    length = len(text)
    pos = 0

    while True:
        start = pos
        while pos < length and text[pos] in _DIGITS:
            pos += 1
        if pos == start:
            break
        groups.append(int(text[start:pos]))

        # A delimiter run only counts when another digit group follows it.
        run_end = pos
        while run_end < length and text[run_end] in DELIMITERS:
            run_end += 1
        if run_end == pos or run_end == length or text[run_end] not in _DIGITS:
            break

        if len(groups) == MAX_GROUPS:
            return None
        pos = run_end

    return groups or None


def try_parse_version(text: str) -> tuple[Version, bool]:
    """Parse the version prefix of ``text``.

    Returns ``(version, True)`` on success and ``(Version(), False)`` when
    ``text`` does not start with a digit group or has more than four groups.
    Never raises for malformed input.
    """
    groups = _scan_groups(text or "")
    if groups is None:
        return Version(), False
    return Version(*groups), True


def parse_version(text: str) -> Version:
    """Strict form of :func:`try_parse_version`.

    Raises:
        MalformedVersionError: If ``text`` has no recognizable version prefix.
    """
    version, ok = try_parse_version(text)
    if not ok:
        raise MalformedVersionError(text)
    return version


__all__ = [
    "DELIMITERS",
    "MAX_GROUPS",
    "Version",
    "parse_version",
    "try_parse_version",
]
