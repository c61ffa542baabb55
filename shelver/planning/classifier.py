"""
Filename classification for Shelver.

Decides, for a single filename, which group it belongs to. Two grammars are
tried in order:

- marker: the group is the text before a user-supplied marker token that is
  followed by a sequence number (e.g. "kyoto-trip p04.jpg" with marker "p").
- numeric: the group is the text before a trailing sequence number
  (e.g. "album-001.wav").

Classification is pure: no I/O and no state shared between calls.
"""

import re
from dataclasses import dataclass
from typing import Callable

# Separator characters: "-", "_", "." and whitespace
SEPARATOR_CLASS = r"[-_.\s]"

_TRAILING_SEPARATORS = re.compile(SEPARATOR_CLASS + r"+\Z", re.ASCII)
_SEPARATOR_CHAR = re.compile(SEPARATOR_CLASS, re.ASCII)

# Lazy head, optional separators, at least two digits up to the end of the stem
_NUMERIC_PATTERN = re.compile(r"(.+?)" + SEPARATOR_CLASS + r"*([0-9]{2,})", re.ASCII)


@dataclass(frozen=True)
class Classification:
    """
    Outcome of classifying one filename.

    A matched classification carries the group name and the mode that
    produced it ("marker" or "numeric"). Falsy when nothing matched.
    """
    group: str | None = None
    mode: str | None = None

    @property
    def matched(self) -> bool:
        return self.group is not None

    def __bool__(self) -> bool:
        return self.matched


NO_MATCH = Classification()


def get_stem(filename: str) -> str:
    """Strip the final extension (from the last '.' onward)."""
    dot = filename.rfind(".")
    if dot == -1:
        return filename
    return filename[:dot]


def strip_separators(text: str) -> str:
    """Remove a trailing run of separator characters."""
    return _TRAILING_SEPARATORS.sub("", text)


def is_separator(char: str) -> bool:
    return len(char) == 1 and _SEPARATOR_CHAR.fullmatch(char) is not None


def match_numeric(stem: str, marker: str = "") -> str | None:
    """
    Group by a trailing run of two or more digits.

    The head is the shortest text that lets the rest of the stem be
    separators followed by digits, so "test---99" groups as "test" and
    "123" groups as "1".
    """
    match = _NUMERIC_PATTERN.fullmatch(stem)
    if match is None:
        return None

    group = strip_separators(match.group(1))
    return group or None


def _marker_pattern(marker: str) -> re.Pattern:
    # The marker is matched literally, never as pattern syntax
    return re.compile(
        r"(.+?)(" + SEPARATOR_CLASS + r"?)" + re.escape(marker) + r"([0-9]{2,})",
        re.ASCII,
    )


def match_marker(stem: str, marker: str) -> str | None:
    """
    Group by the text in front of `marker` followed by two or more digits.

    The marker must sit on a separator boundary: either one separator sits
    directly in front of it, or the head already ends with one. Anything
    may follow the digits. A boundary miss fails outright; no other split
    of the stem is tried.
    """
    if not marker:
        return None

    match = _marker_pattern(marker).match(stem)
    if match is None:
        return None

    head, separator = match.group(1), match.group(2)
    if not separator and not is_separator(head[-1]):
        return None

    group = strip_separators(head)
    return group or None


# Tried in order; the first strategy returning a group wins
STRATEGIES: tuple[tuple[str, Callable[[str, str], str | None]], ...] = (
    ("marker", match_marker),
    ("numeric", match_numeric),
)


def classify(filename: str, marker: str = "") -> Classification:
    """
    Classify a filename into a group.

    Args:
        filename: Base name of the file, extension included.
        marker: Optional literal marker token. Empty disables marker mode.

    Returns:
        A matched Classification, or NO_MATCH.
    """
    stem = get_stem(filename)
    if not stem:
        return NO_MATCH

    for mode, strategy in STRATEGIES:
        group = strategy(stem, marker)
        if group:
            return Classification(group=group, mode=mode)

    return NO_MATCH
