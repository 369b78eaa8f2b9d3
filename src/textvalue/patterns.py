"""Regex coercion, match records and split separators."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Union

from .errors import InvalidArgumentError

PatternLike = Union[str, re.Pattern[str]]
Replacement = Union[str, Callable[[re.Match[str]], str]]
Groups = list[Union[str, None]]


def compile_pattern(pattern: PatternLike) -> re.Pattern[str]:
    """Accept a pattern string or an already-compiled pattern."""
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def groups_of(m: re.Match[str]) -> Groups:
    """Whole match followed by each capture; unmatched groups are None."""
    return [m.group(0), *m.groups()]


def first_match(pattern: PatternLike, text: str) -> re.Match[str] | None:
    return compile_pattern(pattern).search(text)


def all_matches(pattern: PatternLike, text: str) -> list[Groups]:
    return [groups_of(m) for m in compile_pattern(pattern).finditer(text)]


def substitute(
    pattern: PatternLike, replacement: Replacement, text: str, *, count: int = 0
) -> str:
    """re.sub with the host template syntax (\\1, \\g<name>) or a callable."""
    return compile_pattern(pattern).sub(replacement, text, count=count)


# ============================================================
# SEPARATORS
# ============================================================


class Separator:
    """Base for split separators.

    `maxsplit` follows str.split: -1 splits everywhere, 0 not at all.
    """

    def pieces_per_split(self) -> int:
        """How many list entries each split point adds."""
        return 1

    def split(self, text: str, maxsplit: int = -1) -> list[str]:
        raise NotImplementedError


@dataclass(frozen=True)
class LiteralSeparator(Separator):
    """Split on a plain substring. An empty one splits into code points."""

    text: str

    def split(self, text: str, maxsplit: int = -1) -> list[str]:
        if self.text != "":
            return text.split(self.text, maxsplit)
        if maxsplit < 0 or maxsplit >= len(text):
            return list(text)
        return list(text[:maxsplit]) + [text[maxsplit:]]


@dataclass(frozen=True)
class RegexSeparator(Separator):
    """Split on every match of a regex; capture groups are kept."""

    pattern: PatternLike

    def __post_init__(self) -> None:
        try:
            compile_pattern(self.pattern)
        except re.error as e:
            raise InvalidArgumentError(
                "invalid separator pattern " + repr(self.pattern) + ": " + str(e)
            ) from e

    def pieces_per_split(self) -> int:
        # the text after the match plus one entry per capture group
        return 1 + compile_pattern(self.pattern).groups

    def split(self, text: str, maxsplit: int = -1) -> list[str]:
        if maxsplit == 0:
            return [text]
        return compile_pattern(self.pattern).split(text, maxsplit=max(maxsplit, 0))


def detect_separator(text: str) -> Separator:
    """Regex if `text` compiles, literal otherwise."""
    try:
        re.compile(text)
    except re.error:
        return LiteralSeparator(text)
    return RegexSeparator(text)


def as_separator(separator: Separator | PatternLike) -> Separator:
    if isinstance(separator, Separator):
        return separator
    if isinstance(separator, re.Pattern):
        return RegexSeparator(separator)
    if isinstance(separator, str):
        return LiteralSeparator(separator)
    raise TypeError("separator must be str, re.Pattern or Separator")


def split(text: str, separator: Separator, limit: int | None = None) -> list[str]:
    """Split with an explode-style limit.

    None: unbounded. n > 0: at most n list entries (captured groups
    included), the last one unsplit. 0 behaves as 1. n < 0: every entry
    except the last |n|.
    """
    if limit is None:
        return separator.split(text)
    if limit < 0:
        return separator.split(text)[:limit]
    maxsplit = (max(limit, 1) - 1) // separator.pieces_per_split()
    return separator.split(text, maxsplit)
