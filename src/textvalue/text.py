"""A mutable string wrapper with the JavaScript String API.

Indices count Unicode code points, never UTF-16 units or bytes. Methods
that produce a new string store it back into the buffer and return the
same instance, so calls chain:

    TextValue(" Hello ").trim().padEnd(8, ".").toUpperCase()

Lookups that miss return None (`at`, `charCodeAt`, `codePointAt`,
`match`) or -1 (`indexOf`, `lastIndexOf`, `search`) instead of raising.
"""

from __future__ import annotations

from typing import Iterator, Union

from . import casing, encoding, patterns
from .errors import InvalidArgumentError, UnsupportedOperationError
from .patterns import Groups, PatternLike, Replacement, Separator

try:
    import unicodedata
except ImportError:  # minimal interpreter builds can omit the extension
    unicodedata = None  # type: ignore[assignment]

DEFAULT_FORM: str = "NFC"
NORMALIZATION_FORMS: tuple[str, ...] = ("NFC", "NFD", "NFKC", "NFKD")
MAX_CODE_POINT: int = 0x10FFFF

TextLike = Union[str, bytes, bytearray, "TextValue"]


def _coerce(value: object) -> str:
    if isinstance(value, TextValue):
        return value.value
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return encoding.decode(bytes(value))
    return str(value)


def _clamp(index: int, length: int) -> int:
    return max(0, min(index, length))


def _resolve(index: int, length: int) -> int:
    """Offset a negative index from the end, then clamp into [0, length]."""
    if index < 0:
        index += length
    return _clamp(index, length)


def _fill(current: int, target: int, pad: str) -> str:
    """Padding of exactly target - current code points, or "" if none is due."""
    if current >= target or pad == "":
        return ""
    needed = target - current
    while len(pad) < needed:
        pad += pad
    return pad[:needed]


class TextValue:
    """A single Unicode text buffer plus the operations on it.

    Not safe to share between threads without external locking; the
    locale-aware methods take the locale as an argument and touch no
    global state.
    """

    def __init__(self, value: object = ""):
        self.value: str = _coerce(value)

    @classmethod
    def fromCharCode(cls, *units: int) -> TextValue:
        """Build from UTF-16 code units; valid surrogate pairs are joined."""
        return cls(encoding.utf16_units_to_str(units))

    @classmethod
    def fromCodePoint(cls, *points: int) -> TextValue:
        for cp in points:
            if not isinstance(cp, int) or isinstance(cp, bool):
                raise InvalidArgumentError("invalid code point " + repr(cp))
            if cp < 0 or cp > MAX_CODE_POINT:
                raise InvalidArgumentError("invalid code point " + str(cp))
        return cls("".join(chr(cp) for cp in points))

    # ============================================================
    # INDEXING & INSPECTION
    # ============================================================

    @property
    def length(self) -> int:
        """Number of code points, recomputed on every read."""
        return len(self.value)

    def at(self, index: int) -> str | None:
        """Character at `index`; negative indices count from the end."""
        n = len(self.value)
        if index < 0:
            index += n
        if index < 0 or index >= n:
            return None
        return self.value[index]

    def charAt(self, index: int) -> str:
        """Character at `index`, or "" when out of range (no negatives)."""
        if index < 0 or index >= len(self.value):
            return ""
        return self.value[index]

    def charCodeAt(self, index: int) -> int | None:
        """Code of the character at `index`.

        Characters outside the BMP yield their full code point, not the
        leading UTF-16 surrogate as JavaScript would.
        """
        ch = self.charAt(index)
        return ord(ch) if ch != "" else None

    def codePointAt(self, index: int) -> int | None:
        ch = self.at(index)
        return ord(ch) if ch is not None else None

    def isWellFormed(self) -> bool:
        """True unless the buffer holds lone surrogates."""
        return encoding.is_well_formed(self.value)

    def localeCompare(self, other: TextLike) -> int:
        """Byte-wise comparison of the UTF-8 encodings: -1, 0 or 1."""
        a = encoding.to_bytes(self.value)
        b = encoding.to_bytes(_coerce(other))
        return (a > b) - (a < b)

    def toBytes(self) -> bytes:
        return encoding.to_bytes(self.value)

    # ============================================================
    # SEARCH
    # ============================================================

    def _in_range(self, position: int) -> bool:
        return 0 <= position < len(self.value)

    def includes(self, search: TextLike, position: int = 0) -> bool:
        if not self._in_range(position):
            return False
        return self.value.find(_coerce(search), position) != -1

    def indexOf(self, search: TextLike, position: int = 0) -> int:
        if not self._in_range(position):
            return -1
        return self.value.find(_coerce(search), position)

    def lastIndexOf(self, search: TextLike, position: int | None = None) -> int:
        """Start of the last occurrence, or -1.

        With `position`, only the first `position + 1` code points are
        searched, so the whole match has to fit inside them.
        """
        haystack = self.value
        if position is not None:
            haystack = haystack[: _clamp(position, len(haystack)) + 1]
        return haystack.rfind(_coerce(search))

    def startsWith(self, search: TextLike, position: int = 0) -> bool:
        if not self._in_range(position):
            return False
        return self.value.startswith(_coerce(search), position)

    def endsWith(self, search: TextLike, length: int | None = None) -> bool:
        text = self.value
        if length is not None:
            text = text[: _clamp(length, len(text))]
        return text.endswith(_coerce(search))

    def search(self, pattern: PatternLike) -> int:
        """Offset of the first regex match, or -1."""
        m = patterns.first_match(pattern, self.value)
        return m.start() if m is not None else -1

    def match(self, pattern: PatternLike) -> Groups | None:
        """[whole, group1, ...] of the first regex match, or None."""
        m = patterns.first_match(pattern, self.value)
        return patterns.groups_of(m) if m is not None else None

    def matchAll(self, pattern: PatternLike) -> list[Groups]:
        return patterns.all_matches(pattern, self.value)

    # ============================================================
    # TRANSFORMATION (in place, chainable)
    # ============================================================

    def concat(self, *parts: TextLike) -> TextValue:
        self.value += "".join(_coerce(p) for p in parts)
        return self

    def normalize(self, form: str = DEFAULT_FORM) -> TextValue:
        if unicodedata is None:
            raise UnsupportedOperationError(
                "unicode normalization is not available in this interpreter"
            )
        if form not in NORMALIZATION_FORMS:
            raise InvalidArgumentError("invalid normalization form: " + repr(form))
        self.value = unicodedata.normalize(form, self.value)
        return self

    def padStart(self, targetLength: int, padString: str = " ") -> TextValue:
        self.value = _fill(len(self.value), targetLength, padString) + self.value
        return self

    def padEnd(self, targetLength: int, padString: str = " ") -> TextValue:
        self.value += _fill(len(self.value), targetLength, padString)
        return self

    def repeat(self, count: int) -> TextValue:
        if count < 0:
            raise InvalidArgumentError("repeat count must be non-negative")
        self.value *= count
        return self

    def replace(self, pattern: PatternLike, replacement: Replacement) -> TextValue:
        """Replace the first regex match."""
        self.value = patterns.substitute(pattern, replacement, self.value, count=1)
        return self

    def replaceAll(self, pattern: PatternLike, replacement: Replacement) -> TextValue:
        self.value = patterns.substitute(pattern, replacement, self.value)
        return self

    def slice(self, start: int, end: int | None = None) -> TextValue:
        """Keep [start, end); negative indices count from the end."""
        n = len(self.value)
        lo = _resolve(start, n)
        hi = n if end is None else _resolve(end, n)
        self.value = self.value[lo:hi]
        return self

    def substring(self, start: int, end: int | None = None) -> TextValue:
        """Keep [start, end) with negatives clamped to 0 and bounds swapped."""
        n = len(self.value)
        lo = _clamp(start, n)
        hi = n if end is None else _clamp(end, n)
        if lo > hi:
            lo, hi = hi, lo
        self.value = self.value[lo:hi]
        return self

    def split(
        self, separator: Separator | PatternLike, limit: int | None = None
    ) -> list[str]:
        """Split into pieces; the buffer itself is left alone.

        A str separator is literal and a compiled pattern is a regex; wrap
        text in RegexSeparator, or pass it through detect_separator, to
        split on a regex given as a string.
        """
        return patterns.split(self.value, patterns.as_separator(separator), limit)

    def toLowerCase(self) -> TextValue:
        self.value = self.value.lower()
        return self

    def toUpperCase(self) -> TextValue:
        self.value = self.value.upper()
        return self

    def toLocaleLowerCase(
        self, locale: str | None = casing.DEFAULT_LOCALE
    ) -> TextValue:
        self.value = casing.lower(self.value, locale)
        return self

    def toLocaleUpperCase(
        self, locale: str | None = casing.DEFAULT_LOCALE
    ) -> TextValue:
        self.value = casing.upper(self.value, locale)
        return self

    def toWellFormed(self) -> TextValue:
        """Replace lone surrogates (malformed input) with U+FFFD."""
        self.value = encoding.to_well_formed(self.value)
        return self

    def trim(self) -> TextValue:
        self.value = self.value.strip()
        return self

    def trimStart(self) -> TextValue:
        self.value = self.value.lstrip()
        return self

    def trimEnd(self) -> TextValue:
        self.value = self.value.rstrip()
        return self

    def toString(self) -> str:
        return self.value

    def valueOf(self) -> str:
        return self.value

    def copy(self) -> TextValue:
        return TextValue(self.value)

    # ============================================================
    # PYTHON PROTOCOLS
    # ============================================================

    def __iter__(self) -> Iterator[str]:
        """One character per code point, read lazily from the live buffer.

        Mutating the buffer while iterating gives unspecified results.
        """
        i = 0
        while i < len(self.value):
            yield self.value[i]
            i += 1

    def __len__(self) -> int:
        return len(self.value)

    def __contains__(self, item: object) -> bool:
        return _coerce(item) in self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextValue):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    # Mutable, so unhashable.
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return "TextValue(" + repr(self.value) + ")"
