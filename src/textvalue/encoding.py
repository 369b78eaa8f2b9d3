"""UTF-8 ingestion and well-formedness.

Malformed UTF-8 given as bytes is not rejected: each undecodable byte is
kept as a lone surrogate in U+DC80..U+DCFF (the `surrogateescape` error
handler), so the buffer can carry corruption until `to_well_formed`
repairs it.
"""

from __future__ import annotations

import re

REPLACEMENT_CHARACTER: str = "\ufffd"

_SURROGATE = re.compile("[\ud800-\udfff]")
# Bytes escaped by surrogateescape occupy U+DC80..U+DCFF.
_ESCAPED_RUN = re.compile("[\udc80-\udcff]+")
_FOREIGN_RUN = re.compile("([\ud800-\udc7f\udd00-\udfff]+)")


def decode(raw: bytes) -> str:
    """Decode UTF-8, escaping malformed bytes as lone surrogates."""
    return raw.decode("utf-8", "surrogateescape")


def to_bytes(text: str) -> bytes:
    """Encode back to UTF-8, restoring escaped bytes.

    Surrogates outside the escape range (e.g. from fromCharCode) are
    written as their 3-byte forms; escaped bytes around them keep their
    original value.
    """
    out = bytearray()
    for i, run in enumerate(_FOREIGN_RUN.split(text)):
        if i % 2:
            out += run.encode("utf-8", "surrogatepass")
        else:
            out += run.encode("utf-8", "surrogateescape")
    return bytes(out)


def is_well_formed(text: str) -> bool:
    return _SURROGATE.search(text) is None


def _repair_bytes(m: re.Match[str]) -> str:
    # maximal-subpart replacement: one U+FFFD per malformed sequence
    return m.group(0).encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def to_well_formed(text: str) -> str:
    text = _ESCAPED_RUN.sub(_repair_bytes, text)
    return _SURROGATE.sub(REPLACEMENT_CHARACTER, text)


def utf16_units_to_str(units: tuple[int, ...] | list[int]) -> str:
    """Join UTF-16 code units, pairing valid surrogates.

    Unpaired surrogates survive as lone surrogate code points.
    """
    out: list[str] = []
    i = 0
    n = len(units)
    while i < n:
        hi = units[i] & 0xFFFF
        if 0xD800 <= hi <= 0xDBFF and i + 1 < n:
            lo = units[i + 1] & 0xFFFF
            if 0xDC00 <= lo <= 0xDFFF:
                out.append(chr(0x10000 + ((hi - 0xD800) << 10) + (lo - 0xDC00)))
                i += 2
                continue
        out.append(chr(hi))
        i += 1
    return "".join(out)
