"""Locale-tailored case mapping.

The locale is passed in on every call; nothing here reads or changes the
process-wide C locale. Only the language subtag matters, and only the
languages with tailorings in Unicode SpecialCasing (Turkish, Azeri,
Lithuanian) differ from the default full case mapping.
"""

from __future__ import annotations

from .errors import UnsupportedOperationError

try:
    import unicodedata
except ImportError:  # minimal interpreter builds can omit the extension
    unicodedata = None  # type: ignore[assignment]

DEFAULT_LOCALE: str = "en_US"

_DOT_ABOVE = "\u0307"
_DOTLESS_I = "\u0131"
_DOTTED_CAPITAL_I = "\u0130"

_TURKIC = frozenset(("tr", "az"))

# Soft_Dotted property (the letters that lose their dot under an accent).
_SOFT_DOTTED = frozenset(
    "ij\u012f\u0249\u0268\u029d\u02b2\u03f3\u0456\u0458\u1d62\u1d96"
    "\u1da4\u1da8\u1e2d\u1ecb\u2071\u2148\u2149\u2c7c"
)

_LT_LOWER_ACCENTED = {
    "\u00cc": "i\u0307\u0300",
    "\u00cd": "i\u0307\u0301",
    "\u0128": "i\u0307\u0303",
}

_LT_LOWER_MORE_ABOVE = {
    "I": "i\u0307",
    "J": "j\u0307",
    "\u012e": "\u012f\u0307",
}


def language(locale: str | None) -> str:
    """Primary language subtag of a POSIX or BCP 47 locale name.

    >>> language("tr_TR.UTF-8")
    'tr'
    >>> language("az-Latn-AZ")
    'az'
    """
    if not locale:
        locale = DEFAULT_LOCALE
    tag = locale.split(".", 1)[0].split("@", 1)[0]
    return tag.replace("-", "_").split("_", 1)[0].lower()


def lower(text: str, locale: str | None = DEFAULT_LOCALE) -> str:
    lang = language(locale)
    if lang in _TURKIC:
        return _lower_turkic(text)
    if lang == "lt":
        return _lower_lithuanian(text)
    return text.lower()


def upper(text: str, locale: str | None = DEFAULT_LOCALE) -> str:
    lang = language(locale)
    if lang in _TURKIC:
        return text.replace("i", _DOTTED_CAPITAL_I).upper()
    if lang == "lt":
        return _upper_lithuanian(text)
    return text.upper()


def _combining_class(ch: str) -> int:
    if unicodedata is None:
        raise UnsupportedOperationError(
            "combining classes are not available in this interpreter"
        )
    return unicodedata.combining(ch)


def _lower_turkic(text: str) -> str:
    # Order matters: "I" + dot above folds to plain "i" before bare "I" is
    # mapped to dotless i. The final lower() keeps final-sigma handling.
    text = text.replace("I" + _DOT_ABOVE, "i").replace(_DOTTED_CAPITAL_I, "i")
    return text.replace("I", _DOTLESS_I).lower()


def _more_above(text: str, start: int) -> bool:
    """True if an accent above follows before the next base character."""
    for ch in text[start:]:
        ccc = _combining_class(ch)
        if ccc == 230:
            return True
        if ccc == 0:
            return False
    return False


def _lower_lithuanian(text: str) -> str:
    out: list[str] = []
    for i, ch in enumerate(text):
        if ch in _LT_LOWER_ACCENTED:
            out.append(_LT_LOWER_ACCENTED[ch])
        elif ch in _LT_LOWER_MORE_ABOVE and _more_above(text, i + 1):
            out.append(_LT_LOWER_MORE_ABOVE[ch])
        else:
            out.append(ch)
    return "".join(out).lower()


def _upper_lithuanian(text: str) -> str:
    out: list[str] = []
    after_soft_dotted = False
    for ch in text:
        if ch == _DOT_ABOVE and after_soft_dotted:
            continue
        if ch in _SOFT_DOTTED:
            after_soft_dotted = True
        elif _combining_class(ch) in (0, 230):
            after_soft_dotted = False
        out.append(ch)
    return "".join(out).upper()
