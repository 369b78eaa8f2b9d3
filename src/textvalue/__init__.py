"""textvalue: JavaScript-style string operations over a mutable buffer."""

from __future__ import annotations

from .casing import DEFAULT_LOCALE as DEFAULT_LOCALE
from .encoding import REPLACEMENT_CHARACTER as REPLACEMENT_CHARACTER
from .errors import (
    InvalidArgumentError as InvalidArgumentError,
    TextValueError as TextValueError,
    UnsupportedOperationError as UnsupportedOperationError,
)
from .patterns import (
    LiteralSeparator as LiteralSeparator,
    RegexSeparator as RegexSeparator,
    Separator as Separator,
    detect_separator as detect_separator,
)
from .text import (
    DEFAULT_FORM as DEFAULT_FORM,
    NORMALIZATION_FORMS as NORMALIZATION_FORMS,
    TextValue as TextValue,
)
