from __future__ import annotations

import re
from enum import Enum


class DecimalKind(Enum):
    """Category of a foreign decimal value.

    Members:
        FINITE: Representable as a decimal digit string with optional sign and exponent.
        NAN: Quiet or signalling NaN.
        INFINITY: Signed or unsigned Infinity.
    """

    FINITE = "FINITE"
    NAN = "NAN"
    INFINITY = "INFINITY"

    @property
    def is_finite(self) -> bool:
        return self is DecimalKind.FINITE


# Textual non-finite markers as rendered (and accepted) by decimal runtimes, e.g. "NaN", "sNaN123", "-Infinity", "inf"
_NAN_PATTERN = re.compile(r"[+-]?s?nan\d*", re.IGNORECASE)
_INFINITY_PATTERN = re.compile(r"[+-]?inf(inity)?", re.IGNORECASE)


def classify_canonical_string(text: str) -> DecimalKind:
    """Classify a foreign value by its canonical string.

    Strings that are not numbers at all are reported as `DecimalKind.FINITE`; they are
    rejected later, when parsing fails.

    Args:
        text: Canonical string rendered by the foreign runtime.

    Returns:
        The `DecimalKind` of $text.
    """
    if _NAN_PATTERN.fullmatch(text):
        return DecimalKind.NAN
    if _INFINITY_PATTERN.fullmatch(text):
        return DecimalKind.INFINITY
    return DecimalKind.FINITE
