from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decimal_bridge.decimal_kind import DecimalKind


class DecimalParseError(ValueError):
    """Raised when a string is not valid finite decimal-number syntax.

    Attributes:
        text (str): The string that failed to parse.
        message (str): Human-readable diagnostic.
    """

    def __init__(self, text: str, message: str):
        super().__init__(message)
        self.text = text
        self.message = message

    def __reduce__(self):
        return self.__class__, (self.text, self.message)


class InvalidDecimalError(ValueError):
    """Raised when a foreign decimal value has no `BigDecimal` counterpart.

    This is the only data-level error of the bridge. It is raised for NaN and Infinity
    foreign values, and for foreign objects whose string form is not a decimal number.

    Attributes:
        text (str): Canonical string of the rejected foreign value.
        kind (DecimalKind): Category of the rejected value.
        message (str): Human-readable diagnostic.
    """

    def __init__(self, text: str, kind: DecimalKind, message: str):
        super().__init__(message)
        self.text = text
        self.kind = kind
        self.message = message

    def __reduce__(self):
        return self.__class__, (self.text, self.kind, self.message)


class DecimalRuntimeError(RuntimeError):
    """Raised when the foreign decimal runtime cannot be resolved or invoked.

    This is an environment fault, not a data error. It is never retried.
    """

    pass
