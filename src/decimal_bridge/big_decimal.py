from __future__ import annotations

import re
from types import NotImplementedType

from decimal_bridge.digits import digits_to_int, int_to_digits, strip_trailing_zeros
from decimal_bridge.errors import DecimalParseError

# Decimal literal: optional sign, mantissa with optional point, optional exponent. No whitespace, no "_" separators.
_DECIMAL_LITERAL = re.compile(
    r"(?P<sign>[+-])?"
    r"(?:(?P<int_digits>[0-9]+)(?:\.(?P<frac_digits>[0-9]*))?|\.(?P<frac_only_digits>[0-9]+))"
    r"(?:[eE](?P<exponent>[+-]?[0-9]+))?",
)

# Smallest adjusted exponent rendered in plain notation; same cut-off as `decimal.Decimal.__str__`
_MIN_PLAIN_ADJUSTED_EXPONENT = -6


class BigDecimal:
    """Arbitrary-precision signed decimal number `unscaled × 10^-scale`.

    The value is immutable and always finite. Unlike `decimal.Decimal` there is no NaN,
    Infinity or negative zero.

    Equality is numeric: `BigDecimal(10, 1) == BigDecimal(1, 0)`. Use
    `is_same_representation` to compare digits and scale exactly.

    Attributes:
        unscaled (int): The integer holding all significant digits and the sign.
        scale (int): Number of digits to the right of the decimal point. Negative values
            multiply $unscaled by a power of ten.
    """

    __slots__ = ("_unscaled", "_scale")

    def __init__(self, unscaled: int, scale: int = 0) -> None:
        """Initialize a new BigDecimal.

        Args:
            unscaled: Integer with all digits of the value.
            scale: Power of ten that $unscaled is divided by.

        Raises:
            TypeError: If $unscaled or $scale is not an `int`.
        """
        # Raise: both parts must be ints (bool excluded)
        if not isinstance(unscaled, int) or isinstance(unscaled, bool):
            raise TypeError(f"$unscaled must be an int, but provided value is: {unscaled!r}")
        if not isinstance(scale, int) or isinstance(scale, bool):
            raise TypeError(f"$scale must be an int, but provided value is: {scale!r}")

        self._unscaled = unscaled
        self._scale = scale

    # region Factories

    @classmethod
    def from_int(cls, value: int) -> BigDecimal:
        """Create a BigDecimal with scale 0 from an integer."""
        return cls(int(value), 0)

    @classmethod
    def from_str(cls, text: str) -> BigDecimal:
        """Parse a decimal-number string without any loss of digits or scale.

        Accepts plain ("-12.50"), point-leading (".5") and exponent ("1.23E+5", "1E-7")
        forms. The scale of the result is the number of fraction digits minus the exponent,
        so "1.23E+5" parses to `BigDecimal(123, -3)`.

        Args:
            text: Decimal-number string.

        Returns:
            BigDecimal: Parsed value.

        Raises:
            TypeError: If $text is not a string.
            DecimalParseError: If $text is not valid decimal-number syntax. Non-finite markers
                such as "NaN" and "Infinity" are never valid.
        """
        if not isinstance(text, str):
            raise TypeError(f"$text must be a str, but provided value is: {text!r}")

        match = _DECIMAL_LITERAL.fullmatch(text)
        if match is None:
            raise DecimalParseError(text, f"Cannot call `BigDecimal.from_str` because $text ('{text}') is not a valid decimal number")

        int_digits = match.group("int_digits") or ""
        frac_digits = match.group("frac_digits") or match.group("frac_only_digits") or ""
        exponent_text = match.group("exponent") or "0"
        exponent = digits_to_int(exponent_text.lstrip("+-"))
        if exponent_text.startswith("-"):
            exponent = -exponent

        unscaled = digits_to_int(int_digits + frac_digits)
        if match.group("sign") == "-":
            unscaled = -unscaled

        return cls(unscaled, len(frac_digits) - exponent)

    # endregion

    # region Properties

    @property
    def unscaled(self) -> int:
        """Get the unscaled integer."""
        return self._unscaled

    @property
    def scale(self) -> int:
        """Get the scale."""
        return self._scale

    @property
    def sign(self) -> int:
        """Get the sign as -1, 0 or 1."""
        return (self._unscaled > 0) - (self._unscaled < 0)

    @property
    def is_zero(self) -> bool:
        return self._unscaled == 0

    # endregion

    # region Representation

    def normalized(self) -> BigDecimal:
        """Return the numerically equal value with trailing zeros removed from $unscaled.

        Zero normalizes to `BigDecimal(0, 0)`.
        """
        if self._unscaled == 0:
            return BigDecimal(0, 0)

        unscaled, stripped = strip_trailing_zeros(self._unscaled)
        return BigDecimal(unscaled, self._scale - stripped)

    def is_same_representation(self, other: BigDecimal) -> bool:
        """Return True if $other has exactly the same unscaled integer and scale."""
        if not isinstance(other, BigDecimal):
            return False
        return self._unscaled == other._unscaled and self._scale == other._scale

    def __str__(self) -> str:
        """Render the canonical decimal string.

        - scale 0: integer digits ("-42")
        - positive scale: exactly $scale fraction digits ("0.0012", "1.50"), unless six or
          more zeros would follow the decimal point; then digits with a negative exponent
          ("1E-7", "123E-10"), as `decimal.Decimal` does
        - negative scale: digits with a positive exponent ("123E+3")

        The string parses back (here and in `decimal.Decimal`) to the same digits and scale.
        Its length grows with the number of digits, never with the size of $scale alone.
        """
        sign = "-" if self._unscaled < 0 else ""
        digits = int_to_digits(abs(self._unscaled))

        if self._scale == 0:
            return f"{sign}{digits}"

        if self._scale < 0:
            return f"{sign}{digits}E+{int_to_digits(-self._scale)}"

        # Adjusted exponent: position of the most significant digit relative to the decimal point
        adjusted = len(digits) - 1 - self._scale
        if adjusted < _MIN_PLAIN_ADJUSTED_EXPONENT:
            return f"{sign}{digits}E-{int_to_digits(self._scale)}"

        digits = digits.rjust(self._scale + 1, "0")
        return f"{sign}{digits[: -self._scale]}.{digits[-self._scale :]}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"

    # endregion

    # region Comparison

    def __eq__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return self.normalized().is_same_representation(other.normalized())

    def __hash__(self) -> int:
        normalized = self.normalized()
        return hash((normalized._unscaled, normalized._scale))

    # endregion


ZERO = BigDecimal(0)
ONE = BigDecimal(1)
