from __future__ import annotations

import logging
from typing import Any

from decimal_bridge.big_decimal import BigDecimal
from decimal_bridge.errors import DecimalParseError, InvalidDecimalError
from decimal_bridge.runtime.protocol import ForeignDecimalRuntime
from decimal_bridge.runtime.python_decimal_runtime import PythonDecimalRuntime

logger = logging.getLogger(__name__)


class DecimalBridge:
    """Converts decimal values between `BigDecimal` and a foreign decimal runtime.

    Both directions are lossless: digits, sign and scale survive a round trip. The only value
    that cannot cross from the foreign side is a non-finite one (NaN, Infinity), because
    `BigDecimal` has no such variant.

    The bridge holds no mutable state. It may be shared between threads as long as its
    $runtime allows concurrent use.
    """

    def __init__(self, runtime: ForeignDecimalRuntime) -> None:
        """Initialize the bridge.

        Args:
            runtime: Foreign decimal runtime used to construct, render and inspect foreign values.
        """
        self._runtime = runtime

    @property
    def runtime(self) -> ForeignDecimalRuntime:
        """Get the foreign decimal runtime."""
        return self._runtime

    def from_foreign(self, value: Any) -> BigDecimal:
        """Convert a foreign decimal into a `BigDecimal`.

        Integers within the signed 64-bit range take a fast path. Every other value is rendered
        to its canonical string and parsed, which never introduces binary rounding error.

        Args:
            value: Foreign decimal (or integer) value.

        Returns:
            BigDecimal: Value with the same digits, sign and scale as $value.

        Raises:
            InvalidDecimalError: If $value is NaN or Infinity, or its string form is not a
                decimal number.
        """
        # Fast path: exact machine integers skip string rendering; must agree with the slow path
        integer = self._runtime.as_exact_machine_integer(value)
        if integer is not None:
            return BigDecimal.from_int(integer)

        text = self._runtime.render_canonical_string(value)

        # Raise: non-finite values have no BigDecimal counterpart
        kind = self._runtime.classify(value, text)
        if not kind.is_finite:
            logger.debug(f"Rejected non-finite foreign decimal '{text}' ({kind.name})")
            raise InvalidDecimalError(text, kind, f"Cannot call `from_foreign` because $value ('{text}') is {kind.name}, which has no BigDecimal representation")

        try:
            return BigDecimal.from_str(text)
        except DecimalParseError as e:
            raise InvalidDecimalError(text, kind, e.message) from e

    def to_foreign(self, value: BigDecimal) -> Any:
        """Convert a `BigDecimal` into a foreign decimal.

        Every `BigDecimal` is finite, so this conversion cannot fail because of the value itself.

        Args:
            value: Value to convert.

        Returns:
            Foreign decimal built from the canonical string of $value.

        Raises:
            TypeError: If $value is not a `BigDecimal`.
            DecimalRuntimeError: If the foreign runtime cannot be resolved or invoked.
        """
        if not isinstance(value, BigDecimal):
            raise TypeError(f"$value must be a BigDecimal, but provided value is: {value!r}")

        return self._runtime.construct(str(value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(runtime={self._runtime!r})"


def create_default_bridge() -> DecimalBridge:
    """Create a new `DecimalBridge` over a fresh `PythonDecimalRuntime` for `decimal.Decimal`.

    The caller owns the returned bridge; nothing is cached at module level.
    """
    return DecimalBridge(PythonDecimalRuntime())
