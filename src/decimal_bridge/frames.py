from __future__ import annotations

# Column-wise conversion of pandas Series through a DecimalBridge.
# Missing entries (None, pd.NA) stay missing; they are not treated as foreign NaN.

import logging
from typing import Any, Callable

import pandas as pd

from decimal_bridge.bridge import DecimalBridge
from decimal_bridge.errors import InvalidDecimalError

logger = logging.getLogger(__name__)


def series_from_foreign(series: pd.Series, bridge: DecimalBridge) -> pd.Series:
    """Convert a Series of foreign decimals into a Series of `BigDecimal`(s).

    Args:
        series: Object-dtype Series of foreign decimal values. `None` and `pd.NA` entries are kept as `None`.
        bridge: Bridge used for each element.

    Returns:
        New object-dtype Series with the same index and name.

    Raises:
        TypeError: If $series is not a pandas Series.
        InvalidDecimalError: If an element is NaN or Infinity. The message names the index label.
    """
    _check_series(series, "series_from_foreign")

    def convert(label: Any, value: Any) -> Any:
        try:
            return bridge.from_foreign(value)
        except InvalidDecimalError as e:
            raise InvalidDecimalError(e.text, e.kind, f"Cannot call `series_from_foreign` because element at index {label!r} is invalid: {e.message}") from e

    return _convert_elements(series, convert)


def series_to_foreign(series: pd.Series, bridge: DecimalBridge) -> pd.Series:
    """Convert a Series of `BigDecimal`(s) into a Series of foreign decimals.

    Args:
        series: Object-dtype Series of `BigDecimal` values. `None` and `pd.NA` entries are kept as `None`.
        bridge: Bridge used for each element.

    Returns:
        New object-dtype Series with the same index and name.

    Raises:
        TypeError: If $series is not a pandas Series, or an element is not a `BigDecimal`.
        DecimalRuntimeError: If the foreign runtime cannot be resolved or invoked.
    """
    _check_series(series, "series_to_foreign")
    return _convert_elements(series, lambda label, value: bridge.to_foreign(value))


def _check_series(series: Any, caller: str) -> None:
    # Raise: only pandas Series are supported
    if not isinstance(series, pd.Series):
        raise TypeError(f"Cannot call `{caller}` because $series is not a pandas Series, but {type(series).__name__}")


def _convert_elements(series: pd.Series, convert: Callable[[Any, Any], Any]) -> pd.Series:
    values = []
    for label, value in series.items():
        if _is_missing(value):
            values.append(None)
        else:
            values.append(convert(label, value))

    logger.debug(f"Converted {len(values)} element(s) of Series '{series.name}'")
    return pd.Series(values, index=series.index, name=series.name, dtype=object)


def _is_missing(value: Any) -> bool:
    # Only pandas' own missing markers count; a foreign NaN decimal must still be rejected by the bridge
    return value is None or value is pd.NA
