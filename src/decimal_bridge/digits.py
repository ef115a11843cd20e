from __future__ import annotations

# Conversions between base-10 digit strings and ints of any length.
# Plain `int(str)` / `str(int)` are capped by `sys.get_int_max_str_digits()` (4300 digits by default),
# so long values are split recursively into pieces that stay below the smallest allowed cap (640).

# Largest piece converted directly; below the minimum value of the interpreter's digit limit
_DIRECT_DIGITS = 512

# log10(2), used to estimate the number of decimal digits from the bit length
_LOG10_2 = 0.30102999566398120


def digits_to_int(digits: str) -> int:
    """Convert a string of ASCII digits (no sign) into an int.

    Args:
        digits: Non-empty string of characters '0'..'9'.

    Returns:
        The integer value of $digits.
    """
    if len(digits) <= _DIRECT_DIGITS:
        return int(digits)

    low_len = len(digits) // 2
    high = digits_to_int(digits[:-low_len])
    low = digits_to_int(digits[-low_len:])
    return high * 10**low_len + low


def int_to_digits(value: int) -> str:
    """Render an int as a decimal string, with a leading "-" for negative values.

    Args:
        value: Integer of any size.

    Returns:
        Same text as `str(value)`, without the interpreter's digit limit.
    """
    if value < 0:
        return "-" + _abs_int_to_digits(-value)
    return _abs_int_to_digits(value)


def _abs_int_to_digits(value: int) -> str:
    # Estimate is a lower bound on the digit count minus one, so both halves stay non-empty
    estimated_digits = int(value.bit_length() * _LOG10_2)
    if estimated_digits <= _DIRECT_DIGITS:
        return str(value)

    low_len = estimated_digits // 2
    high, low = divmod(value, 10**low_len)
    return _abs_int_to_digits(high) + _abs_int_to_digits(low).rjust(low_len, "0")


def strip_trailing_zeros(value: int) -> tuple[int, int]:
    """Remove trailing decimal zeros from a non-zero int.

    Zeros are removed in chunks that double while they divide evenly, so values with many
    trailing zeros take a logarithmic number of divisions.

    Args:
        value: Non-zero integer.

    Returns:
        Tuple of (value without trailing zeros, number of zeros removed).
    """
    stripped = 0
    chunk = 1
    while True:
        quotient, remainder = divmod(value, 10**chunk)
        if remainder == 0:
            value = quotient
            stripped += chunk
            chunk *= 2
        elif chunk > 1:
            chunk //= 2
        else:
            return value, stripped
