__version__ = "0.0.1"

from decimal_bridge.big_decimal import BigDecimal, ONE, ZERO
from decimal_bridge.bridge import DecimalBridge, create_default_bridge
from decimal_bridge.decimal_kind import DecimalKind
from decimal_bridge.errors import DecimalParseError, DecimalRuntimeError, InvalidDecimalError
from decimal_bridge.runtime.protocol import ForeignDecimalRuntime
from decimal_bridge.runtime.python_decimal_runtime import PythonDecimalRuntime

__all__ = [
    "BigDecimal",
    "ONE",
    "ZERO",
    "DecimalBridge",
    "create_default_bridge",
    "DecimalKind",
    "DecimalParseError",
    "DecimalRuntimeError",
    "InvalidDecimalError",
    "ForeignDecimalRuntime",
    "PythonDecimalRuntime",
]
