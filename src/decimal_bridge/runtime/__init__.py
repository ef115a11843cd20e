from decimal_bridge.runtime.protocol import ForeignDecimalRuntime
from decimal_bridge.runtime.python_decimal_runtime import PythonDecimalRuntime

__all__ = ["ForeignDecimalRuntime", "PythonDecimalRuntime"]
