from __future__ import annotations

import importlib
import logging
import math
import operator
from threading import Lock
from typing import Any, Callable, Optional

from decimal_bridge.decimal_kind import DecimalKind, classify_canonical_string
from decimal_bridge.digits import int_to_digits
from decimal_bridge.errors import DecimalRuntimeError

logger = logging.getLogger(__name__)

DEFAULT_DECIMAL_MODULE = "decimal"
DEFAULT_DECIMAL_CLASS = "Decimal"

# Fast-path bounds: signed 64-bit machine integer
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


class PythonDecimalRuntime:
    """Foreign decimal runtime backed by an importable Python decimal class.

    By default this is `decimal.Decimal`. Any class that accepts a decimal-number string in its
    constructor and renders itself back via `str()` works, e.g. `_pydecimal.Decimal`.

    The constructor handle is imported lazily on first use and then cached for the lifetime of
    this runtime. Resolution is thread-safe: when several threads race, exactly one import
    happens and all callers receive the same handle.
    """

    def __init__(
        self,
        module_name: str = DEFAULT_DECIMAL_MODULE,
        class_name: str = DEFAULT_DECIMAL_CLASS,
    ) -> None:
        """Initialize the runtime without importing anything yet.

        Args:
            module_name: Name of the module that holds the decimal class.
            class_name: Name of the decimal class inside $module_name.

        Raises:
            ValueError: If $module_name or $class_name is empty.
        """
        # Check: both names must be non-empty strings
        if not isinstance(module_name, str) or not module_name.strip():
            raise ValueError(f"$module_name must be a non-empty string, but provided value is: '{module_name}'")
        if not isinstance(class_name, str) or not class_name.strip():
            raise ValueError(f"$class_name must be a non-empty string, but provided value is: '{class_name}'")

        self._module_name = module_name.strip()
        self._class_name = class_name.strip()

        # Resolved once, then read-only
        self._constructor: Optional[Callable[[str], Any]] = None
        self._constructor_lock = Lock()

    # region Properties

    @property
    def module_name(self) -> str:
        return self._module_name

    @property
    def class_name(self) -> str:
        return self._class_name

    @property
    def is_resolved(self) -> bool:
        """True once the constructor handle has been resolved."""
        return self._constructor is not None

    # endregion

    # region ForeignDecimalRuntime protocol

    def resolve_decimal_constructor(self) -> Callable[[str], Any]:
        """Import and cache the decimal constructor; return the cached handle afterwards.

        Returns:
            The decimal class (callable with a single string argument).

        Raises:
            DecimalRuntimeError: If the module cannot be imported, or it has no callable
                attribute named $class_name. A failed resolution is not cached, so a later
                call tries again.
        """
        constructor = self._constructor
        if constructor is not None:
            return constructor

        with self._constructor_lock:
            # Another thread may have won the race while we waited for the lock
            if self._constructor is not None:
                return self._constructor

            qualified_name = f"{self._module_name}.{self._class_name}"
            try:
                module = importlib.import_module(self._module_name)
            except ImportError as e:
                logger.error(f"Failed to import decimal module '{self._module_name}': {e}")
                raise DecimalRuntimeError(f"Cannot call `resolve_decimal_constructor` because module $module_name ('{self._module_name}') cannot be imported") from e

            constructor = getattr(module, self._class_name, None)
            if constructor is None or not callable(constructor):
                logger.error(f"Decimal constructor '{qualified_name}' is missing or not callable")
                raise DecimalRuntimeError(f"Cannot call `resolve_decimal_constructor` because '{qualified_name}' is not a callable decimal constructor")

            self._constructor = constructor
            logger.debug(f"Resolved decimal constructor '{qualified_name}'")
            return constructor

    def construct(self, canonical_string: str) -> Any:
        """Create a foreign decimal by calling the resolved constructor with $canonical_string.

        Raises:
            DecimalRuntimeError: If resolution fails or the constructor call raises.
        """
        constructor = self.resolve_decimal_constructor()
        try:
            return constructor(canonical_string)
        except Exception as e:
            raise DecimalRuntimeError(f"Cannot call `construct` because {self._module_name}.{self._class_name}('{canonical_string}') failed: {e}") from e

    def render_canonical_string(self, value: Any) -> str:
        # Python ints above the interpreter digit limit cannot go through str()
        if isinstance(value, int) and not isinstance(value, bool):
            return int_to_digits(value)
        return str(value)

    def as_exact_machine_integer(self, value: Any) -> int | None:
        """Return $value as int if it is an integer type (implements `__index__`) within i64 range.

        Decimal values never qualify, not even integral ones like `Decimal("1.0")`, because their
        scale would be lost.
        """
        try:
            integer = operator.index(value)
        except TypeError:
            return None

        if I64_MIN <= integer <= I64_MAX:
            return integer
        return None

    def classify(self, value: Any, canonical_string: str | None = None) -> DecimalKind:
        """Return the `DecimalKind` of $value.

        Uses the value's own `is_nan()` / `is_infinite()` (the `decimal.Decimal` API) when
        present, `math.isnan` / `math.isinf` for floats, and the canonical string otherwise. An
        already rendered $canonical_string is reused instead of rendering $value again.
        """
        is_nan = getattr(value, "is_nan", None)
        is_infinite = getattr(value, "is_infinite", None)
        if callable(is_nan) and callable(is_infinite):
            if is_nan():
                return DecimalKind.NAN
            if is_infinite():
                return DecimalKind.INFINITY
            return DecimalKind.FINITE

        if isinstance(value, float):
            if math.isnan(value):
                return DecimalKind.NAN
            if math.isinf(value):
                return DecimalKind.INFINITY
            return DecimalKind.FINITE

        if canonical_string is None:
            canonical_string = self.render_canonical_string(value)
        return classify_canonical_string(canonical_string)

    # endregion

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(module_name='{self._module_name}', class_name='{self._class_name}', is_resolved={self.is_resolved})"
