from __future__ import annotations

from typing import Any, Callable, Protocol

from decimal_bridge.decimal_kind import DecimalKind


# region Interface


class ForeignDecimalRuntime(Protocol):
    """Access to the decimal type of a foreign runtime.

    `DecimalBridge` talks to the foreign side only through this interface. Implementations own
    any process-wide state (such as a cached constructor handle) and their own serialization
    discipline; the bridge never arbitrates access to them.
    """

    def resolve_decimal_constructor(self) -> Callable[[str], Any]:
        """Return the foreign decimal constructor.

        Resolution happens at most once per runtime; later calls return the same handle.

        Raises:
            DecimalRuntimeError: If the foreign decimal type is unavailable.
        """
        ...

    def construct(self, canonical_string: str) -> Any:
        """Create a foreign decimal from a decimal-number string.

        Raises:
            DecimalRuntimeError: If the constructor cannot be resolved or invoked.
        """
        ...

    def render_canonical_string(self, value: Any) -> str:
        """Return the exact textual form of $value, including non-finite markers like "NaN"."""
        ...

    def as_exact_machine_integer(self, value: Any) -> int | None:
        """Return $value as an int if it is an integer within the signed 64-bit range, else None."""
        ...

    def classify(self, value: Any, canonical_string: str | None = None) -> DecimalKind:
        """Return whether $value is finite, NaN or Infinity.

        Callers that already rendered $value pass the text as $canonical_string, so it is not rendered again.
        """
        ...


# endregion
