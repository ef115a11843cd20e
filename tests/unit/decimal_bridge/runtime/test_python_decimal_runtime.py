import _pydecimal
import decimal
import importlib
import logging
import threading
from decimal import Decimal
from types import SimpleNamespace

import pytest

from decimal_bridge.decimal_kind import DecimalKind
from decimal_bridge.errors import DecimalRuntimeError
from decimal_bridge.runtime import python_decimal_runtime
from decimal_bridge.runtime.python_decimal_runtime import I64_MAX, I64_MIN, PythonDecimalRuntime
from tests.helpers.test_assistant import TEST_ASSISTANT as TA


def test_constructor_is_resolved_lazily_and_cached():
    """Test that nothing is imported before first use and the same handle is returned afterwards."""
    runtime = PythonDecimalRuntime()
    assert not runtime.is_resolved

    constructor = runtime.resolve_decimal_constructor()

    assert constructor is decimal.Decimal
    assert runtime.is_resolved
    assert runtime.resolve_decimal_constructor() is constructor


def test_concurrent_resolution_returns_one_handle(monkeypatch):
    """Test that racing threads import the module only once and all get the same handle."""
    import_calls = []

    def counting_import_module(name):
        import_calls.append(name)
        return importlib.import_module(name)

    monkeypatch.setattr(python_decimal_runtime, "importlib", SimpleNamespace(import_module=counting_import_module))

    runtime = PythonDecimalRuntime()
    barrier = threading.Barrier(8)
    results = []

    def resolve():
        barrier.wait()
        results.append(runtime.resolve_decimal_constructor())

    threads = [threading.Thread(target=resolve) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert import_calls == ["decimal"]
    assert len(results) == 8
    assert all(r is decimal.Decimal for r in results)


def test_alternative_decimal_class():
    """Test that another class with the Decimal contract can back the runtime."""
    runtime = PythonDecimalRuntime(module_name="_pydecimal", class_name="Decimal")

    value = runtime.construct("1.50")

    assert isinstance(value, _pydecimal.Decimal)
    assert str(value) == "1.50"


def test_missing_module_raises_runtime_error(caplog):
    """Test that an unimportable module is an environment fault and is logged."""
    runtime = PythonDecimalRuntime(module_name="no_such_decimal_module_xyz")

    with caplog.at_level(logging.ERROR, logger="decimal_bridge.runtime.python_decimal_runtime"):
        with pytest.raises(DecimalRuntimeError) as exc_info:
            runtime.construct("1")

    assert isinstance(exc_info.value.__cause__, ImportError)
    assert not runtime.is_resolved
    assert "no_such_decimal_module_xyz" in caplog.text


def test_missing_class_raises_runtime_error():
    """Test that a module without the requested class is an environment fault."""
    runtime = PythonDecimalRuntime(class_name="NoSuchDecimal")

    with pytest.raises(DecimalRuntimeError):
        runtime.resolve_decimal_constructor()


def test_non_callable_attribute_raises_runtime_error():
    """Test that a non-callable module attribute is not accepted as constructor."""
    runtime = PythonDecimalRuntime(class_name="MAX_PREC")

    with pytest.raises(DecimalRuntimeError):
        runtime.resolve_decimal_constructor()


def test_failing_constructor_call_is_wrapped():
    """Test that an exception raised by the constructor itself becomes DecimalRuntimeError."""
    runtime = PythonDecimalRuntime()

    with pytest.raises(DecimalRuntimeError) as exc_info:
        runtime.construct("not a number")

    assert isinstance(exc_info.value.__cause__, decimal.InvalidOperation)


@pytest.mark.parametrize("module_name, class_name", [("", "Decimal"), ("decimal", "  "), (None, "Decimal")])
def test_empty_names_are_rejected(module_name, class_name):
    """Test constructor argument validation."""
    with pytest.raises(ValueError):
        PythonDecimalRuntime(module_name=module_name, class_name=class_name)


def test_render_canonical_string():
    """Test that rendering keeps exponent and non-finite markers."""
    runtime = PythonDecimalRuntime()

    assert runtime.render_canonical_string(Decimal("1.50")) == "1.50"
    assert runtime.render_canonical_string(Decimal("1.23E+5")) == "1.23E+5"
    assert runtime.render_canonical_string(Decimal("-Infinity")) == "-Infinity"


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, 0),
        (-17, -17),
        (True, 1),
        (I64_MAX, I64_MAX),
        (I64_MIN, I64_MIN),
        (I64_MAX + 1, None),
        (I64_MIN - 1, None),
        (Decimal("1"), None),
        (Decimal("1.0"), None),
        (1.0, None),
        ("1", None),
    ],
)
def test_as_exact_machine_integer(value, expected):
    """Test that only integer types within i64 range qualify for the fast path."""
    assert PythonDecimalRuntime().as_exact_machine_integer(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("1.5"), DecimalKind.FINITE),
        (Decimal("NaN"), DecimalKind.NAN),
        (Decimal("sNaN"), DecimalKind.NAN),
        (Decimal("Infinity"), DecimalKind.INFINITY),
        (Decimal("-Infinity"), DecimalKind.INFINITY),
        (float("nan"), DecimalKind.NAN),
        (float("-inf"), DecimalKind.INFINITY),
        (0.25, DecimalKind.FINITE),
        ("Infinity", DecimalKind.INFINITY),
        ("12.5", DecimalKind.FINITE),
    ],
)
def test_classify(value, expected):
    """Test classification via the Decimal API, float checks and the canonical string."""
    assert PythonDecimalRuntime().classify(value) is expected


def test_render_canonical_string_for_huge_int():
    """Test that ints past the interpreter digit limit render in full."""
    assert PythonDecimalRuntime().render_canonical_string(10**5000) == "1" + "0" * 5000


def test_classify_reuses_supplied_canonical_string():
    """Test that classify does not render the value again when the string is supplied."""
    runtime = TA.runtime.RecordingRuntime()

    kind = runtime.classify(object(), "-Infinity")

    assert kind is DecimalKind.INFINITY
    assert runtime.calls == ["classify"]
