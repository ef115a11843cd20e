def pytest_make_parametrize_id(config, val, argname):
    # Parametrize ids fall back to str(val), which raises for ints past the interpreter's
    # int -> str digit limit; give such values a short id instead.
    if isinstance(val, int) and not isinstance(val, bool) and val.bit_length() > 4000:
        return f"{argname}_bits{val.bit_length()}"
    return None
