"""Conversion between SAX attribute text and typed scalar values."""

import math
import re

Scalar = bool | int | float | str

NUMERIC_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def is_numeric(text: str) -> bool:
    """Check whether text matches the numeric grammar."""
    return NUMERIC_PATTERN.fullmatch(text) is not None


def decode(text: str) -> Scalar:
    """Decode an attribute value into a bool, int, float or str.

    Args:
        text: The raw ``val`` attribute text.

    Returns:
        ``True``/``False`` for the literals ``true``/``false``, an int for
        numbers without a decimal point, a float for numbers with one, and
        the original text otherwise. Numbers too large for a float, such as
        ``1e400``, are also kept as text.
    """
    if text == "true":
        return True
    if text == "false":
        return False

    if not is_numeric(text):
        return text

    if "." not in text:
        try:
            if "e" in text or "E" in text:
                return int(float(text))
            return int(text)
        except (OverflowError, ValueError):
            # Beyond float range ("1e400") or the int digit limit
            pass

    value = float(text)
    # Values too large for a float stay as written
    return value if math.isfinite(value) else text


def encode(value: Scalar | None, precision: int = 1) -> str:
    """Encode a scalar as attribute text.

    Floats are always written in fixed-point notation with ``precision``
    digits after the point, so ``3.14159`` becomes ``"3.1"``.
    """
    if value is None:
        return ""
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:.{precision}f}"
    return str(value)
