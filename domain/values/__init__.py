"""Helpers over the JSON-like value tree documents are made of."""
from __future__ import annotations

import math

from domain.entities import JSONValue, ValueKind

# Integral floats at or above this magnitude keep their exponent form.
_PLAIN_INTEGER_LIMIT = 1e21


def kind_of(value: object) -> ValueKind:
    """Classify ``value``; raise ``TypeError`` for anything outside the model."""

    # bool must be tested before int: it is a subclass of int.
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if value is None:
        return ValueKind.NULL
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    raise TypeError(f"unsupported document value of type {type(value).__name__}")


def format_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    return repr(value)


def format_value(value: JSONValue) -> str:
    """Return the default string representation used by index keys and equality."""

    kind = kind_of(value)
    if kind is ValueKind.STRING:
        return value  # type: ignore[return-value]
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        return format_number(value)  # type: ignore[arg-type]
    if kind is ValueKind.NULL:
        return "null"
    raise TypeError(f"{kind.value} values have no scalar representation")


def parse_float(text: str) -> float | None:
    """Parse ``text`` as a float, returning ``None`` when it is not numeric.

    Only plain ASCII literals are accepted: no digit separators and no
    surrounding whitespace.
    """

    if "_" in text or not text.isascii() or text != text.strip():
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number):
        return None
    return number


def coerce_number(value: JSONValue) -> float | None:
    """Numeric view of a resolved document value for relational comparison."""

    kind = kind_of(value)
    if kind is ValueKind.NUMBER:
        try:
            number = float(value)  # type: ignore[arg-type]
        except OverflowError:
            # Integers beyond the float range compare as infinities.
            return math.inf if value > 0 else -math.inf  # type: ignore[operator]
        return None if math.isnan(number) else number
    if kind is ValueKind.STRING:
        return parse_float(value)  # type: ignore[arg-type]
    return None


__all__ = ["kind_of", "format_number", "format_value", "parse_float", "coerce_number"]
