"""Textual rendering of runtime values for `print` and the shell."""

from __future__ import annotations

import math

from littlelisp import LispValue
from littlelisp.types.lambda_fn import Lambda


def format_number(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x.is_integer() and abs(x) < 1e21:
        return str(int(x))
    return repr(x)


def to_string(value: LispValue) -> str:
    """Render a value: 15.0 -> 15, lists as (a b c), None as undefined."""
    if value is None:
        return "undefined"
    if isinstance(value, (int, float)):
        return format_number(float(value))
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return "(" + " ".join(_repr_item(v) for v in value) + ")"
    if isinstance(value, Lambda):
        return str(value)
    if callable(value):
        name = getattr(value, "lisp_name", getattr(value, "__name__", "?"))
        return f"<builtin {name}>"
    return str(value)


def _repr_item(value: LispValue) -> str:
    # strings nested in a list keep their quotes
    if isinstance(value, str):
        return f'"{value}"'
    return to_string(value)
