"""Built-in functions for the littlelisp runtime environment.

Every builtin takes the calling environment and the list of evaluated
arguments. Arithmetic is binary over floats with IEEE semantics: division by
zero yields an infinity or NaN instead of failing.
"""
from __future__ import annotations

import math
from typing import Callable

from littlelisp import LispValue
from littlelisp.printer import to_string
from littlelisp.types.environment import Environment
from littlelisp.types.errors import LispTypeError

Builtin = Callable[[Environment, list[LispValue]], LispValue]


def _operands(expr: list[LispValue]) -> tuple[LispValue, LispValue]:
    # Lenient arity: a missing operand is absent (None), extras are ignored
    a = expr[0] if len(expr) > 0 else None
    b = expr[1] if len(expr) > 1 else None
    return a, b


def _binary(name: str, op: Callable[[LispValue, LispValue], LispValue]) -> Builtin:
    def builtin(env: Environment, expr: list[LispValue]) -> LispValue:
        a, b = _operands(expr)
        try:
            return op(a, b)
        except TypeError as e:
            raise LispTypeError(
                f"Invalid operands to {name}: {to_string(a)}, {to_string(b)}"
            ) from e

    builtin.lisp_name = name
    builtin.__name__ = f"builtin_{name}"
    return builtin


def _divide(a: LispValue, b: LispValue) -> LispValue:
    if isinstance(a, (int, float)) and isinstance(b, (int, float)) and b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        # sign of the infinity follows the signs of both operands (b may be -0.0)
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# -------------------------------
# Arithmetic
# -------------------------------
add = _binary("+", lambda a, b: a + b)
sub = _binary("-", lambda a, b: a - b)
mul = _binary("*", lambda a, b: a * b)
div = _binary("/", _divide)


# -------------------------------
# Sequences
# -------------------------------
def first(env: Environment, expr: list[LispValue]) -> LispValue:
    """Head of a list or string; an absent value (None) when it is empty."""
    seq = expr[0] if expr else None
    if not isinstance(seq, (list, str)):
        raise LispTypeError(f"first expects a list, got {to_string(seq)}")
    return seq[0] if seq else None


def rest(env: Environment, expr: list[LispValue]) -> LispValue:
    """All but the head of a list or string."""
    seq = expr[0] if expr else None
    if not isinstance(seq, (list, str)):
        raise LispTypeError(f"rest expects a list, got {to_string(seq)}")
    return seq[1:]


def print_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    """Write the value to standard output and return it unchanged."""
    value = expr[0] if expr else None
    print(to_string(value))
    return value


first.lisp_name = "first"
rest.lisp_name = "rest"
print_builtin.lisp_name = "print"

BUILTINS: dict[str, Builtin] = {
    "first": first,
    "rest": rest,
    "print": print_builtin,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update(BUILTINS)


def make_global_env() -> Environment:
    """Fresh root environment seeded with the builtin library."""
    env = Environment()
    register(env)
    return env
