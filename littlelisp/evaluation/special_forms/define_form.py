from littlelisp import EvaluatorFn
from littlelisp import SExpression, LispValue
from littlelisp.types.atom import Atom
from littlelisp.types.errors import LispSyntaxError
from littlelisp.types.environment import Environment


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame and returns the bound value.
    """
    if len(tail) != 2:
        raise LispSyntaxError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not (isinstance(name, Atom) and name.is_identifier):
        raise LispSyntaxError(f"Cannot define {name}: not an identifier")
    value = evaluate_fn(val_expr, env)
    return env.define(name.value, value)
