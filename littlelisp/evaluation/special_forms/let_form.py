from littlelisp import EvaluatorFn
from littlelisp import SExpression, LispValue
from littlelisp.types.atom import Atom
from littlelisp.types.errors import LispSyntaxError
from littlelisp.types.environment import Environment


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((name value) ...) body)

    All bindings go into one new child frame. Each value is evaluated in that
    frame as it fills up, so a binding sees the ones before it. Values are not
    evaluated in the outer environment: a define inside a value expression
    binds in the let frame, and a lambda bound here also sees names bound
    after it.
    """
    if len(tail) != 2 or not isinstance(tail[0], list):
        raise LispSyntaxError("let requires a binding list and a body")

    bindings, body = tail
    let_env = env.child()
    for binding in bindings:
        if not (
            isinstance(binding, list)
            and len(binding) == 2
            and isinstance(binding[0], Atom)
            and binding[0].is_identifier
        ):
            raise LispSyntaxError(f"Malformed let binding: {binding}")
        name, val_expr = binding
        let_env.define(name.value, evaluate_fn(val_expr, let_env))
    return evaluate_fn(body, let_env)
