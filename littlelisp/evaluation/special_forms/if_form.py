from littlelisp import EvaluatorFn
from littlelisp import SExpression, LispValue
from littlelisp.types.errors import LispSyntaxError
from littlelisp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) < 2:
        raise LispSyntaxError("if requires a condition and a then-expression")

    cond = evaluate_fn(tail[0], env)
    # Python truthiness: 0, "", () and an absent value are false
    if cond:
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return None
