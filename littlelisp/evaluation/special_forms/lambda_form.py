from littlelisp import EvaluatorFn
from littlelisp import SExpression, LispValue
from littlelisp.types.atom import Atom
from littlelisp.types.errors import LispSyntaxError
from littlelisp.types.environment import Environment
from littlelisp.types.lambda_fn import Lambda


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...) allows zero or more body forms; the value of
    # a call is the value of the last one, or None with no body at all.
    if not tail or not isinstance(tail[0], list):
        raise LispSyntaxError("lambda requires a parameter list")

    params = tail[0]
    for p in params:
        if not (isinstance(p, Atom) and p.is_identifier):
            raise LispSyntaxError(f"lambda parameter {p} is not an identifier")

    return Lambda([p.value for p in params], list(tail[1:]), env)
