"""Application engine for littlelisp.

Centralizes function application for the evaluator:
- Lambda closures: arguments are bound in a child frame of the captured
  environment and the body forms are evaluated there in order.
- Python callables registered in the environment (builtins), invoked with the
  calling environment and the list of evaluated arguments.
"""

from __future__ import annotations

from typing import Callable

from littlelisp import LispValue, EvaluatorFn
from littlelisp.types.environment import Environment
from littlelisp.types.lambda_fn import Lambda
from littlelisp.types.errors import LispTypeError


def is_applicable(head: object) -> bool:
    return isinstance(head, Lambda) or callable(head)


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lambda to already-evaluated arguments.

    Earlier body forms run for their effects (define, print); the value of the
    last one is returned.
    """
    call_env = fn.extend_env(args)
    result: LispValue = None
    for form in fn.body:
        result = evaluate_fn(form, call_env)
    return result


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Python callable.

    - For Lambda, defer to apply_lambda.
    - For Python callables (builtins), invoke with the runtime env and list of args.
    - Otherwise, raise a type error.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise LispTypeError(f"Cannot apply non-function {head}")
