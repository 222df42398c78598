"""Core tree-walking evaluator for littlelisp.

Dispatches on expression shape: atoms evaluate to their literal value or to
the binding of their identifier; lists are either special forms or
applications. A list whose first value is not callable evaluates to the list
of its element values.
"""

from __future__ import annotations

import logging

from littlelisp import SExpression, LispValue
from littlelisp.types.atom import Atom, AtomKind
from littlelisp.types.environment import Environment
from littlelisp.evaluation.apply import apply, is_applicable
from littlelisp.evaluation.special_forms import SPECIAL_FORMS, SpecialForm

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment | None = None) -> LispValue:
    """
    Evaluate `expr` in `env`; with no environment, a fresh one seeded with
    the builtin library is used.
    """
    if env is None:
        from littlelisp.builtin.env_builtin import make_global_env

        env = make_global_env()

    match expr:
        case Atom(kind=AtomKind.IDENTIFIER):
            return env.lookup(expr.value)

        case Atom():
            # numbers and strings are self-evaluating
            return expr.value

        case []:
            return []

        case [Atom(kind=AtomKind.IDENTIFIER) as head, *tail] if (
            form := SpecialForm.lookup(head.value)
        ) is not None:
            logger.debug("Special form %s: %r", form.value, tail)
            return SPECIAL_FORMS[form](tail, env, evaluate)

        case list():
            values = [evaluate(e, env) for e in expr]
            head, *args = values
            if is_applicable(head):
                return apply(head, args, env, evaluate)
            # Not a call: the list is plain data
            return values

    # Anything else (already a runtime value) evaluates to itself
    return expr
