# Core type aliases for littlelisp's data model.
# Plain Python types carry both code and runtime values:
# - SExpression: an Atom or a (possibly nested) Python list of SExpressions,
#   as produced by the reader.
# - LispValue: float, str, list, a callable (builtin or Lambda), or None for an
#   absent value, as produced by the evaluator.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Parsed forms (Atom | list)
SExpression = Any

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]

# Public entry points (imported last, the modules below use the aliases above)
from littlelisp.eval import parse, evaluate  # noqa: E402

__all__ = ["parse", "evaluate", "LispValue", "SExpression", "EvaluatorFn"]
