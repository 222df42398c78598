"""Lambda function representation and argument binding for littlelisp."""

from __future__ import annotations

from io import StringIO

from littlelisp import SExpression, LispValue
from littlelisp.types.environment import Environment


class Lambda:
    """A first-class lambda with formal parameters, body forms, and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(
        self, formals: list[str], body: list[SExpression], env: Environment
    ):
        self.formals: list[str] = formals
        self.body: list[SExpression] = body
        # Captured at definition time, never replaced
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<lambda (")
            buffer.write(" ".join(self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind argument values to the formal parameters in a new child frame of
        the captured environment.

        No arity check: a missing argument binds to None and extra arguments
        are ignored.
        """
        bindings = {
            name: args[i] if i < len(args) else None
            for i, name in enumerate(self.formals)
        }
        return self.env.child(bindings)
