"""Runtime environment for littlelisp.

The Environment stores bindings of identifier names to evaluated values and
supports nested scopes via an `outer` link. Frames are shared by reference: a
closure keeps its defining frame alive, and several child frames may hang off
the same parent.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Mapping, Optional

from littlelisp import LispValue
from littlelisp.types.errors import LispUnboundIdentifier


class Environment:
    """Hierarchical mapping from identifier names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        bindings: Mapping[str, LispValue] | Iterable[tuple[str, LispValue]] | None = None,
        outer: Optional[Environment] = None,
    ):
        self.vars: dict[str, LispValue] = dict(bindings) if bindings else {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: LispValue) -> LispValue:
        """Bind `name` to `value` in this frame only.

        An existing binding of `name` in an outer frame is shadowed, never
        modified.
        """
        self.vars[name] = value
        return value

    def update(self, mapping: Mapping[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        self.vars.update(mapping)

    def child(self, bindings: Mapping[str, LispValue] | None = None) -> Environment:
        """Return a new frame whose parent is this frame."""
        return Environment(bindings, outer=self)

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises LispUnboundIdentifier if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise LispUnboundIdentifier(f"Cannot lookup unbound identifier {name}")
        return env.vars[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            chain = []
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
