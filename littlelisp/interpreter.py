from __future__ import annotations

import logging
import sys
from typing import Literal

from littlelisp import LispValue
from littlelisp.config import get_log_level, get_prompt
from littlelisp.reader.parser import parse
from littlelisp.evaluation.evaluator import evaluate
from littlelisp.types.environment import Environment
from littlelisp.types.errors import LispError
from littlelisp.builtin.env_builtin import register
from littlelisp.printer import to_string

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates littlelisp code in one session environment, so
    definitions persist across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            try:
                # Lazy import, the loader only needs eval_prelude
                from littlelisp.modules.prelude_loader import load_prelude
                load_prelude(self)
            except FileNotFoundError as e:
                logger.debug("No prelude loaded: %s", e)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for expr in parse(code):
            evaluate(expr, self.env)

    def eval(self, code: str) -> list[LispValue]:
        """Evaluate every top-level expression of `code`, returning all results."""
        return [evaluate(expr, self.env) for expr in parse(code)]


def main(argv: list[str] | None = None) -> int:
    """Read one line of program text (or take it from argv) and evaluate it."""
    logging.basicConfig(level=get_log_level(), format='%(message)s', stream=sys.stderr)

    args = sys.argv[1:] if argv is None else argv
    if args:
        code = " ".join(args)
    else:
        try:
            code = input(get_prompt())
        except EOFError:
            return 0

    interp = Interpreter()
    try:
        for expr in parse(code):
            print("Result:", to_string(evaluate(expr, interp.env)))
    except (LispError, RecursionError) as e:
        # RecursionError: runaway recursion exhausted the Python stack
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
