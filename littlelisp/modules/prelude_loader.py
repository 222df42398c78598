from __future__ import annotations

import logging
from typing import Protocol

from littlelisp.config import get_prelude_root

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None:
        ...


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate every *.lisp file of the prelude directory, in name order.

    Raises FileNotFoundError when the prelude directory does not exist.
    """
    root = get_prelude_root()
    if not root.is_dir():
        raise FileNotFoundError(f"Prelude directory not found: {root}")
    for path in sorted(root.glob('*.lisp')):
        logger.debug("Loading prelude file %s", path)
        itp.eval_prelude(path.read_text(encoding='utf-8'))
