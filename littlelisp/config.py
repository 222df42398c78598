from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (littlelisp package directory)
_LITTLELISP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _LITTLELISP_DIR / 'prelude'
DEFAULT_PROMPT = 'Enter a Lisp program: '


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_root() -> Path:
    roots = paths_from_env('LITTLELISP_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() or not p.exists() else p.parent


def get_prompt() -> str:
    return os.environ.get('LITTLELISP_PROMPT', DEFAULT_PROMPT)


def get_log_level() -> int:
    """
    Determine log level from LOGLEVEL environment variable.
    Defaults to WARNING if not set or not a level name.
    """
    loglevel_env = os.getenv('LOGLEVEL', '').upper()
    if loglevel_env:
        level = getattr(logging, loglevel_env, None)
        if isinstance(level, int):
            return level
    return logging.WARNING
