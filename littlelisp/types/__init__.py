from littlelisp.types.atom import Atom, AtomKind, classify
from littlelisp.types.environment import Environment
from littlelisp.types.lambda_fn import Lambda

__all__ = ["Atom", "AtomKind", "classify", "Environment", "Lambda"]
