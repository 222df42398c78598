"""The two core entry points: `parse` source text and `evaluate` an expression."""

from littlelisp.reader.parser import parse
from littlelisp.evaluation.evaluator import evaluate

__all__ = ["parse", "evaluate"]
