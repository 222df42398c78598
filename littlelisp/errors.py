from littlelisp.types.errors import (
    LispError,
    LispUnboundIdentifier,
    LispSyntaxError,
    LispTypeError,
)

__all__ = [
    "LispError",
    "LispUnboundIdentifier",
    "LispSyntaxError",
    "LispTypeError",
]
