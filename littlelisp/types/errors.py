
class LispError(Exception):
    """ Base class for all littlelisp errors"""
    pass

class LispUnboundIdentifier(LispError):
    """ Raised when an identifier is not bound in any enclosing frame"""
    pass

class LispSyntaxError(LispError):
    """ Raised when a special form does not have the shape it requires"""

class LispTypeError(LispError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""
