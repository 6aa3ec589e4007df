class SkemeRuntimeError(Exception):
    """ Base class for all evaluation errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"RuntimeError: {self.message}"

class SkemeUnboundSymbol(SkemeRuntimeError):
    """ Raised when an identifier is used before it is bound"""

class SkemeNotAProcedure(SkemeRuntimeError):
    """ Raised when the head of an expression is not a procedure"""

class SkemeArityError(SkemeRuntimeError):
    """ Raised when a user procedure receives the wrong number of arguments"""

class SkemeBuiltinArityError(SkemeArityError):
    """ Raised when a builtin receives the wrong number of arguments"""

class SkemeTypeError(SkemeRuntimeError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""

class SkemeSyntaxError(SkemeRuntimeError):
    """ Raised when a special form is given malformed syntax"""

class SkemeDuplicateDefine(SkemeRuntimeError):
    """ Raised when a name is defined twice in the same frame"""

class SkemeUnquoteArityError(SkemeSyntaxError):
    """ Raised when unquote does not have exactly one argument"""

class SkemeUserError(SkemeRuntimeError):
    """ Raised by the error builtin"""


class SkemeParseError(Exception):
    """ Raised by the reader on malformed source text"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"ParseError: {self.message}"
