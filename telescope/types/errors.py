class TelescopeError(Exception):
    """ Base class for all Telescope errors"""
    pass


class TelescopeIOError(TelescopeError):
    """ Raised when the line reader fails"""


class TelescopeSyntaxError(TelescopeError):
    """ Raised when the input text is malformed"""

    def __init__(self, message: str, pos: int | None = None, token: str | None = None):
        if pos is not None:
            message = f"{message} at {pos}"
        super().__init__(message)
        self.pos = pos
        self.token = token


class TelescopeEOF(TelescopeError):
    """ Raised when the input contains no tokens"""


class TelescopeEvalError(TelescopeError):
    """ Raised when evaluation of an expression fails"""


class TelescopeUnboundSymbol(TelescopeEvalError):
    """ Raised when a symbol is used before it is bound"""


class TelescopeArityError(TelescopeEvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class TelescopeTypeError(TelescopeEvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class TelescopeDivisionByZero(TelescopeEvalError):
    """ Raised on integer division by zero"""


class TelescopeComparisonError(TelescopeEvalError):
    """ Raised when two values cannot be ordered against each other"""


class TelescopeExit(BaseException):
    """Request to end the session with a status code.

    Derives from BaseException so that handlers for ordinary errors
    (``except TelescopeError`` / ``except Exception``) never catch it.
    """

    def __init__(self, code: int = 0):
        super().__init__(f"exit {code}")
        self.code = code
