from lispy.diagnostics import make_error, render


class LispyError(Exception):
    """ Base class for all Lispy errors"""
    pass


class LispySyntaxError(LispyError):
    """ Raised when the reader meets malformed source text"""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(f"{message} (line {line}, column {column})" if line else message)
        self.line = line
        self.column = column


class LispyReadError(LispyError):
    """ Raised when an AST handed to the core cannot be converted to a value"""


class LispyBuiltinError(LispyError):
    """ Raised by a builtin whose arguments fail validation.

    Carries a printf-style template and its arguments; the application
    boundary turns it into an Error value with to_value().
    """

    def __init__(self, fmt: str, *args):
        super().__init__(render(fmt, *args))
        self.fmt = fmt
        self.args_ = args

    def to_value(self):
        return make_error(self.fmt, *self.args_)


class LispyArityError(LispyBuiltinError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class LispyTypeError(LispyBuiltinError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class LispyDomainError(LispyBuiltinError):
    """ Raised when an argument is outside a function's domain (division by zero, empty list)"""
