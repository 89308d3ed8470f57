class SchemyError(Exception):
    """ Base class for all Schemy errors"""
    pass

class SchemySyntaxError(SchemyError):
    """ Raised when source text or a special form is malformed"""

class SchemyNameError(SchemyError):
    """ Raised when a variable is used or assigned before it is defined"""

class SchemyRuntimeError(SchemyError):
    """ Raised when an expression cannot be evaluated"""

class SchemyTypeError(SchemyRuntimeError):
    """ Raised when an operand has the wrong variant for an operation"""

class SchemyArityError(SchemyRuntimeError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

class SchemyZeroDivisionError(SchemyRuntimeError):
    """ Raised when an integer is divided by zero"""
