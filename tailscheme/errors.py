"""Fault taxonomy for tailscheme.

Every abnormal outcome of reading or evaluating is raised as a subclass of
SchemeError. Nothing inside the evaluator catches them; the entry point does.
"""


class SchemeError(Exception):
    """ Base class for all tailscheme errors"""
    pass

class SchemeUnboundSymbol(SchemeError):
    """ Raised when a symbol is not bound in any frame"""
    pass

class SchemeTypeError(SchemeError):
    """ Raised when a value has the wrong kind (car of nil, + on a symbol, calling a number)"""

class SchemeArityError(SchemeError):
    """ Raised when a primitive, closure or special form gets the wrong number of operands"""

class SchemeZeroDivisionError(SchemeError):
    """ Raised on integer division by zero"""

class SchemeUnknownPrimitive(SchemeError):
    """ Raised when a symbol in function position names no primitive"""

class SchemeSyntaxError(SchemeError):
    """ Raised when the reader cannot parse its input"""

class SchemeOverflowError(SchemeError):
    """ Raised when integer division overflows the fixed width ((/ INT_MIN -1))"""
