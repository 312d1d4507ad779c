
class InternerError(Exception):
    """ Base class for all interner errors"""
    pass

class InternerOverflowError(InternerError):
    """ Raised when the population no longer fits the configured symbol width"""
    pass

class InternerUnknownSymbol(InternerError):
    """ Raised when an unchecked lookup is given a symbol this interner never issued"""
    pass

class InternerTypeError(InternerError):
    """ Raised when a symbol is looked up as a type it was not interned with"""

class InternerConfigError(InternerError):
    """ Raised when a storage mode, symbol width or environment setting is invalid"""
