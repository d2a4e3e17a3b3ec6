
class MiniLispError(Exception):
    """ Base class for all minilisp errors"""
    pass

class MiniLispInvalidArgument(MiniLispError):
    """ Raised when an operation receives the wrong number or shape of argument nodes"""
    pass

class MiniLispInvalidResult(MiniLispError):
    """ Raised when a sub-expression evaluates to the wrong kind of value"""
    pass

class MiniLispUndefinedOperation(MiniLispError):
    """ Raised when an operator resolves neither to an operation nor to an alias"""

    def __init__(self, name):
        super().__init__(f"Undefined operation: {name!r}")
        self.name = name
