

class ByolError(Exception):
    """ Base class for all host-level byol errors"""
    pass

class ByolSyntaxError(ByolError):
    """ Raised by the reader when the input does not match the grammar"""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.line = line
        self.column = column

class ByolIndexError(ByolError, IndexError):
    """ Raised when a container is popped at an index it does not hold"""

class ByolTypeError(ByolError, TypeError):
    """ Raised when a list operation is applied to a value that is not a list"""
