class RandqError(Exception):
    pass


class InvalidArgumentError(RandqError, ValueError):
    """Raised when None (or an out of range value) is given to an operation
    """


class EmptyContainerError(RandqError, IndexError):
    """Raised when removing or sampling from an empty container
    """


class UnsupportedOperationError(RandqError, NotImplementedError):
    pass
