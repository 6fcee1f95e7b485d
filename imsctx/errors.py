class ContextError(Exception):
    """Base class for errors raised by imsctx"""


class ContextNotImplementedError(ContextError, NotImplementedError):
    """An abstract context primitive was called on a class that does not provide it"""

    def __init__(self, message: str = 'abstract method is not implemented'):
        super().__init__(message)


class InvalidArgumentError(ContextError, ValueError):
    """A caller passed a value the context manager cannot store"""


class MissingContextNameError(InvalidArgumentError):
    """No context name was given and no current context is set"""

    def __init__(self, message: str = 'Missing IMS context label to set context data for'):
        super().__init__(message)
