class ReactorError(Exception):
    """Base class for reaction stage errors."""


class InvalidArgument(ReactorError, ValueError):
    """A numeric parameter is outside its allowed range."""


class OutOfRange(ReactorError, IndexError):
    """No cached output exists at the requested index."""
