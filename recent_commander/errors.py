class MruError(Exception):
    """Base class for every failure that aborts an invocation."""

    exit_code = 1

    def __init__(self, message: str = ''):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFoundError(MruError):
    """A path given to add/promote is not an existing regular file."""


class NoMatchError(MruError):
    """A search produced no results."""


class StoreIOError(MruError):
    """A filesystem operation on the store (or the editor launch) failed."""


class InvalidArgumentError(MruError):
    """Unrecognised flag, bad argument, malformed selection or bad pattern."""
