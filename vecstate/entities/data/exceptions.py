class VectorError(Exception):
    """Base class for errors raised by vecstate vectors."""


class InvalidArgument(VectorError, TypeError):
    """Arguments could not be parsed into a coordinate buffer."""


class PreconditionViolation(VectorError, RuntimeError):
    """An operation was called before the state it depends on was set up."""
