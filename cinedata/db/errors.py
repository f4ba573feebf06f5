"""
Typed errors raised by the repositories.

Lookups return None and conditional mutations return False; these exceptions
are reserved for bad input and writes the store refused.
"""


class DataAccessError(Exception):
    pass


class InvalidArgument(DataAccessError, ValueError):
    """A required input is missing or malformed."""


class NotFound(DataAccessError, LookupError):
    """A lookup the operation depends on matched no document."""


class OperationFailed(DataAccessError):
    """The store rejected or could not complete the operation."""
