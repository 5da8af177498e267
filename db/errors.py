"""
db/errors.py
------------
Typed failures raised by the database session.
Driver exceptions are always chained as ``__cause__``.
"""


class SessionError(Exception):
    """Base class for every failure of a database session."""


class DatabaseConnectionError(SessionError):
    """The connection could not be established or did not answer a ping."""


class QueryError(SessionError):
    """A statement failed to execute, or row iteration stopped on a fault."""


class ResultError(SessionError):
    """The driver did not report metadata about a completed write."""


class DecodeError(SessionError):
    """A fetched row could not be mapped onto a User."""
