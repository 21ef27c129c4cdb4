"""
Exceptions raised by the search server.

Every error derives from SearchServerError and from the builtin it replaces
(ValueError for bad arguments, IndexError for lookups out of bounds), so
callers can catch either.
"""


class SearchServerError(Exception):
    """Base class for all search server errors."""


class InvalidDocumentIdError(SearchServerError, ValueError):
    """Document id is negative."""


class DuplicateDocumentIdError(SearchServerError, ValueError):
    """Document id is already indexed."""


class InvalidTextError(SearchServerError, ValueError):
    """Document, query or stop-word text contains control characters."""


class EmptyRatingsError(SearchServerError, ValueError):
    """Document was added without any rating."""


class QueryError(SearchServerError, ValueError):
    """Raw query text cannot be parsed."""


class EmptyQueryError(QueryError):
    """Raw query is an empty string."""


class MalformedMinusError(QueryError):
    """Query word starts with two minus signs."""


class DanglingMinusError(QueryError):
    """Query word is a lone minus sign."""


class DocumentOutOfRangeError(SearchServerError, IndexError):
    """Document position or id does not exist."""


__all__ = [
    "SearchServerError",
    "InvalidDocumentIdError",
    "DuplicateDocumentIdError",
    "InvalidTextError",
    "EmptyRatingsError",
    "QueryError",
    "EmptyQueryError",
    "MalformedMinusError",
    "DanglingMinusError",
    "DocumentOutOfRangeError",
]
