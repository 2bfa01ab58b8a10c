"""Exceptions raised by the containers in this package."""


class TDAError(Exception):
    """Base class for every error raised by this package."""


class DuplicateError(TDAError):
    """An item that compares equal is already stored."""


class NotFoundError(TDAError, LookupError):
    """The requested item or position does not exist."""


class EmptyError(TDAError, IndexError):
    """The container holds no items."""


class FullError(TDAError):
    """The container has no room left for the item."""