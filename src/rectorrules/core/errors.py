"""Exceptions raised by the rules catalog."""


class CatalogError(Exception):
    """Base class for catalog errors."""


class FetchError(CatalogError):
    """The rules document could not be retrieved."""


class EmptyQueryError(CatalogError, ValueError):
    """A search was requested with a blank query string."""
