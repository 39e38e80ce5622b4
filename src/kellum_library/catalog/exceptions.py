"""Custom exceptions for the catalog store."""


class CatalogError(Exception):
    """Base exception for catalog errors, including wrapped storage faults."""


class GameNotFoundError(CatalogError):
    """Game with given ID does not exist."""


class MovieNotFoundError(CatalogError):
    """Movie with given ID does not exist."""
