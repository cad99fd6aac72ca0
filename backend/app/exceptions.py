"""Exception hierarchy for the rental portfolio backend."""


class PortfolioError(Exception):
    """Base exception for all portfolio errors."""


class StorageError(PortfolioError):
    """Raised when the storage backend fails to read or write records."""


class CategoryCatalogError(PortfolioError, FileNotFoundError):
    """Raised when the transaction category catalog is missing or invalid."""
