"""Catalog-specific exceptions."""


class CatalogError(Exception):
    """Base exception for catalog operations."""

    pass


class CatalogLoadError(CatalogError):
    """Raised when the catalog document is missing or malformed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Could not load catalog from {path}: {reason}")
