"""Exception types raised by the extension catalog package."""

from __future__ import annotations


class CatalogFormatError(ValueError):
    """Raised when a registry document cannot be read as an extension catalog."""


__all__ = ["CatalogFormatError"]
