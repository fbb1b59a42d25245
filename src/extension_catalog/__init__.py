"""Extension catalog processing: turn registry metadata into picker entries."""

from extension_catalog.catalog import descriptors_payload, process_catalog
from extension_catalog.config import ProcessorConfig, get_settings
from extension_catalog.errors import CatalogFormatError
from extension_catalog.loader import load_catalog
from extension_catalog.mapper import to_descriptor
from extension_catalog.models import (
    ArtifactCoords,
    Category,
    ExtensionCatalog,
    ExtensionDescriptor,
    ExtensionOrigin,
    RawExtension,
)
from extension_catalog.shortid import create_short_id, shorten


__all__ = [
    "ArtifactCoords",
    "CatalogFormatError",
    "Category",
    "ExtensionCatalog",
    "ExtensionDescriptor",
    "ExtensionOrigin",
    "ProcessorConfig",
    "RawExtension",
    "create_short_id",
    "descriptors_payload",
    "get_settings",
    "load_catalog",
    "process_catalog",
    "shorten",
    "to_descriptor",
]
