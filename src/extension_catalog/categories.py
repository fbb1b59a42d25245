"""Group catalog extensions into categories in their canonical display order."""

from __future__ import annotations
import logging
import sys
from extension_catalog.models import (
    Category,
    ExtensionCatalog,
    ProcessedCategory,
    RawExtension,
)
from extension_catalog.processor import ExtensionProcessor


logger = logging.getLogger(__name__)

MD_PINNED = "pinned"


def pinned_keys(category: Category) -> list[str]:
    """Return the management keys pinned at the top of ``category``."""
    pinned = category.metadata.get(MD_PINNED)
    if not isinstance(pinned, list):
        return []
    return [str(key) for key in pinned]


def sort_extensions(
    category: Category, extensions: list[RawExtension]
) -> list[RawExtension]:
    """Order pinned extensions first, then the rest by case-insensitive name."""
    pinned_index = {key: index for index, key in enumerate(pinned_keys(category))}

    def sort_key(extension: RawExtension) -> tuple[int, str]:
        position = pinned_index.get(extension.management_key(), sys.maxsize)
        return position, (extension.name or "").lower()

    return sorted(extensions, key=sort_key)


def processed_categories_in_order(
    catalog: ExtensionCatalog,
) -> list[ProcessedCategory]:
    """Return every catalog category with its extensions sorted for display."""
    by_category: dict[str, list[RawExtension]] = {
        category.id: [] for category in catalog.categories
    }
    for extension in catalog.extensions:
        if extension is None:
            continue
        category_ids = [
            category_id
            for category_id in ExtensionProcessor.of(extension).categories
            if category_id in by_category
        ]
        if not category_ids:
            logger.debug(
                "Extension %s is not listed under any known category",
                extension.management_key(),
            )
            continue
        for category_id in dict.fromkeys(category_ids):
            by_category[category_id].append(extension)

    return [
        ProcessedCategory(
            category=category,
            extensions=sort_extensions(category, by_category[category.id]),
        )
        for category in catalog.categories
    ]


__all__ = ["pinned_keys", "processed_categories_in_order", "sort_extensions"]
