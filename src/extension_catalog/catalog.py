"""Turn a registry catalog snapshot into the ordered list of surfaced extensions."""

from __future__ import annotations
import itertools
import logging
from collections.abc import Iterable
from typing import Any
from extension_catalog.categories import processed_categories_in_order
from extension_catalog.config import ProcessorConfig, get_settings
from extension_catalog.mapper import to_descriptor
from extension_catalog.models import ExtensionCatalog, ExtensionDescriptor


logger = logging.getLogger(__name__)


def process_catalog(
    catalog: ExtensionCatalog, config: ProcessorConfig | None = None
) -> list[ExtensionDescriptor]:
    """Return descriptors for every surfaced extension in display order.

    Categories and the extensions within them are visited in their processed
    order and each surfaced entry receives the next ``order`` value, so the
    result is never re-sorted. Entries that are absent, unnamed or unlisted
    are dropped silently.
    """
    if config is None:
        config = ProcessorConfig.from_settings(get_settings())
    order = itertools.count()
    descriptors: list[ExtensionDescriptor] = []
    visited = 0
    for processed in processed_categories_in_order(catalog):
        for extension in processed.extensions:
            visited += 1
            descriptor = to_descriptor(extension, processed.category, order, config)
            if descriptor is not None:
                descriptors.append(descriptor)
    logger.info(
        "Processed catalog %s: %d extensions surfaced, %d skipped",
        catalog.id or "<anonymous>",
        len(descriptors),
        visited - len(descriptors),
    )
    return descriptors


def descriptors_payload(
    descriptors: Iterable[ExtensionDescriptor],
) -> list[dict[str, Any]]:
    """Return the JSON-ready payload served to the extension picker."""
    return [
        descriptor.model_dump(mode="json", by_alias=True)
        for descriptor in descriptors
    ]


__all__ = ["descriptors_payload", "process_catalog"]
