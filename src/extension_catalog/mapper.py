"""Map raw registry extensions to UI-facing descriptors."""

from __future__ import annotations
import logging
from collections.abc import Iterable, Iterator
from extension_catalog.config import ProcessorConfig
from extension_catalog.models import Category, ExtensionDescriptor, RawExtension
from extension_catalog.processor import PROVIDES_CODE_TAG, ExtensionProcessor
from extension_catalog.shortid import create_short_id


logger = logging.getLogger(__name__)

CODE_TAG = "code"
STABLE_TAG = "stable"


def rewrite_code_tags(tags: Iterable[str]) -> list[str]:
    """Replace the registry ``provides-code`` tag with ``code``."""
    rewritten = (CODE_TAG if tag == PROVIDES_CODE_TAG else tag for tag in tags)
    return list(dict.fromkeys(rewritten))


def ensure_maturity_tag(tags: list[str]) -> list[str]:
    """Presume ``stable`` when no tag beyond ``code`` is present."""
    if not tags or tags == [CODE_TAG]:
        return [*tags, STABLE_TAG]
    return list(tags)


def bom_of(extension: RawExtension) -> str | None:
    """Return the BOM declared by the first origin as ``group:artifact:version``.

    Only the first origin is consulted. A BOM without a version yields ``None``.
    """
    if not extension.origins:
        return None
    bom = extension.origins[0].bom
    if bom is None or bom.version is None:
        return None
    return bom.gav


def to_descriptor(
    raw: RawExtension | None,
    category: Category,
    order_counter: Iterator[int],
    config: ProcessorConfig,
) -> ExtensionDescriptor | None:
    """Build the descriptor for ``raw`` or ``None`` when it must not be surfaced.

    Args:
        raw: Registry entry, possibly missing.
        category: Category the entry is being listed under.
        order_counter: Shared counter; one value is drawn per surfaced entry.
        config: Processor options.

    Returns:
        The descriptor, or ``None`` for absent, unnamed or unlisted entries.
    """
    if raw is None:
        return None
    if raw.name is None:
        logger.debug("Skipping unnamed extension %s", raw.management_key())
        return None
    processor = ExtensionProcessor.of(raw)
    if processor.unlisted:
        logger.debug("Skipping unlisted extension %s", raw.management_key())
        return None

    extension_id = raw.management_key()
    tags = ensure_maturity_tag(rewrite_code_tags(processor.tags(config.tags_from)))
    provides_code = processor.provides_code
    return ExtensionDescriptor(
        id=extension_id,
        short_id=create_short_id(extension_id),
        version=raw.artifact.version,
        name=raw.name,
        description=raw.description,
        short_name=processor.short_name,
        category=category.name,
        tags=tags,
        keywords=processor.extended_keywords,
        order=next(order_counter),
        provides_example_code=provides_code,
        provides_code=provides_code,
        guide=processor.guide,
        platform=raw.has_platform_origin(),
        bom=bom_of(raw),
    )


__all__ = [
    "CODE_TAG",
    "STABLE_TAG",
    "bom_of",
    "ensure_maturity_tag",
    "rewrite_code_tags",
    "to_descriptor",
]
