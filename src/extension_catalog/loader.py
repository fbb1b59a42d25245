"""Load registry catalog documents into :class:`ExtensionCatalog` snapshots."""

from __future__ import annotations
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any
from pydantic import ValidationError
from extension_catalog.errors import CatalogFormatError
from extension_catalog.models import Category, ExtensionCatalog, RawExtension


logger = logging.getLogger(__name__)


def _read_document(source: Mapping[str, Any] | str | Path) -> Mapping[str, Any]:
    document: Any = source
    if isinstance(source, Path):
        try:
            source = source.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Unable to read catalog document: {exc}"
            raise CatalogFormatError(msg) from exc
    if isinstance(source, str):
        try:
            document = json.loads(source)
        except json.JSONDecodeError as exc:
            msg = f"Catalog document is not valid JSON: {exc.msg}"
            raise CatalogFormatError(msg) from exc
    if not isinstance(document, Mapping):
        msg = "Catalog document must be a JSON object."
        raise CatalogFormatError(msg)
    return document


def _require_list(document: Mapping[str, Any], key: str) -> list[Any]:
    value = document.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"Catalog field '{key}' must be a list."
        raise CatalogFormatError(msg)
    return value


def _load_extension(index: int, entry: Any) -> RawExtension | None:
    if entry is None:
        return None
    try:
        return RawExtension.model_validate(entry)
    except ValidationError as exc:
        logger.warning(
            "Ignoring malformed extension entry #%d: %s",
            index,
            exc.errors(include_url=False),
        )
        return None


def load_catalog(source: Mapping[str, Any] | str | Path) -> ExtensionCatalog:
    """Parse a registry document into an immutable catalog snapshot.

    Args:
        source: Decoded JSON object, JSON text, or a path to a JSON file.

    Returns:
        The catalog; malformed extension entries are kept as ``None``.

    Raises:
        CatalogFormatError: If the document itself or any category is invalid.
    """
    document = _read_document(source)
    try:
        categories = [
            Category.model_validate(entry)
            for entry in _require_list(document, "categories")
        ]
        return ExtensionCatalog(
            id=document.get("id"),
            bom=document.get("bom"),
            categories=categories,
            extensions=[
                _load_extension(index, entry)
                for index, entry in enumerate(_require_list(document, "extensions"))
            ],
        )
    except CatalogFormatError:
        raise
    except ValueError as exc:
        msg = f"Invalid catalog document: {exc}"
        raise CatalogFormatError(msg) from exc


__all__ = ["load_catalog"]
