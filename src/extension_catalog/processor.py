"""Typed view over the free-form metadata attached to registry extensions."""

from __future__ import annotations
import re
from collections.abc import Iterable
from typing import Any
from extension_catalog.models import RawExtension


MD_UNLISTED = "unlisted"
MD_SHORT_NAME = "short-name"
MD_GUIDE = "guide"
MD_KEYWORDS = "keywords"
MD_CATEGORIES = "categories"
MD_CODESTART = "codestart"
MD_STATUS = "status"

PROVIDES_CODE_TAG = "provides-code"

_NON_CODE_CODESTART_KINDS = frozenset({"core", "base"})
_NAME_SEPARATORS = re.compile(r"[\s-]+")


class ExtensionProcessor:
    """Read registry metadata of a single extension."""

    def __init__(self, extension: RawExtension) -> None:
        """Wrap ``extension`` without copying its metadata."""
        self._extension = extension

    @classmethod
    def of(cls, extension: RawExtension) -> ExtensionProcessor:
        """Return a processor view for ``extension``."""
        return cls(extension)

    @property
    def extension(self) -> RawExtension:
        """Return the wrapped extension."""
        return self._extension

    @property
    def metadata(self) -> dict[str, Any]:
        """Return the raw metadata mapping."""
        return self._extension.metadata

    @property
    def unlisted(self) -> bool:
        """Return whether the extension must be hidden from end users."""
        return _to_bool(self.metadata.get(MD_UNLISTED), default=False)

    @property
    def short_name(self) -> str | None:
        """Return the optional short display name."""
        return _to_optional_str(self.metadata.get(MD_SHORT_NAME))

    @property
    def guide(self) -> str | None:
        """Return the documentation guide reference, if any."""
        return _to_optional_str(self.metadata.get(MD_GUIDE))

    @property
    def keywords(self) -> list[str]:
        """Return the declared keywords."""
        return _to_str_list(self.metadata.get(MD_KEYWORDS))

    @property
    def categories(self) -> list[str]:
        """Return the ids of the categories the extension is listed under."""
        return _to_str_list(self.metadata.get(MD_CATEGORIES))

    @property
    def provides_code(self) -> bool:
        """Return whether the extension ships a starter code example."""
        codestart = self.metadata.get(MD_CODESTART)
        if not isinstance(codestart, dict):
            return False
        kind = str(codestart.get("kind") or "extension-codestart").strip().lower()
        return kind not in _NON_CODE_CODESTART_KINDS

    def tags(self, tags_from: str | None = None) -> list[str]:
        """Return status tags read from ``tags_from`` (or ``status``).

        A ``provides-code`` tag is appended when the extension ships code.
        """
        source = tags_from or MD_STATUS
        values = [value.lower() for value in _to_str_list(self.metadata.get(source))]
        if self.provides_code:
            values.append(PROVIDES_CODE_TAG)
        return _unique(values)

    @property
    def extended_keywords(self) -> list[str]:
        """Return keywords enriched with name fragments for search."""
        candidates: list[str] = list(self.keywords)
        artifact_id = self._extension.artifact.artifact_id.lower()
        candidates.append(artifact_id.removeprefix("quarkus-"))
        short_name = self.short_name
        if short_name:
            candidates.append(short_name.lower())
        name = self._extension.name
        if name:
            lowered = name.lower().strip()
            candidates.append(lowered)
            candidates.extend(_NAME_SEPARATORS.split(lowered))
        return _unique(candidate for candidate in candidates if candidate)


def _unique(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


def _to_str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        items: Iterable[Any] = value.split(",")
    elif isinstance(value, list | tuple):
        items = value
    else:
        items = [value]
    return [text for item in items if (text := str(item).strip())]


def _to_bool(value: Any, *, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off"}:
        return False
    return default


def _to_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


__all__ = ["PROVIDES_CODE_TAG", "ExtensionProcessor"]
