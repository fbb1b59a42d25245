"""Data models for raw registry entries and surfaced extension descriptors."""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ArtifactCoords(BaseModel):
    """Maven-style coordinates of an artifact."""

    group_id: str
    artifact_id: str
    version: str | None = None
    type: str = "jar"
    classifier: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, text: str) -> ArtifactCoords:
        """Parse ``g:a``, ``g:a:v``, ``g:a:type:v`` or ``g:a:classifier:type:v``."""
        parts = [part.strip() for part in text.strip().split(":")]
        if len(parts) < 2 or len(parts) > 5 or not parts[0] or not parts[1]:
            msg = f"Invalid artifact coordinates: {text!r}"
            raise ValueError(msg)
        group_id, artifact_id, *rest = parts
        classifier: str | None = None
        artifact_type = ""
        version: str | None = None
        if len(rest) == 1:
            version = rest[0]
        elif len(rest) == 2:
            artifact_type, version = rest
        elif len(rest) == 3:
            classifier, artifact_type, version = rest
        return cls(
            group_id=group_id,
            artifact_id=artifact_id,
            version=version or None,
            type=artifact_type or "jar",
            classifier=classifier or None,
        )

    @property
    def key(self) -> str:
        """Return the ``group:artifact`` management key."""
        return f"{self.group_id}:{self.artifact_id}"

    @property
    def gav(self) -> str:
        """Return the ``group:artifact:version`` form."""
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


def _coerce_coords(value: Any) -> Any:
    if isinstance(value, str):
        return ArtifactCoords.parse(value)
    if isinstance(value, Mapping):
        return {
            "group_id": value.get("group_id", value.get("groupId")),
            "artifact_id": value.get("artifact_id", value.get("artifactId")),
            "version": value.get("version"),
            "type": value.get("type") or "jar",
            "classifier": value.get("classifier"),
        }
    return value


class ExtensionOrigin(BaseModel):
    """Catalog an extension was published through."""

    id: str
    platform: bool = False
    bom: ArtifactCoords | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("bom", mode="before")
    @classmethod
    def _parse_bom(cls, value: Any) -> Any:
        return _coerce_coords(value)


class RawExtension(BaseModel):
    """Extension entry as supplied by the registry."""

    artifact: ArtifactCoords
    name: str | None = None
    description: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    origins: list[ExtensionOrigin] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator("artifact", mode="before")
    @classmethod
    def _parse_artifact(cls, value: Any) -> Any:
        return _coerce_coords(value)

    @field_validator("origins", mode="before")
    @classmethod
    def _coerce_origins(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [{"id": item} if isinstance(item, str) else item for item in value]
        return value

    def management_key(self) -> str:
        """Return the ``group:artifact`` identity of the extension."""
        return self.artifact.key

    def has_platform_origin(self) -> bool:
        """Return whether any origin belongs to the curated platform."""
        return any(origin.platform for origin in self.origins)


class Category(BaseModel):
    """Named grouping of extensions."""

    id: str
    name: str
    description: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class ExtensionCatalog(BaseModel):
    """Immutable snapshot of a registry catalog."""

    id: str | None = None
    bom: ArtifactCoords | None = None
    categories: list[Category] = Field(default_factory=list)
    extensions: list[RawExtension | None] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator("bom", mode="before")
    @classmethod
    def _parse_bom(cls, value: Any) -> Any:
        return _coerce_coords(value)


class ProcessedCategory(BaseModel):
    """A category paired with its extensions in display order."""

    category: Category
    extensions: list[RawExtension | None] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class ExtensionDescriptor(BaseModel):
    """UI-facing description of a surfaced extension.

    Serialized with camelCase field names (``shortId``, ``providesCode``...)
    which the extension picker relies on.
    """

    id: str = Field(description="Management key of the extension")
    short_id: str = Field(description="Short display code derived from the id")
    version: str | None = None
    name: str
    description: str | None = None
    short_name: str | None = None
    category: str
    tags: list[str] = Field(min_length=1)
    keywords: list[str] = Field(default_factory=list)
    order: int = Field(ge=0, description="Global display position")
    provides_example_code: bool = False
    provides_code: bool = False
    guide: str | None = None
    platform: bool = False
    bom: str | None = None

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


__all__ = [
    "ArtifactCoords",
    "Category",
    "ExtensionCatalog",
    "ExtensionDescriptor",
    "ExtensionOrigin",
    "ProcessedCategory",
    "RawExtension",
]
