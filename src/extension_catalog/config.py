"""Runtime configuration helpers for the extension catalog processor."""

from __future__ import annotations
from collections.abc import Mapping
from functools import lru_cache
from typing import Any
from dynaconf import Dynaconf
from pydantic import BaseModel, ConfigDict


ENVVAR_PREFIX = "EXTENSION_CATALOG"

_DEFAULTS: dict[str, object] = {
    "TAGS_FROM": None,
}


class ProcessorConfig(BaseModel):
    """Options consulted while mapping registry entries to descriptors."""

    tags_from: str | None = None
    """Metadata key that tags are read from instead of ``status``."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_settings(cls, source: Mapping[str, Any] | None) -> ProcessorConfig:
        """Create a config from a mapping or Dynaconf instance."""
        raw = _coerce_mapping(source)
        value = raw.get("tags_from", raw.get("TAGS_FROM", _DEFAULTS["TAGS_FROM"]))
        return cls(tags_from=_to_optional_str(value))


def _build_loader() -> Dynaconf:
    """Create a Dynaconf loader wired to environment variables only."""
    return Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        settings_files=[],
        load_dotenv=True,
        environments=False,
    )


def _normalize_settings(source: Dynaconf) -> Dynaconf:
    """Validate and fill defaults on the raw Dynaconf settings."""
    normalized = Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        settings_files=[],
        load_dotenv=False,
        environments=False,
    )

    tags_from_raw = source.get("TAGS_FROM", _DEFAULTS["TAGS_FROM"])
    if tags_from_raw is not None and not isinstance(tags_from_raw, str):
        msg = f"{ENVVAR_PREFIX}_TAGS_FROM must be a metadata key string."
        raise ValueError(msg)
    normalized.set("TAGS_FROM", _to_optional_str(tags_from_raw))

    return normalized


@lru_cache(maxsize=1)
def _load_settings() -> Dynaconf:
    """Load settings once and cache the normalized Dynaconf instance."""
    return _normalize_settings(_build_loader())


def get_settings(*, refresh: bool = False) -> Dynaconf:
    """Return the cached Dynaconf settings, reloading them if requested."""
    if refresh:
        _load_settings.cache_clear()
    return _load_settings()


def _coerce_mapping(source: Mapping[str, Any] | None) -> dict[str, Any]:
    if source is None:
        return {}
    if hasattr(source, "as_dict"):
        return dict(source.as_dict())  # type: ignore[call-arg]
    if isinstance(source, Mapping):
        return dict(source)
    return {}


def _to_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


__all__ = ["ENVVAR_PREFIX", "ProcessorConfig", "get_settings"]
