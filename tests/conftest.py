"""Shared fixtures for extension catalog tests."""

from __future__ import annotations
from collections.abc import Callable
from typing import Any
import pytest
from extension_catalog.models import Category, RawExtension


ExtensionFactory = Callable[..., RawExtension]


@pytest.fixture
def make_extension() -> ExtensionFactory:
    """Return a factory building raw extensions with sensible defaults."""

    def factory(
        artifact: str = "io.quarkus:quarkus-arc:3.0.0",
        name: str | None = "ArC",
        description: str | None = "Build time CDI dependency injection",
        origins: list[dict[str, Any]] | None = None,
        **metadata: Any,
    ) -> RawExtension:
        return RawExtension.model_validate(
            {
                "artifact": artifact,
                "name": name,
                "description": description,
                "metadata": {"categories": ["core"], **metadata},
                "origins": origins or [],
            }
        )

    return factory


@pytest.fixture
def core_category() -> Category:
    """Return the ``Core`` category."""
    return Category(id="core", name="Core")


@pytest.fixture
def registry_document() -> dict[str, Any]:
    """Return a small registry document spanning two categories."""
    platform_origin = {
        "id": "io.quarkus.platform:quarkus-bom-quarkus-platform-descriptor:3.0.0",
        "platform": True,
        "bom": "io.quarkus.platform:quarkus-bom::pom:3.0.0",
    }
    return {
        "id": "io.quarkus.platform:3.0",
        "bom": "io.quarkus.platform:quarkus-bom::pom:3.0.0",
        "categories": [
            {"id": "web", "name": "Web", "metadata": {"pinned": []}},
            {
                "id": "core",
                "name": "Core",
                "metadata": {"pinned": ["io.quarkus:quarkus-arc"]},
            },
        ],
        "extensions": [
            {
                "artifact": "io.quarkus:quarkus-resteasy::jar:3.0.0",
                "name": "RESTEasy Classic",
                "description": "REST endpoint framework implementing JAX-RS",
                "metadata": {
                    "categories": ["web"],
                    "short-name": "jax-rs",
                    "keywords": ["resteasy", "jaxrs", "web", "rest"],
                    "guide": "https://quarkus.io/guides/rest-json",
                    "codestart": {"name": "resteasy", "kind": "extension-codestart"},
                },
                "origins": [platform_origin],
            },
            {
                "artifact": "io.quarkus:quarkus-arc::jar:3.0.0",
                "name": "ArC",
                "description": "Build time CDI dependency injection",
                "metadata": {
                    "categories": ["core"],
                    "short-name": "CDI",
                    "keywords": ["arc", "cdi", "dependency-injection", "di"],
                },
                "origins": [platform_origin],
            },
            {
                "artifact": "io.quarkus:quarkus-agroal::jar:3.0.0",
                "name": "Agroal - Database connection pool",
                "metadata": {"categories": ["core"], "status": "stable"},
                "origins": [platform_origin],
            },
            {
                "artifact": "io.quarkus:quarkus-internal::jar:3.0.0",
                "name": "Internal",
                "metadata": {"categories": ["core"], "unlisted": True},
            },
            {
                "artifact": "io.quarkiverse:quarkus-unnamed::jar:1.0.0",
                "metadata": {"categories": ["web"]},
            },
            {
                "artifact": "org.acme:acme-resteasy-extra:1.2.3",
                "name": "Acme RESTEasy Extra",
                "metadata": {"categories": ["web"], "status": ["experimental"]},
                "origins": [
                    {
                        "id": "org.acme:acme-catalog:1.2.3",
                        "bom": {
                            "groupId": "org.acme",
                            "artifactId": "acme-bom",
                            "version": "1.2.3",
                        },
                    }
                ],
            },
        ],
    }
