"""Tests for mapping raw extensions to descriptors."""

import itertools
from collections.abc import Callable
import pytest
from extension_catalog.config import ProcessorConfig
from extension_catalog.mapper import (
    bom_of,
    ensure_maturity_tag,
    rewrite_code_tags,
    to_descriptor,
)
from extension_catalog.models import Category, RawExtension
from extension_catalog.shortid import create_short_id


ExtensionFactory = Callable[..., RawExtension]


def test_rewrite_code_tags() -> None:
    """The registry ``provides-code`` tag becomes ``code``."""

    assert rewrite_code_tags(["preview", "provides-code"]) == ["preview", "code"]
    assert rewrite_code_tags(["code", "provides-code"]) == ["code"]


@pytest.mark.parametrize(
    ("tags", "expected"),
    [
        ([], ["stable"]),
        (["code"], ["code", "stable"]),
        (["experimental"], ["experimental"]),
        (["preview", "code"], ["preview", "code"]),
        (["stable"], ["stable"]),
    ],
)
def test_ensure_maturity_tag(tags: list[str], expected: list[str]) -> None:
    """Only empty or code-only tag lists are presumed stable."""

    assert ensure_maturity_tag(tags) == expected


def test_bom_uses_first_origin_only(make_extension: ExtensionFactory) -> None:
    """Later origins are never consulted for the BOM."""

    with_bom = make_extension(
        origins=[
            {"id": "first", "bom": "org.acme:first-bom::pom:1.0"},
            {"id": "second"},
        ]
    )
    first_without_bom = make_extension(
        origins=[
            {"id": "first"},
            {"id": "second", "bom": "org.acme:second-bom::pom:2.0"},
        ]
    )

    assert bom_of(with_bom) == "org.acme:first-bom:1.0"
    assert bom_of(first_without_bom) is None
    assert bom_of(make_extension()) is None


def test_bom_without_version_is_absent(make_extension: ExtensionFactory) -> None:
    """A versionless BOM coordinate is not rendered."""

    extension = make_extension(origins=[{"id": "first", "bom": "org.acme:acme-bom"}])

    assert bom_of(extension) is None


def test_to_descriptor_maps_all_fields(
    make_extension: ExtensionFactory, core_category: Category
) -> None:
    """A listed extension is mapped with every descriptor field populated."""

    extension = make_extension(
        keywords=["cdi"],
        guide="https://quarkus.io/guides/cdi",
        codestart={"name": "arc"},
        origins=[
            {
                "id": "platform",
                "platform": True,
                "bom": "io.quarkus.platform:quarkus-bom::pom:3.0.0",
            }
        ],
        **{"short-name": "CDI"},
    )
    counter = itertools.count(5)

    descriptor = to_descriptor(extension, core_category, counter, ProcessorConfig())

    assert descriptor is not None
    assert descriptor.id == "io.quarkus:quarkus-arc"
    assert descriptor.short_id == create_short_id("io.quarkus:quarkus-arc")
    assert descriptor.version == "3.0.0"
    assert descriptor.name == "ArC"
    assert descriptor.description == "Build time CDI dependency injection"
    assert descriptor.short_name == "CDI"
    assert descriptor.category == "Core"
    assert descriptor.tags == ["code", "stable"]
    assert descriptor.keywords[:2] == ["cdi", "arc"]
    assert descriptor.order == 5
    assert descriptor.provides_code is True
    assert descriptor.provides_example_code is True
    assert descriptor.guide == "https://quarkus.io/guides/cdi"
    assert descriptor.platform is True
    assert descriptor.bom == "io.quarkus.platform:quarkus-bom:3.0.0"
    assert next(counter) == 6


def test_to_descriptor_keeps_explicit_maturity(
    make_extension: ExtensionFactory, core_category: Category
) -> None:
    """An experimental extension does not gain the stable tag."""

    descriptor = to_descriptor(
        make_extension(status="experimental"),
        core_category,
        itertools.count(),
        ProcessorConfig(),
    )

    assert descriptor is not None
    assert descriptor.tags == ["experimental"]


def test_to_descriptor_honours_tags_source(
    make_extension: ExtensionFactory, core_category: Category
) -> None:
    """The configured tag source replaces ``status``."""

    descriptor = to_descriptor(
        make_extension(status="experimental", support="supported"),
        core_category,
        itertools.count(),
        ProcessorConfig(tags_from="support"),
    )

    assert descriptor is not None
    assert descriptor.tags == ["supported"]


@pytest.mark.parametrize(
    "overrides",
    [{"name": None}, {"unlisted": True}, {"unlisted": "true"}],
)
def test_to_descriptor_excludes_without_consuming_order(
    make_extension: ExtensionFactory,
    core_category: Category,
    overrides: dict[str, object],
) -> None:
    """Unnamed and unlisted extensions are dropped and the counter is untouched."""

    counter = itertools.count()

    descriptor = to_descriptor(
        make_extension(**overrides), core_category, counter, ProcessorConfig()
    )

    assert descriptor is None
    assert next(counter) == 0


def test_to_descriptor_absent_extension(core_category: Category) -> None:
    """A missing registry entry maps to nothing."""

    counter = itertools.count()

    assert to_descriptor(None, core_category, counter, ProcessorConfig()) is None
    assert next(counter) == 0
