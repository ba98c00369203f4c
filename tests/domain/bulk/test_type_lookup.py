from __future__ import annotations

import pytest

from sources_bulk.domain.bulk import TypeLookup
from sources_bulk.domain.errors import TypeNotFoundError
from sources_bulk.domain.model import ApplicationType, SourceType
from tests.helpers.catalog import seed_catalog
from tests.support.fakes import calls_of, make_repositories


def _lookup_with(*names: str) -> TypeLookup:
    repositories = make_repositories()
    for name in names:
        repositories.application_types.add(ApplicationType(name=name))
    return TypeLookup(repositories.source_types, repositories.application_types)


def test_application_type_matches_by_pattern_not_equality() -> None:
    lookup = _lookup_with("amazon", "aws-s3")

    assert lookup.application_type("aws").name == "aws-s3"


def test_application_type_first_match_in_name_order_wins() -> None:
    lookup = _lookup_with("/insights/platform/cost-management", "/insights/platform/catalog")

    assert lookup.application_type("platform").name == "/insights/platform/catalog"


def test_application_type_accepts_regular_expressions() -> None:
    lookup = _lookup_with("/insights/platform/catalog", "/insights/platform/cost-management")

    assert lookup.application_type("cost-.*$").name == "/insights/platform/cost-management"


def test_application_type_without_match_raises() -> None:
    lookup = _lookup_with("amazon")

    with pytest.raises(TypeNotFoundError, match="no applicable application type found for azure"):
        lookup.application_type("azure")


def test_application_type_invalid_pattern_raises_not_found() -> None:
    lookup = _lookup_with("amazon")

    with pytest.raises(TypeNotFoundError):
        lookup.application_type("(")


@pytest.mark.parametrize("pattern", [None, ""])
def test_application_type_requires_a_pattern(pattern: object) -> None:
    lookup = _lookup_with("amazon")

    with pytest.raises(TypeNotFoundError):
        lookup.application_type(pattern)


def test_application_catalog_is_read_once() -> None:
    repositories = make_repositories()
    seed_catalog(repositories)
    lookup = TypeLookup(repositories.source_types, repositories.application_types)

    lookup.application_type("catalog")
    lookup.application_type("cost")

    assert calls_of(repositories.application_types).count("list_all") == 1


def test_source_type_identifier_takes_precedence_over_name() -> None:
    repositories = make_repositories()
    catalog = seed_catalog(repositories)
    lookup = TypeLookup(repositories.source_types, repositories.application_types)

    found = lookup.source_type(type_id=str(catalog.openshift.id), name="amazon")

    assert found is catalog.openshift


def test_source_type_falls_back_to_name_when_identifier_unknown() -> None:
    repositories = make_repositories()
    catalog = seed_catalog(repositories)
    lookup = TypeLookup(repositories.source_types, repositories.application_types)

    found = lookup.source_type(type_id=str(SourceType(name="other").id), name="amazon")

    assert found is catalog.amazon


def test_source_type_name_must_match_exactly() -> None:
    repositories = make_repositories()
    seed_catalog(repositories)
    lookup = TypeLookup(repositories.source_types, repositories.application_types)

    with pytest.raises(TypeNotFoundError, match="Source Type not found"):
        lookup.source_type(name="open")


def test_source_type_without_references_raises() -> None:
    repositories = make_repositories()
    lookup = TypeLookup(repositories.source_types, repositories.application_types)

    with pytest.raises(TypeNotFoundError):
        lookup.source_type()


def test_application_type_by_id_ignores_non_identifiers() -> None:
    repositories = make_repositories()
    catalog = seed_catalog(repositories)
    lookup = TypeLookup(repositories.source_types, repositories.application_types)

    assert lookup.application_type_by_id("catalog") is None
    assert lookup.application_type_by_id(None) is None
    assert lookup.application_type_by_id(str(catalog.catalog.id)) is catalog.catalog
