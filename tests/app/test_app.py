from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sources_bulk.app import add_application_type, add_source_type, bulk_create
from sources_bulk.config.bulk import BulkConfig
from sources_bulk.domain.bulk import BulkCreateRequest
from sources_bulk.domain.errors import EntityValidationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from sources_bulk.adapters.sqlalchemy.unit_of_work import SqlAlchemyBulkUnitOfWork


def test_catalog_entries_are_persisted(
    sqlite_unit_of_work: Callable[[], SqlAlchemyBulkUnitOfWork],
) -> None:
    source_type = add_source_type(
        "amazon", vendor="Amazon", unit_of_work_factory=sqlite_unit_of_work
    )
    application_type = add_application_type(
        "/insights/platform/cost-management",
        display_name="Cost Management",
        unit_of_work_factory=sqlite_unit_of_work,
    )

    with sqlite_unit_of_work() as uow:
        stored_source_type = uow.repositories.source_types.get_by_name("amazon")
        stored_application_type = uow.repositories.application_types.get(application_type.id)

    assert stored_source_type is not None
    assert stored_source_type.id == source_type.id
    assert stored_source_type.vendor == "Amazon"
    assert stored_application_type is not None
    assert stored_application_type.display_name == "Cost Management"


def test_duplicate_catalog_entry_is_rejected(
    sqlite_unit_of_work: Callable[[], SqlAlchemyBulkUnitOfWork],
) -> None:
    add_source_type("amazon", unit_of_work_factory=sqlite_unit_of_work)

    with pytest.raises(EntityValidationError):
        add_source_type("amazon", unit_of_work_factory=sqlite_unit_of_work)


def test_bulk_create_honours_configured_superkey_authtype(
    sqlite_unit_of_work: Callable[[], SqlAlchemyBulkUnitOfWork],
) -> None:
    add_source_type("amazon", unit_of_work_factory=sqlite_unit_of_work)
    request = BulkCreateRequest.build(
        sources=[{"name": "aws", "type": "amazon"}],
        authentications=[
            {"authtype": "basic", "resource_type": "source", "resource_name": "aws"},
            {"authtype": "master", "resource_type": "source", "resource_name": "aws"},
        ],
    )

    result = bulk_create(
        request,
        unit_of_work_factory=sqlite_unit_of_work,
        config=BulkConfig(superkey_authtype="master"),
    )

    assert [item.authtype for item in result.authentications] == ["master", "basic"]
