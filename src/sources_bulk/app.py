"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from sources_bulk.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyBulkUnitOfWork,
    is_started,
    startup,
)
from sources_bulk.config.bulk import get_bulk_config
from sources_bulk.domain.bulk import BulkAssembly
from sources_bulk.domain.model import ApplicationType, SourceType
from sources_bulk.domain.ports.unit_of_work import BulkUnitOfWork

if TYPE_CHECKING:
    from sources_bulk.config.bulk import BulkConfig
    from sources_bulk.domain.bulk import BulkCreateRequest, BulkCreateResult
    from sources_bulk.domain.ports.provisioning import ApplicationCreatedHook

UnitOfWorkFactory = Callable[[], BulkUnitOfWork]


log = getLogger(__name__)


def _default_unit_of_work_factory() -> UnitOfWorkFactory:
    if not is_started():
        startup()
    return SqlAlchemyBulkUnitOfWork


def bulk_create(
    request: BulkCreateRequest,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    on_application_created: ApplicationCreatedHook | None = None,
    config: BulkConfig | None = None,
) -> BulkCreateResult:
    """Create every record of ``request`` in one transaction."""

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    assembly = BulkAssembly(
        request,
        config=config or get_bulk_config(),
        on_application_created=on_application_created,
    )
    log.info(
        "Starting bulk create: sources=%s, endpoints=%s, applications=%s, authentications=%s",
        len(request.sources),
        len(request.endpoints),
        len(request.applications),
        len(request.authentications),
    )
    return assembly.process(effective_uow)


def add_source_type(
    name: str,
    *,
    product_name: str | None = None,
    vendor: str | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> SourceType:
    """Register a source type in the catalog."""

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    source_type = SourceType(name=name, product_name=product_name, vendor=vendor)
    with effective_uow() as uow:
        uow.repositories.source_types.add(source_type)
        uow.commit()
    log.info("Added source type %s (%s)", source_type.name, source_type.id)
    return source_type


def add_application_type(
    name: str,
    *,
    display_name: str | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ApplicationType:
    """Register an application type in the catalog."""

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    application_type = ApplicationType(name=name, display_name=display_name)
    with effective_uow() as uow:
        uow.repositories.application_types.add(application_type)
        uow.commit()
    log.info("Added application type %s (%s)", application_type.name, application_type.id)
    return application_type
