"""Phase-ordered, all-or-nothing creation of a batch of sources and dependents."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from sources_bulk.config.bulk import BulkConfig

from .context import BulkCreateResult, BulkResources
from .creators import ApplicationCreator, AuthenticationCreator, EndpointCreator, SourceCreator
from .type_lookup import TypeLookup

if TYPE_CHECKING:
    from collections.abc import Callable

    from sources_bulk.domain.ports import ApplicationCreatedHook, BulkRepositories, BulkUnitOfWork

    from .context import BulkCreateRequest, FieldMap, FieldMaps

log = logging.getLogger(__name__)


def split_authentications(
    authentications: FieldMaps, *, superkey_authtype: str
) -> tuple[FieldMaps, FieldMaps]:
    """Stable partition into (superkey requests, all other requests)."""

    superkeys: list[FieldMap] = []
    others: list[FieldMap] = []
    for request in authentications:
        if request.get("authtype") == superkey_authtype:
            superkeys.append(request)
        else:
            others.append(request)
    return tuple(superkeys), tuple(others)


class BulkAssembly:
    """Create every record of a ``BulkCreateRequest`` inside one unit of work.

    Phases run in this order, each seeing the records of the phases before it:

    1. sources
    2. superkey authentications
    3. endpoints
    4. applications (the provisioning hook may rely on the superkeys from 2.)
    5. remaining authentications

    Any failure rolls the unit of work back, is logged once together with the
    full payload, and is re-raised unchanged.
    """

    def __init__(
        self,
        request: BulkCreateRequest,
        *,
        config: BulkConfig | None = None,
        on_application_created: ApplicationCreatedHook | None = None,
    ) -> None:
        self.request = request
        self.config = config or BulkConfig()
        self.on_application_created = on_application_created
        self.superkeys, self.authentications = split_authentications(
            request.authentications, superkey_authtype=self.config.superkey_authtype
        )

    def process(self, unit_of_work_factory: Callable[[], BulkUnitOfWork]) -> BulkCreateResult:
        try:
            with unit_of_work_factory() as uow:
                result = self._create_all(uow.repositories)
                uow.commit()
        except Exception:
            log.exception("Error bulk processing from payload: %s", self.request.describe())
            raise

        log.info(
            "Bulk created sources=%s, endpoints=%s, applications=%s, authentications=%s",
            len(result.sources),
            len(result.endpoints),
            len(result.applications),
            len(result.authentications),
        )
        return result

    def _create_all(self, repositories: BulkRepositories) -> BulkCreateResult:
        resources = BulkResources()
        type_lookup = TypeLookup(repositories.source_types, repositories.application_types)
        authentication_creator = AuthenticationCreator(repositories, type_lookup)

        source_creator = SourceCreator(repositories, type_lookup)
        sources = _run_phase(source_creator, self.request.sources, resources)
        resources.record(sources=sources)

        superkeys = _run_phase(authentication_creator, self.superkeys, resources)
        resources.record(authentications=superkeys)

        endpoints = _run_phase(EndpointCreator(repositories), self.request.endpoints, resources)
        resources.record(endpoints=endpoints)

        application_creator = ApplicationCreator(
            repositories,
            type_lookup,
            superkey_authtype=self.config.superkey_authtype,
            on_created=self.on_application_created,
        )
        applications = _run_phase(application_creator, self.request.applications, resources)
        resources.record(applications=applications)

        others = _run_phase(authentication_creator, self.authentications, resources)
        resources.record(authentications=others)

        return BulkCreateResult(
            sources=sources,
            endpoints=endpoints,
            applications=applications,
            authentications=(*superkeys, *others),
        )


class _Creator[TEntity](Protocol):
    name: str

    def create(self, requests: FieldMaps, resources: BulkResources) -> tuple[TEntity, ...]: ...


def _run_phase[TEntity](
    creator: _Creator[TEntity], requests: FieldMaps, resources: BulkResources
) -> tuple[TEntity, ...]:
    log.debug("Creating %s %s", len(requests), creator.name)
    return creator.create(requests, resources)
