"""Ports for persisting sources, their dependents and the type catalogs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from sources_bulk.domain.model import (
    Application,
    ApplicationAuthentication,
    ApplicationType,
    Authentication,
    Endpoint,
    Source,
    SourceType,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class IdentifiedRepository[TEntity](Repository[TEntity], Protocol):
    def get(self, entity_id: UUID) -> TEntity | None: ...


@runtime_checkable
class SourceRepository(IdentifiedRepository[Source], Protocol):
    """Persistence contract for sources."""

    def get_by_name(self, name: str) -> Source | None: ...


@runtime_checkable
class EndpointRepository(IdentifiedRepository[Endpoint], Protocol):
    """Persistence contract for endpoints."""

    def get_by_host(self, host: str) -> Endpoint | None: ...


@runtime_checkable
class ApplicationRepository(IdentifiedRepository[Application], Protocol):
    """Persistence contract for applications."""


@runtime_checkable
class AuthenticationRepository(Repository[Authentication], Protocol):
    """Persistence contract for authentications."""

    def find_superkey(self, source_id: UUID, *, authtype: str) -> Authentication | None: ...


@runtime_checkable
class ApplicationAuthenticationRepository(Repository[ApplicationAuthentication], Protocol):
    """Persistence contract for application/authentication links."""

    def list_for_application(self, application_id: UUID) -> Sequence[ApplicationAuthentication]: ...


@runtime_checkable
class CatalogRepository[TType: SourceType | ApplicationType](
    IdentifiedRepository[TType], Protocol
):
    """Read access to a type catalog; ``list_all`` returns entries ordered by name."""

    def get_by_name(self, name: str) -> TType | None: ...

    def list_all(self) -> Sequence[TType]: ...


@runtime_checkable
class SourceTypeRepository(CatalogRepository[SourceType], Protocol):
    """Repository contract for source types."""


@runtime_checkable
class ApplicationTypeRepository(CatalogRepository[ApplicationType], Protocol):
    """Repository contract for application types."""
