"""Unit-of-work abstractions for coordinating repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from sources_bulk.domain.ports.persistence import (
        ApplicationAuthenticationRepository,
        ApplicationRepository,
        ApplicationTypeRepository,
        AuthenticationRepository,
        EndpointRepository,
        SourceRepository,
        SourceTypeRepository,
    )


@runtime_checkable
class RepositoryCollection(Protocol):
    """Marker protocol for groups of repositories managed together."""


@runtime_checkable
class UnitOfWork[TRepositories: RepositoryCollection](Protocol):
    """Generic unit-of-work boundary around a repository collection.

    Leaving the context with an exception rolls back and lets the exception
    propagate; only ``commit`` makes work visible outside the unit.
    """

    @property
    def repositories(self) -> TRepositories: ...

    def __enter__(self) -> UnitOfWork[TRepositories]: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


@dataclass(slots=True)
class BulkRepositories(RepositoryCollection):
    """Repositories required to assemble a batch of sources."""

    sources: SourceRepository
    endpoints: EndpointRepository
    applications: ApplicationRepository
    authentications: AuthenticationRepository
    application_authentications: ApplicationAuthenticationRepository
    source_types: SourceTypeRepository
    application_types: ApplicationTypeRepository


type BulkUnitOfWork = UnitOfWork[BulkRepositories]
