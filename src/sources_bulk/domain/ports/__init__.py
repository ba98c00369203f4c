"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import (
    ApplicationAuthenticationRepository,
    ApplicationRepository,
    ApplicationTypeRepository,
    AuthenticationRepository,
    CatalogRepository,
    EndpointRepository,
    Repository,
    SourceRepository,
    SourceTypeRepository,
)
from .provisioning import ApplicationCreatedHook
from .unit_of_work import BulkRepositories, BulkUnitOfWork, RepositoryCollection, UnitOfWork

__all__ = [
    "ApplicationAuthenticationRepository",
    "ApplicationCreatedHook",
    "ApplicationRepository",
    "ApplicationTypeRepository",
    "AuthenticationRepository",
    "BulkRepositories",
    "BulkUnitOfWork",
    "CatalogRepository",
    "EndpointRepository",
    "Repository",
    "RepositoryCollection",
    "SourceRepository",
    "SourceTypeRepository",
    "UnitOfWork",
]
