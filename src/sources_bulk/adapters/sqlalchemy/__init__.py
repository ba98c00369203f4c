"""SQLAlchemy adapter package."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import (
    SqlAlchemyApplicationAuthenticationRepository,
    SqlAlchemyApplicationRepository,
    SqlAlchemyApplicationTypeRepository,
    SqlAlchemyAuthenticationRepository,
    SqlAlchemyEndpointRepository,
    SqlAlchemySourceRepository,
    SqlAlchemySourceTypeRepository,
)
from .unit_of_work import (
    SqlAlchemyBulkUnitOfWork,
    StartupError,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyApplicationAuthenticationRepository",
    "SqlAlchemyApplicationRepository",
    "SqlAlchemyApplicationTypeRepository",
    "SqlAlchemyAuthenticationRepository",
    "SqlAlchemyBulkUnitOfWork",
    "SqlAlchemyEndpointRepository",
    "SqlAlchemySourceRepository",
    "SqlAlchemySourceTypeRepository",
    "StartupError",
    "create_all_tables",
    "mapper_registry",
    "shutdown",
    "startup",
]
