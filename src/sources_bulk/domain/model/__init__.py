"""Public domain model surface."""

from __future__ import annotations

from sources_bulk.domain.model.catalog import ApplicationType, SourceType
from sources_bulk.domain.model.entity import Entity, new_id, parse_id
from sources_bulk.domain.model.enums import ResourceCollection, ResourceKind
from sources_bulk.domain.model.sources import (
    Application,
    ApplicationAuthentication,
    Authentication,
    Endpoint,
    Source,
)

type Resource = Source | Endpoint | Application

__all__ = [  # noqa: RUF022
    # base
    "Entity",
    "new_id",
    "parse_id",
    # enums
    "ResourceCollection",
    "ResourceKind",
    # catalog
    "ApplicationType",
    "SourceType",
    # sources
    "Application",
    "ApplicationAuthentication",
    "Authentication",
    "Endpoint",
    "Resource",
    "Source",
]
