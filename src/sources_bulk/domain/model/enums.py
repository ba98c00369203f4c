"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ResourceCollection(StrEnum):
    """Collections of batch resources that references can be resolved against."""

    SOURCES = "sources"
    ENDPOINTS = "endpoints"
    APPLICATIONS = "applications"


class ResourceKind(StrEnum):
    """Discriminator for the polymorphic parent of an authentication."""

    SOURCE = "source"
    ENDPOINT = "endpoint"
    APPLICATION = "application"

    @property
    def collection(self) -> ResourceCollection:
        return _COLLECTION_BY_KIND[self]


_COLLECTION_BY_KIND = {
    ResourceKind.SOURCE: ResourceCollection.SOURCES,
    ResourceKind.ENDPOINT: ResourceCollection.ENDPOINTS,
    ResourceKind.APPLICATION: ResourceCollection.APPLICATIONS,
}
