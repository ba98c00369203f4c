"""Two-tier lookup of referenced resources: running batch first, store second."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from sources_bulk.domain.errors import ResourceNotFoundError
from sources_bulk.domain.model import ResourceCollection, ResourceKind, parse_id

if TYPE_CHECKING:
    from uuid import UUID

    from sources_bulk.domain.bulk.context import BulkResources
    from sources_bulk.domain.model import Application, Authentication, Resource
    from sources_bulk.domain.ports import BulkRepositories


class LookupStrategy(Protocol):
    def find(
        self, collection: ResourceCollection, value: object, field: str
    ) -> Resource | None: ...


class BatchLookup:
    """Linear scan over records created earlier in the batch; first exact match wins."""

    def __init__(self, resources: BulkResources) -> None:
        self.resources = resources

    def find(self, collection: ResourceCollection, value: object, field: str) -> Resource | None:
        for resource in self.resources.collection(collection):
            if getattr(resource, field, None) == value:
                return resource
        return None


class StoreLookup:
    """Persisted-store fallback.

    Sources are tried by name then id, endpoints by host then id. Applications have
    no store tier here; they are only found by identifier through
    ``ResourceResolver.application_by_id``.
    """

    def __init__(self, repositories: BulkRepositories) -> None:
        self.repositories = repositories

    def find(self, collection: ResourceCollection, value: object, field: str) -> Resource | None:
        _ = field
        if collection is ResourceCollection.SOURCES:
            found: Resource | None = None
            if isinstance(value, str):
                found = self.repositories.sources.get_by_name(value)
            return found or self._by_id(collection, value)
        if collection is ResourceCollection.ENDPOINTS:
            found = None
            if isinstance(value, str):
                found = self.repositories.endpoints.get_by_host(value)
            return found or self._by_id(collection, value)
        return None

    def _by_id(self, collection: ResourceCollection, value: object) -> Resource | None:
        parsed = parse_id(value)
        if parsed is None:
            return None
        if collection is ResourceCollection.SOURCES:
            return self.repositories.sources.get(parsed)
        return self.repositories.endpoints.get(parsed)


class ResourceResolver:
    """Resolves a reference against ordered lookup strategies."""

    def __init__(self, resources: BulkResources, repositories: BulkRepositories) -> None:
        self.resources = resources
        self.repositories = repositories
        self.strategies: tuple[LookupStrategy, ...] = (
            BatchLookup(resources),
            StoreLookup(repositories),
        )

    def find(
        self,
        collection: ResourceCollection,
        value: object,
        field: str = "name",
    ) -> Resource:
        # a missing reference never matches records whose field is also unset
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ResourceNotFoundError(collection.value, value)
        for strategy in self.strategies:
            found = strategy.find(collection, value, field)
            if found is not None:
                return found
        raise ResourceNotFoundError(collection.value, value)

    def application_by_id(self, value: object) -> Application | None:
        parsed = parse_id(value)
        if parsed is None:
            return None
        for application in self.resources.applications:
            if application.id == parsed:
                return application
        return self.repositories.applications.get(parsed)

    def superkey_for_source(self, source_id: UUID, *, authtype: str) -> Authentication | None:
        for authentication in self.resources.authentications:
            if authentication.authtype == authtype and authentication.is_owned_by(
                ResourceKind.SOURCE, source_id
            ):
                return authentication
        return self.repositories.authentications.find_superkey(source_id, authtype=authtype)
