"""Per-kind creators that resolve a request's references and persist the record."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from sources_bulk.config.bulk import DEFAULT_SUPERKEY_AUTHTYPE
from sources_bulk.domain.errors import AmbiguousParentError, TypeNotFoundError
from sources_bulk.domain.model import (
    Application,
    ApplicationAuthentication,
    Authentication,
    Endpoint,
    ResourceCollection,
    ResourceKind,
    Source,
)

from .resolver import ResourceResolver

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from sources_bulk.domain.model import ApplicationType, Resource
    from sources_bulk.domain.ports import ApplicationCreatedHook, BulkRepositories

    from .context import BulkResources, FieldMap
    from .type_lookup import TypeLookup

log = logging.getLogger(__name__)


def extract_fields(
    request: FieldMap, keys: Iterable[str]
) -> tuple[dict[str, object], dict[str, object]]:
    """Split ``request`` into resolution fields and the entity payload.

    The request itself is left untouched.
    """

    wanted = set(keys)
    references = {key: value for key, value in request.items() if key in wanted}
    payload = {key: value for key, value in request.items() if key not in wanted}
    return references, payload


class SourceCreator:
    name = "sources"

    def __init__(self, repositories: BulkRepositories, type_lookup: TypeLookup) -> None:
        self.repositories = repositories
        self.type_lookup = type_lookup

    def create(self, requests: Sequence[FieldMap], resources: BulkResources) -> tuple[Source, ...]:
        _ = resources
        created: list[Source] = []
        for request in requests:
            references, payload = extract_fields(request, ("source_type_id", "type"))
            source_type = self.type_lookup.source_type(
                type_id=references.get("source_type_id"),
                name=references.get("type"),
            )
            source = Source.from_payload(payload, source_type_id=source_type.id)
            self.repositories.sources.add(source)
            created.append(source)
        return tuple(created)


class EndpointCreator:
    name = "endpoints"

    def __init__(self, repositories: BulkRepositories) -> None:
        self.repositories = repositories

    def create(
        self, requests: Sequence[FieldMap], resources: BulkResources
    ) -> tuple[Endpoint, ...]:
        if not requests:
            return ()
        resolver = ResourceResolver(resources, self.repositories)
        created: list[Endpoint] = []
        for request in requests:
            references, payload = extract_fields(request, ("source_name",))
            source = resolver.find(ResourceCollection.SOURCES, references.get("source_name"))
            endpoint = Endpoint.from_payload(payload, source_id=source.id)
            self.repositories.endpoints.add(endpoint)
            created.append(endpoint)
        return tuple(created)


class ApplicationCreator:
    """Creates applications and notifies the provisioning hook for each one.

    The hook runs after the application is added, so a superkey authentication
    created in an earlier phase is already visible to it.
    """

    name = "applications"

    def __init__(
        self,
        repositories: BulkRepositories,
        type_lookup: TypeLookup,
        *,
        superkey_authtype: str = DEFAULT_SUPERKEY_AUTHTYPE,
        on_created: ApplicationCreatedHook | None = None,
    ) -> None:
        self.repositories = repositories
        self.type_lookup = type_lookup
        self.superkey_authtype = superkey_authtype
        self.on_created = on_created

    def create(
        self, requests: Sequence[FieldMap], resources: BulkResources
    ) -> tuple[Application, ...]:
        if not requests:
            return ()
        resolver = ResourceResolver(resources, self.repositories)
        created: list[Application] = []
        for request in requests:
            references, payload = extract_fields(
                request, ("source_name", "application_type_id", "type")
            )
            source = resolver.find(ResourceCollection.SOURCES, references.get("source_name"))
            application_type = self._application_type(references)
            application = Application.from_payload(
                payload,
                source_id=source.id,
                application_type_id=application_type.id,
            )
            self.repositories.applications.add(application)
            if self.on_created is not None:
                superkey = resolver.superkey_for_source(
                    source.id, authtype=self.superkey_authtype
                )
                self.on_created(application, superkey=superkey)
            created.append(application)
        return tuple(created)

    def _application_type(self, references: dict[str, object]) -> ApplicationType:
        found = self.type_lookup.application_type_by_id(references.get("application_type_id"))
        if found is not None:
            return found
        type_name = references.get("type")
        if type_name is None:
            raise TypeNotFoundError("Application Type not found")
        return self.type_lookup.application_type(type_name)


class AuthenticationCreator:
    name = "authentications"

    def __init__(self, repositories: BulkRepositories, type_lookup: TypeLookup) -> None:
        self.repositories = repositories
        self.type_lookup = type_lookup

    def create(
        self, requests: Sequence[FieldMap], resources: BulkResources
    ) -> tuple[Authentication, ...]:
        if not requests:
            return ()
        resolver = ResourceResolver(resources, self.repositories)
        created: list[Authentication] = []
        for request in requests:
            references, payload = extract_fields(request, ("resource_type", "resource_name"))
            kind = _parent_kind(references.get("resource_type"))
            parent = self._resolve_parent(resolver, kind, references.get("resource_name"))
            authentication = Authentication.from_payload(
                payload, resource_type=kind, resource_id=parent.id
            )
            self.repositories.authentications.add(authentication)
            if kind is ResourceKind.APPLICATION:
                self.repositories.application_authentications.add(
                    ApplicationAuthentication(
                        application_id=parent.id,
                        authentication_id=authentication.id,
                    )
                )
            log.debug(
                "Created %s authentication for %s %s", authentication.authtype, kind, parent.id
            )
            created.append(authentication)
        return tuple(created)

    def _resolve_parent(
        self, resolver: ResourceResolver, kind: ResourceKind, name: object
    ) -> Resource:
        if kind is ResourceKind.SOURCE:
            return resolver.find(kind.collection, name)
        if kind is ResourceKind.ENDPOINT:
            return resolver.find(kind.collection, name, field="host")
        # by identifier first; otherwise the name is an application type pattern
        application = resolver.application_by_id(name)
        if application is not None:
            return application
        application_type = self.type_lookup.application_type(name)
        return resolver.find(
            kind.collection,
            application_type.id,
            field="application_type_id",
        )


def _parent_kind(value: object) -> ResourceKind:
    try:
        return ResourceKind(cast("str", value))
    except ValueError as exc:
        kinds = ", ".join(kind.value for kind in ResourceKind)
        raise AmbiguousParentError(
            f"authentication resource_type must be one of {kinds}, got {value!r}"
        ) from exc
