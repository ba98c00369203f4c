"""Request, running context and result structures for bulk creation."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from sources_bulk.domain.model import (
    Application,
    Authentication,
    Endpoint,
    ResourceCollection,
    Source,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from sources_bulk.domain.model import Resource


type FieldMap = Mapping[str, object]
type FieldMaps = tuple[FieldMap, ...]

REQUEST_KEYS: tuple[str, ...] = ("sources", "endpoints", "applications", "authentications")


def _freeze(requests: Iterable[Mapping[str, object]] | None) -> FieldMaps:
    if requests is None:
        return ()
    return tuple(MappingProxyType(dict(request)) for request in requests)


@dataclass(frozen=True, slots=True)
class BulkCreateRequest:
    """One batch of creation requests, keyed by entity kind.

    Each request is a read-only copy of the caller's mapping; absent sequences
    become empty tuples.
    """

    sources: FieldMaps = ()
    endpoints: FieldMaps = ()
    applications: FieldMaps = ()
    authentications: FieldMaps = ()

    @classmethod
    def build(
        cls,
        *,
        sources: Iterable[Mapping[str, object]] | None = None,
        endpoints: Iterable[Mapping[str, object]] | None = None,
        applications: Iterable[Mapping[str, object]] | None = None,
        authentications: Iterable[Mapping[str, object]] | None = None,
    ) -> BulkCreateRequest:
        return cls(
            sources=_freeze(sources),
            endpoints=_freeze(endpoints),
            applications=_freeze(applications),
            authentications=_freeze(authentications),
        )

    def is_empty(self) -> bool:
        return not (self.sources or self.endpoints or self.applications or self.authentications)

    def describe(self) -> str:
        """Render the whole payload for diagnostics."""

        parts = []
        for key in REQUEST_KEYS:
            rendered = [dict(request) for request in getattr(self, key)]
            parts.append(f"{key.capitalize()}: {rendered}")
        return ", ".join(parts)


@dataclass(slots=True)
class BulkResources:
    """Records created so far in the running batch.

    Only the orchestrator appends, and only between phases; creators read it.
    """

    sources: list[Source] = field(default_factory=list[Source])
    endpoints: list[Endpoint] = field(default_factory=list[Endpoint])
    applications: list[Application] = field(default_factory=list[Application])
    authentications: list[Authentication] = field(default_factory=list[Authentication])

    def collection(self, collection: ResourceCollection) -> Sequence[Resource]:
        if collection is ResourceCollection.SOURCES:
            return self.sources
        if collection is ResourceCollection.ENDPOINTS:
            return self.endpoints
        return self.applications

    def record(
        self,
        *,
        sources: Iterable[Source] = (),
        endpoints: Iterable[Endpoint] = (),
        applications: Iterable[Application] = (),
        authentications: Iterable[Authentication] = (),
    ) -> None:
        self.sources.extend(sources)
        self.endpoints.extend(endpoints)
        self.applications.extend(applications)
        self.authentications.extend(authentications)


@dataclass(frozen=True, slots=True)
class BulkCreateResult:
    """Records created by one batch; superkey authentications come first."""

    sources: tuple[Source, ...] = ()
    endpoints: tuple[Endpoint, ...] = ()
    applications: tuple[Application, ...] = ()
    authentications: tuple[Authentication, ...] = ()

    def summary(self) -> dict[str, list[str]]:
        return {
            "sources": [str(item.id) for item in self.sources],
            "endpoints": [str(item.id) for item in self.endpoints],
            "applications": [str(item.id) for item in self.applications],
            "authentications": [str(item.id) for item in self.authentications],
        }
