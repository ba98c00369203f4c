"""Sources and the records hanging off them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sources_bulk.domain.errors import EntityValidationError
from sources_bulk.domain.model.entity import Entity, require_text
from sources_bulk.domain.model.enums import ResourceKind

if TYPE_CHECKING:
    from uuid import UUID


@dataclass(eq=False, kw_only=True)
class Source(Entity):
    """Root of the graph: one instance of an external system."""

    name: str
    source_type_id: UUID
    uid: str | None = None
    source_ref: str | None = None

    def __post_init__(self) -> None:
        require_text("Source", "name", self.name)


@dataclass(eq=False, kw_only=True)
class Endpoint(Entity):
    source_id: UUID
    host: str | None = None
    scheme: str | None = None
    port: int | None = None
    path: str | None = None
    role: str | None = None
    default: bool = False
    verify_ssl: bool = True


@dataclass(eq=False, kw_only=True)
class Application(Entity):
    source_id: UUID
    application_type_id: UUID
    extra: dict[str, object] = field(default_factory=dict[str, object])


@dataclass(eq=False, kw_only=True)
class Authentication(Entity):
    """Credential bound to exactly one source, endpoint or application.

    Storage uses (resource_type, resource_id) as polymorphic reference.
    """

    authtype: str
    resource_type: ResourceKind
    resource_id: UUID
    name: str | None = None
    username: str | None = None
    password: str | None = None
    extra: dict[str, object] = field(default_factory=dict[str, object])

    def __post_init__(self) -> None:
        require_text("Authentication", "authtype", self.authtype)
        if not isinstance(self.resource_type, ResourceKind):
            raise EntityValidationError(
                f"Authentication resource_type must be a ResourceKind, got {self.resource_type!r}"
            )

    @classmethod
    def payload_fields(cls) -> frozenset[str]:
        # parent is only ever set from a resolved resource
        return super().payload_fields() - {"resource_type", "resource_id"}

    def is_owned_by(self, kind: ResourceKind, resource_id: UUID) -> bool:
        return self.resource_type is kind and self.resource_id == resource_id


@dataclass(eq=False, kw_only=True)
class ApplicationAuthentication(Entity):
    """Join record created when an authentication's parent is an application."""

    application_id: UUID
    authentication_id: UUID
