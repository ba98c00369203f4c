"""SQLAlchemy mapping metadata for the domain model."""

from __future__ import annotations

import logging
import uuid
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Uuid,
    orm,
)
from sqlalchemy.orm import configure_mappers

from sources_bulk.domain.model import (
    Application,
    ApplicationAuthentication,
    ApplicationType,
    Authentication,
    Endpoint,
    ResourceKind,
    Source,
    SourceType,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Catalog tables ---------------------------------------------------------------

source_type_table = Table(
    "source_type",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False, unique=True),
    Column("product_name", String, nullable=True),
    Column("vendor", String, nullable=True),
)

application_type_table = Table(
    "application_type",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False, unique=True),
    Column("display_name", String, nullable=True),
)

# Source graph -----------------------------------------------------------------

source_table = Table(
    "source",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False, unique=True),
    Column("source_type_id", UUIDColumnType, ForeignKey("source_type.id"), nullable=False),
    Column("uid", String, nullable=True, unique=True),
    Column("source_ref", String, nullable=True),
)

endpoint_table = Table(
    "endpoint",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "source_id", UUIDColumnType, ForeignKey("source.id", ondelete="CASCADE"), nullable=False
    ),
    Column("host", String, nullable=True, index=True),
    Column("scheme", String, nullable=True),
    Column("port", Integer, nullable=True),
    Column("path", String, nullable=True),
    Column("role", String, nullable=True),
    Column("default", Boolean, nullable=False, default=False),
    Column("verify_ssl", Boolean, nullable=False, default=True),
)

application_table = Table(
    "application",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "source_id", UUIDColumnType, ForeignKey("source.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "application_type_id",
        UUIDColumnType,
        ForeignKey("application_type.id"),
        nullable=False,
    ),
    Column("extra", JSON, nullable=False, default=dict),
)

authentication_table = Table(
    "authentication",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("authtype", String, nullable=False),
    Column("resource_type", Enum(ResourceKind, native_enum=False), nullable=False),
    Column("resource_id", UUIDColumnType, nullable=False),
    Column("name", String, nullable=True),
    Column("username", String, nullable=True),
    Column("password", String, nullable=True),
    Column("extra", JSON, nullable=False, default=dict),
    Index("ix_authentication_resource", "resource_type", "resource_id"),
)

application_authentication_table = Table(
    "application_authentication",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "application_id",
        UUIDColumnType,
        ForeignKey("application.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "authentication_id",
        UUIDColumnType,
        ForeignKey("authentication.id", ondelete="CASCADE"),
        nullable=False,
    ),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(SourceType, source_type_table)
    mapper_registry.map_imperatively(ApplicationType, application_type_table)
    mapper_registry.map_imperatively(Source, source_table)
    mapper_registry.map_imperatively(Endpoint, endpoint_table)
    mapper_registry.map_imperatively(Application, application_table)
    mapper_registry.map_imperatively(Authentication, authentication_table)
    mapper_registry.map_imperatively(ApplicationAuthentication, application_authentication_table)

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
