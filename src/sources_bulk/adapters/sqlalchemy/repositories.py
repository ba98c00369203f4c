"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import select
from sqlalchemy.exc import StatementError

from sources_bulk.adapters.sqlalchemy.mappings import (
    application_authentication_table,
    application_type_table,
    authentication_table,
    endpoint_table,
    source_table,
    source_type_table,
)
from sources_bulk.domain.errors import EntityValidationError
from sources_bulk.domain.model import (
    Application,
    ApplicationAuthentication,
    ApplicationType,
    Authentication,
    Endpoint,
    Entity,
    ResourceKind,
    Source,
    SourceType,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from sqlalchemy import Table
    from sqlalchemy.orm import Session


class SqlAlchemyRepository[TEntity: Entity]:
    """Shared add/get for repositories over a single mapped class.

    ``add`` flushes immediately so store constraints and column type checks fail
    at the record that violates them rather than at commit.
    """

    def __init__(self, session: Session, entity_cls: type[TEntity]) -> None:
        self.session = session
        self._entity_cls = entity_cls

    def add(self, entity: TEntity) -> None:
        self.session.add(entity)
        try:
            self.session.flush()
        except StatementError as exc:
            raise EntityValidationError(
                f"{self._entity_cls.__name__} rejected by store: {exc.orig}"
            ) from exc

    def get(self, entity_id: UUID) -> TEntity | None:
        return self.session.get(self._entity_cls, entity_id)


class SqlAlchemySourceRepository(SqlAlchemyRepository[Source]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, Source)

    def get_by_name(self, name: str) -> Source | None:
        stmt = select(Source).where(source_table.c.name == name).limit(1)
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemyEndpointRepository(SqlAlchemyRepository[Endpoint]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, Endpoint)

    def get_by_host(self, host: str) -> Endpoint | None:
        stmt = select(Endpoint).where(endpoint_table.c.host == host).limit(1)
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemyApplicationRepository(SqlAlchemyRepository[Application]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, Application)


class SqlAlchemyAuthenticationRepository(SqlAlchemyRepository[Authentication]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, Authentication)

    def find_superkey(self, source_id: UUID, *, authtype: str) -> Authentication | None:
        stmt = (
            select(Authentication)
            .where(authentication_table.c.resource_type == ResourceKind.SOURCE)
            .where(authentication_table.c.resource_id == source_id)
            .where(authentication_table.c.authtype == authtype)
            .limit(1)
        )
        return self.session.execute(stmt).scalar_one_or_none()


class SqlAlchemyApplicationAuthenticationRepository(
    SqlAlchemyRepository[ApplicationAuthentication]
):
    def __init__(self, session: Session) -> None:
        super().__init__(session, ApplicationAuthentication)

    def list_for_application(self, application_id: UUID) -> Sequence[ApplicationAuthentication]:
        stmt = select(ApplicationAuthentication).where(
            application_authentication_table.c.application_id == application_id
        )
        return self.session.execute(stmt).scalars().all()


class SqlAlchemyCatalogRepository[TType: SourceType | ApplicationType](
    SqlAlchemyRepository[TType]
):
    """Type catalogs; entries are unique by name and listed in name order."""

    def __init__(self, session: Session, entity_cls: type[TType], table: Table) -> None:
        super().__init__(session, entity_cls)
        self._table = table

    def get_by_name(self, name: str) -> TType | None:
        stmt = select(self._entity_cls).where(self._table.c.name == name).limit(1)
        return cast("TType | None", self.session.execute(stmt).scalar_one_or_none())

    def list_all(self) -> Sequence[TType]:
        stmt = select(self._entity_cls).order_by(self._table.c.name)
        return cast("Sequence[TType]", self.session.execute(stmt).scalars().all())


class SqlAlchemySourceTypeRepository(SqlAlchemyCatalogRepository[SourceType]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, SourceType, source_type_table)


class SqlAlchemyApplicationTypeRepository(SqlAlchemyCatalogRepository[ApplicationType]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, ApplicationType, application_type_table)


if TYPE_CHECKING:
    from sources_bulk.domain.ports.persistence import (
        ApplicationAuthenticationRepository,
        ApplicationRepository,
        ApplicationTypeRepository,
        AuthenticationRepository,
        EndpointRepository,
        SourceRepository,
        SourceTypeRepository,
    )

    _session_stub = cast("Session", object())
    _source_repo: SourceRepository = SqlAlchemySourceRepository(_session_stub)
    _endpoint_repo: EndpointRepository = SqlAlchemyEndpointRepository(_session_stub)
    _application_repo: ApplicationRepository = SqlAlchemyApplicationRepository(_session_stub)
    _auth_repo: AuthenticationRepository = SqlAlchemyAuthenticationRepository(_session_stub)
    _link_repo: ApplicationAuthenticationRepository = (
        SqlAlchemyApplicationAuthenticationRepository(_session_stub)
    )
    _source_type_repo: SourceTypeRepository = SqlAlchemySourceTypeRepository(_session_stub)
    _application_type_repo: ApplicationTypeRepository = SqlAlchemyApplicationTypeRepository(
        _session_stub
    )
