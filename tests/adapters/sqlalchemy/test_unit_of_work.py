from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine

from sources_bulk.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyBulkUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)
from sources_bulk.domain.model import SourceType

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine


@pytest.fixture(autouse=True)
def reset_unit_of_work_state() -> Iterator[None]:
    shutdown()
    yield
    shutdown()


def test_sqlalchemy_unit_of_work_requires_startup() -> None:
    with pytest.raises(StartupError):
        SqlAlchemyBulkUnitOfWork()


def test_startup_requires_force_for_reconfiguration() -> None:
    engine_a = create_engine("sqlite+pysqlite:///:memory:", future=True)
    engine_b = create_engine("sqlite+pysqlite:///:memory:", future=True)

    startup(engine=engine_a, force=True)

    with pytest.raises(StartupError):
        startup(engine=engine_b)

    startup(engine=engine_b, force=True)
    assert is_started()
    with SqlAlchemyBulkUnitOfWork() as uow:
        assert uow.session.get_bind() is engine_b


def test_unit_of_work_commits(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)

    with SqlAlchemyBulkUnitOfWork() as uow:
        uow.repositories.source_types.add(SourceType(name="openshift"))
        uow.commit()

    with SqlAlchemyBulkUnitOfWork() as uow:
        assert uow.repositories.source_types.get_by_name("openshift") is not None


def test_unit_of_work_rolls_back_on_error(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)

    with pytest.raises(RuntimeError, match="boom"), SqlAlchemyBulkUnitOfWork() as uow:
        uow.repositories.source_types.add(SourceType(name="openshift"))
        raise RuntimeError("boom")

    with SqlAlchemyBulkUnitOfWork() as uow:
        assert uow.repositories.source_types.get_by_name("openshift") is None


def test_repositories_unavailable_outside_context(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)
    uow = SqlAlchemyBulkUnitOfWork()

    with pytest.raises(StartupError):
        _ = uow.repositories
