"""Hook for collaborators reacting to newly created applications."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sources_bulk.domain.model import Application, Authentication


@runtime_checkable
class ApplicationCreatedHook(Protocol):
    """Called once per created application, inside the batch transaction.

    ``superkey`` is the superkey authentication of the application's source, if
    one exists in the batch or the store. Raising aborts the whole batch.
    """

    def __call__(self, application: Application, *, superkey: Authentication | None) -> None: ...
