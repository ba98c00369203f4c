"""Error taxonomy for bulk creation.

Every error below is fatal to the batch that raised it. Callers should treat any of
them as "batch not applied" and may resubmit the whole batch after fixing the input.
"""

from __future__ import annotations


class BulkAssemblyError(RuntimeError):
    """Base class for failures while assembling a batch."""


class NotFoundError(BulkAssemblyError):
    """A referenced record or catalog type could not be resolved."""


class ResourceNotFoundError(NotFoundError):
    """No source, endpoint or application matched a reference."""

    def __init__(self, collection: str, value: object) -> None:
        super().__init__(f"no applicable {collection} for {value}")
        self.collection = collection
        self.value = value


class TypeNotFoundError(NotFoundError):
    """No source type or application type matched a reference."""


class AmbiguousParentError(BulkAssemblyError):
    """An authentication names no recognised parent resource kind."""


class EntityValidationError(BulkAssemblyError):
    """An entity failed field validation or a store constraint on create."""


class TransactionFailedError(BulkAssemblyError):
    """The store rejected the commit of a batch."""
