"""Translate validated payloads into domain requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sources_bulk.adapters.payload.schema import BulkCreatePayload
from sources_bulk.domain.bulk import BulkCreateRequest

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sources_bulk.adapters.payload.schema import PayloadModel


def _fields(items: Sequence[PayloadModel] | None) -> list[dict[str, object]] | None:
    if items is None:
        return None
    # null fields are dropped so entity defaults apply
    return [item.model_dump(exclude_none=True) for item in items]


def to_request(payload: BulkCreatePayload) -> BulkCreateRequest:
    return BulkCreateRequest.build(
        sources=_fields(payload.sources),
        endpoints=_fields(payload.endpoints),
        applications=_fields(payload.applications),
        authentications=_fields(payload.authentications),
    )


def parse_request(raw: str | bytes) -> BulkCreateRequest:
    """Validate a JSON document and return the equivalent ``BulkCreateRequest``."""

    return to_request(BulkCreatePayload.model_validate_json(raw))
