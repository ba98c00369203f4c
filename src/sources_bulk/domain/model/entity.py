"""
Base building blocks:
identity and construction from loosely-typed request payloads.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Self
from uuid import UUID, uuid4

from sources_bulk.domain.errors import EntityValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping


def new_id() -> UUID:
    return uuid4()


def parse_id(value: object) -> UUID | None:
    """Interpret ``value`` as an identifier; anything unparseable is no identifier."""

    if isinstance(value, UUID):
        return value
    if not isinstance(value, str):
        return None
    try:
        return UUID(value.strip())
    except ValueError:
        return None


@dataclass(eq=False, kw_only=True)
class Entity:
    """Internal identity exists immediately in the domain."""

    id: UUID = field(default_factory=new_id)

    @classmethod
    def payload_fields(cls) -> frozenset[str]:
        """Names a request payload may set directly (identity is always generated)."""

        return frozenset(item.name for item in fields(cls) if item.init and item.name != "id")

    @classmethod
    def from_payload(cls, payload: Mapping[str, object], **links: object) -> Self:
        """Build an entity from request fields plus resolved foreign keys.

        ``links`` carry values the caller resolved itself (foreign keys); they win
        over same-named payload entries.
        """

        unknown = sorted(set(payload) - cls.payload_fields())
        if unknown:
            raise EntityValidationError(
                f"{cls.__name__} does not accept field(s): {', '.join(unknown)}"
            )
        try:
            return cls(**{**payload, **links})  # pyright: ignore[reportArgumentType]
        except TypeError as exc:
            raise EntityValidationError(f"invalid {cls.__name__}: {exc}") from exc


def require_text(owner: str, name: str, value: object) -> None:
    if not isinstance(value, str) or not value.strip():
        raise EntityValidationError(f"{owner} requires a non-blank {name}")
