"""Catalog entries describing the kinds of sources and applications."""

from __future__ import annotations

from dataclasses import dataclass

from sources_bulk.domain.model.entity import Entity, require_text


@dataclass(eq=False, kw_only=True)
class SourceType(Entity):
    name: str
    product_name: str | None = None
    vendor: str | None = None

    def __post_init__(self) -> None:
        require_text("SourceType", "name", self.name)


@dataclass(eq=False, kw_only=True)
class ApplicationType(Entity):
    name: str
    display_name: str | None = None

    def __post_init__(self) -> None:
        require_text("ApplicationType", "name", self.name)
