"""Resolution of source-type and application-type references."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from sources_bulk.domain.errors import TypeNotFoundError
from sources_bulk.domain.model import parse_id

if TYPE_CHECKING:
    from sources_bulk.domain.model import ApplicationType, SourceType
    from sources_bulk.domain.ports import ApplicationTypeRepository, SourceTypeRepository

log = logging.getLogger(__name__)


class TypeLookup:
    """Finds catalog types by identifier, exact name or name pattern.

    Application types are matched with ``re.search``: the caller's value is a
    regular expression applied to each catalog name, so ``"aws"`` matches
    ``"aws-s3"``. The catalog is scanned in name order and the first match wins.
    The catalog is read once per instance.
    """

    def __init__(
        self,
        source_types: SourceTypeRepository,
        application_types: ApplicationTypeRepository,
    ) -> None:
        self._source_types = source_types
        self._application_types = application_types
        self._application_catalog: tuple[ApplicationType, ...] | None = None

    def source_type(self, *, type_id: object = None, name: object = None) -> SourceType:
        found: SourceType | None = None
        parsed = parse_id(type_id)
        if parsed is not None:
            found = self._source_types.get(parsed)
        if found is None and isinstance(name, str) and name:
            found = self._source_types.get_by_name(name)
        if found is None:
            raise TypeNotFoundError("Source Type not found")
        return found

    def application_type_by_id(self, type_id: object) -> ApplicationType | None:
        parsed = parse_id(type_id)
        if parsed is None:
            return None
        return self._application_types.get(parsed)

    def application_type(self, pattern: object) -> ApplicationType:
        if not isinstance(pattern, str) or not pattern:
            raise TypeNotFoundError(f"no applicable application type found for {pattern}")
        try:
            matcher = re.compile(pattern)
        except re.error as exc:
            raise TypeNotFoundError(
                f"no applicable application type found for {pattern}: {exc}"
            ) from exc

        for candidate in self._catalog():
            if matcher.search(candidate.name):
                log.debug("Matched application type %r to %s", pattern, candidate.name)
                return candidate
        raise TypeNotFoundError(f"no applicable application type found for {pattern}")

    def _catalog(self) -> tuple[ApplicationType, ...]:
        if self._application_catalog is None:
            self._application_catalog = tuple(self._application_types.list_all())
        return self._application_catalog
