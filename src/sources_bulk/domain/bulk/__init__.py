"""Bulk creation of sources, endpoints, applications and authentications."""

from __future__ import annotations

from .assembly import BulkAssembly, split_authentications
from .context import BulkCreateRequest, BulkCreateResult, BulkResources
from .creators import (
    ApplicationCreator,
    AuthenticationCreator,
    EndpointCreator,
    SourceCreator,
    extract_fields,
)
from .resolver import BatchLookup, ResourceResolver, StoreLookup
from .type_lookup import TypeLookup

__all__ = [
    "ApplicationCreator",
    "AuthenticationCreator",
    "BatchLookup",
    "BulkAssembly",
    "BulkCreateRequest",
    "BulkCreateResult",
    "BulkResources",
    "EndpointCreator",
    "ResourceResolver",
    "SourceCreator",
    "StoreLookup",
    "TypeLookup",
    "extract_fields",
    "split_authentications",
]
