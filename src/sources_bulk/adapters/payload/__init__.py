"""Bulk-create payload adapter."""

from __future__ import annotations

from .schema import (
    ApplicationPayload,
    AuthenticationPayload,
    BulkCreatePayload,
    EndpointPayload,
    SourcePayload,
)
from .translator import parse_request, to_request

__all__ = [
    "ApplicationPayload",
    "AuthenticationPayload",
    "BulkCreatePayload",
    "EndpointPayload",
    "SourcePayload",
    "parse_request",
    "to_request",
]
