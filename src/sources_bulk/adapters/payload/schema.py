"""Pydantic models for the JSON bulk-create payload.

Only the reference fields the core resolves are typed; every other field is kept
as-is and handed to the entity constructors, which reject what they don't know.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PayloadModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class SourcePayload(PayloadModel):
    name: str
    source_type_id: str | None = None
    type: str | None = None


class EndpointPayload(PayloadModel):
    source_name: str
    host: str | None = None


class ApplicationPayload(PayloadModel):
    source_name: str
    application_type_id: str | None = None
    type: str | None = None


class AuthenticationPayload(PayloadModel):
    authtype: str
    resource_type: str
    resource_name: str


class BulkCreatePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sources: list[SourcePayload] | None = None
    endpoints: list[EndpointPayload] | None = None
    applications: list[ApplicationPayload] | None = None
    authentications: list[AuthenticationPayload] | None = None
