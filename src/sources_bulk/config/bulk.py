"""Defaults for bulk assembly."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_SUPERKEY_AUTHTYPE = "superkey"


@dataclass(frozen=True, slots=True)
class BulkConfig:
    superkey_authtype: str = DEFAULT_SUPERKEY_AUTHTYPE


def get_bulk_config() -> BulkConfig:
    authtype = os.getenv("SOURCES_BULK_SUPERKEY_AUTHTYPE")
    if authtype and authtype.strip():
        return BulkConfig(superkey_authtype=authtype.strip())
    return BulkConfig()
