"""Application configuration helpers."""

from __future__ import annotations

from .bulk import BulkConfig, get_bulk_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "BulkConfig",
    "DatabaseConfig",
    "StorageConfig",
    "get_bulk_config",
    "get_database_config",
    "get_storage_config",
]
