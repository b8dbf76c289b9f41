"""Core domain logic for the advtxt data store adapter.

This package contains zero external dependencies. The MongoDB driver
and settings loading are handled by the adapters package and config.
"""

from .callbacks import complete_with_callback
from .errors import (
    ConfigurationError,
    DatabaseConnectionError,
    DataStoreError,
    FindError,
    InsertError,
    InvalidDocumentError,
    MultiInsertError,
    NotInitializedError,
    UpdateError,
)
from .models import AdapterType, MongoDBConfig, StoreConfig
from .ports import DataStorePort

__all__ = [
    "AdapterType",
    "ConfigurationError",
    "DataStoreError",
    "DataStorePort",
    "DatabaseConnectionError",
    "FindError",
    "InsertError",
    "InvalidDocumentError",
    "MongoDBConfig",
    "MultiInsertError",
    "NotInitializedError",
    "StoreConfig",
    "UpdateError",
    "complete_with_callback",
]
