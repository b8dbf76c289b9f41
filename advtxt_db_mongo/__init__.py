"""An extraordinarily thin asyncio wrapper around MongoDB for advtxt."""

from advtxt_db_mongo.adapters.store.mongodb import MongoDBDataStore
from advtxt_db_mongo.core import (
    AdapterType,
    ConfigurationError,
    DatabaseConnectionError,
    DataStoreError,
    DataStorePort,
    FindError,
    InsertError,
    InvalidDocumentError,
    MongoDBConfig,
    MultiInsertError,
    NotInitializedError,
    StoreConfig,
    UpdateError,
    complete_with_callback,
)

__version__ = "0.1.0"

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
    "MongoDBDataStore",
    "MultiInsertError",
    "NotInitializedError",
    "StoreConfig",
    "UpdateError",
    "complete_with_callback",
]
