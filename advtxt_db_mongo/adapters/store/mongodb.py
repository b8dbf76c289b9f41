"""MongoDB data store adapter.

Implements DataStorePort using motor for async access to MongoDB.
An extraordinarily thin wrapper: every operation is a single driver
call, with driver failures re-raised as prefixed DataStoreErrors.
"""

import logging
from collections.abc import Mapping
from typing import Any

from bson import ObjectId
from bson.errors import BSONError
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import WriteConcern
from pymongo.errors import PyMongoError

from advtxt_db_mongo.core.errors import (
    DatabaseConnectionError,
    FindError,
    InsertError,
    InvalidDocumentError,
    MultiInsertError,
    NotInitializedError,
    UpdateError,
)
from advtxt_db_mongo.core.models import MongoDBConfig, StoreConfig
from advtxt_db_mongo.core.ports import DataStorePort

logger = logging.getLogger(__name__)

# Encoding failures raise BSONError, which is not a PyMongoError.
DRIVER_ERRORS = (PyMongoError, BSONError)


class MongoDBDataStore(DataStorePort):
    """MongoDB-backed data store holding one lazily established connection."""

    def __init__(self) -> None:
        self._client: AsyncIOMotorClient | None = None
        self._db: AsyncIOMotorDatabase | None = None
        logger.debug("MongoDB data store instantiated")

    @property
    def is_ready(self) -> bool:
        return self._db is not None

    async def initialize(
        self, config: StoreConfig | Mapping[str, Any]
    ) -> "MongoDBDataStore":
        """Validate configuration and connect to MongoDB."""
        if not isinstance(config, StoreConfig):
            config = StoreConfig.from_mapping(config)

        if self._db is not None:
            logger.warning(
                "initialize() called on a connected store; keeping existing connection"
            )
            return self

        settings = config.mongodb
        client: AsyncIOMotorClient | None = None
        try:
            client = AsyncIOMotorClient(
                settings.uri,
                serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
            )
            await client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"Couldn't connect to MongoDB: {e}")
            if client is not None:
                client.close()
            raise DatabaseConnectionError("Couldn't connect to DB!") from e

        try:
            db = self._select_database(client, settings)
        except PyMongoError as e:
            logger.error(f"Connected to MongoDB but no database is available: {e}")
            client.close()
            raise DatabaseConnectionError("Connected, but failed to get a DB.") from e

        if db is None:
            client.close()
            raise DatabaseConnectionError("Connected, but failed to get a DB.")

        self._client = client
        self._db = db
        logger.info(f"Connected to MongoDB database: {db.name}")
        return self

    async def update(
        self,
        name: str,
        selector: Mapping[str, Any],
        data: Mapping[str, Any],
    ) -> int:
        """Apply ``$set`` to every matching document, acknowledged by one node."""
        collection = self._database().get_collection(
            name, write_concern=WriteConcern(w=1)
        )
        try:
            result = await collection.update_many(selector, {"$set": dict(data)})
        except DRIVER_ERRORS as e:
            logger.error(f"Update on collection {name} failed: {e}")
            raise UpdateError(f"Failed to update DB. {e}") from e

        logger.debug(
            f"Updated {name}: matched={result.matched_count}, "
            f"modified={result.modified_count}"
        )
        return result.modified_count

    async def find_one(
        self, name: str, selector: Mapping[str, Any]
    ) -> dict[str, Any] | None:
        collection = self._database().get_collection(name)
        try:
            return await collection.find_one(selector)
        except DRIVER_ERRORS as e:
            logger.error(f"Lookup on collection {name} failed: {e}")
            raise FindError(f"Error finding item; {e}") from e

    async def insert_one(
        self, name: str, item: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Insert a copy of ``item`` and return it with its ``_id``.

        Goes through insert_many so the driver reports every inserted id,
        which lets us check that exactly one document went in.
        """
        if not isinstance(item, Mapping):
            raise InvalidDocumentError(
                "Tried to insert one of something that's not an object."
            )

        collection = self._database().get_collection(name)
        document = dict(item)
        document.setdefault("_id", ObjectId())
        try:
            result = await collection.insert_many([document])
        except DRIVER_ERRORS as e:
            logger.error(f"Insert into collection {name} failed: {e}")
            raise InsertError(f"Got error while inserting; {e}") from e

        if len(result.inserted_ids) != 1:
            logger.error(
                f"Insert into {name} reported {len(result.inserted_ids)} documents"
            )
            raise MultiInsertError("Inserted multiple items.")

        return document

    def _database(self) -> AsyncIOMotorDatabase:
        """Return the connected database or fail if initialize() hasn't run."""
        if self._db is None:
            raise NotInitializedError("Not connected; call initialize() first.")
        return self._db

    @staticmethod
    def _select_database(
        client: AsyncIOMotorClient, settings: MongoDBConfig
    ) -> AsyncIOMotorDatabase | None:
        # Explicit name wins over the one embedded in the URI.
        if settings.database:
            return client.get_database(settings.database)
        return client.get_default_database()
