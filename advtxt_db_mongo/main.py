"""Composition root for the advtxt MongoDB data store.

This module is the ONLY location that imports both the core port and
concrete adapter implementations. Wiring happens here:

- Configuration loading via config module
- Logging setup
- Adapter instantiation and initialization
"""

import logging
import sys

from advtxt_db_mongo.adapters.store.mongodb import MongoDBDataStore
from advtxt_db_mongo.config import Settings, load_settings
from advtxt_db_mongo.core.errors import ConfigurationError
from advtxt_db_mongo.core.models import AdapterType
from advtxt_db_mongo.core.ports import DataStorePort


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "name": "%(name)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def create_data_store(settings: Settings) -> DataStorePort:
    """Instantiate the data store adapter selected by configuration.

    The returned store is uninitialized.

    Raises:
        ConfigurationError: If the configured adapter has no implementation.
    """
    if settings.adapter is AdapterType.MONGODB:
        return MongoDBDataStore()
    raise ConfigurationError(f"Unknown adapter: {settings.adapter}")


async def bootstrap(env_file: str | None = None) -> DataStorePort:
    """Load configuration, configure logging and return a ready data store.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate the adapter
    4. Connect it

    Raises:
        ValidationError: If settings are invalid.
        DataStoreError: If the adapter cannot be initialized.
    """
    settings = load_settings(env_file)

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info(f"Initializing data store adapter: {settings.adapter.value}")

    store = create_data_store(settings)
    try:
        await store.initialize(settings.to_store_config())
    except ConfigurationError as e:
        logger.error(f"Data store configuration rejected: {e}")
        raise

    logger.info("Data store ready")
    return store
