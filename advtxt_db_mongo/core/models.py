"""Domain models for the advtxt MongoDB data store adapter.

All models in this module use only Python standard library types,
keeping the core free of driver and settings dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import ConfigurationError

WRONG_ADAPTER_MESSAGE = "Configuration error! Wrong adapter or no adapter specified."


class AdapterType(Enum):
    """Backing store adapters this package can serve.

    MongoDB is the only legal tag; anything else is a configuration error.
    """

    MONGODB = "mongodb"


@dataclass(frozen=True)
class MongoDBConfig:
    """Connection settings handed to the MongoDB driver."""

    uri: str
    database: str | None = None  # falls back to the database named in the URI
    server_selection_timeout_ms: int = 5000

    def __post_init__(self) -> None:
        """Validate connection settings on creation."""
        if not isinstance(self.uri, str) or not self.uri.strip():
            raise ConfigurationError("mongodb.uri must be a non-empty string.")
        if self.database is not None and (
            not isinstance(self.database, str) or not self.database.strip()
        ):
            raise ConfigurationError("mongodb.database must be a non-empty string.")
        if self.server_selection_timeout_ms <= 0:
            raise ConfigurationError(
                "mongodb.server_selection_timeout_ms must be positive."
            )


@dataclass(frozen=True)
class StoreConfig:
    """Validated adapter configuration.

    Mirrors the externally supplied structure::

        {"adapter": "mongodb", "mongodb": {"uri": "mongodb://host/db"}}
    """

    adapter: AdapterType
    mongodb: MongoDBConfig

    def __post_init__(self) -> None:
        """Reject any adapter tag that is not an AdapterType member."""
        if not isinstance(self.adapter, AdapterType):
            raise ConfigurationError(WRONG_ADAPTER_MESSAGE)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "StoreConfig":
        """Parse a plain configuration mapping.

        Args:
            data: Mapping with an ``adapter`` discriminator and a nested
                ``mongodb`` section.

        Returns:
            Validated StoreConfig.

        Raises:
            ConfigurationError: If the discriminator is missing or names
                another adapter, or if the ``mongodb`` section is unusable.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(WRONG_ADAPTER_MESSAGE)

        try:
            adapter = AdapterType(data.get("adapter"))
        except ValueError:
            raise ConfigurationError(WRONG_ADAPTER_MESSAGE) from None

        section = data.get("mongodb")
        if not isinstance(section, Mapping) or "uri" not in section:
            raise ConfigurationError("Missing mongodb.uri in configuration.")

        try:
            timeout_ms = int(section.get("server_selection_timeout_ms", 5000))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid mongodb.server_selection_timeout_ms: {e}"
            ) from e

        return cls(
            adapter=adapter,
            mongodb=MongoDBConfig(
                uri=section["uri"],
                database=section.get("database"),
                server_selection_timeout_ms=timeout_ms,
            ),
        )
