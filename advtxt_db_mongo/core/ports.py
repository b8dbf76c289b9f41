"""Port interface for the advtxt data store.

The abstract base class defines the boundary between callers (the
game engine) and the concrete document-database adapter. Implementations
live in the adapters/ package.

Lifecycle:

- **uninitialized**: no connection handle; only ``initialize`` is meaningful.
- **ready**: connection handle present; every operation is meaningful.

The transition happens once, on the first successful ``initialize``.
There is no way back to uninitialized.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .models import StoreConfig


class DataStorePort(ABC):
    """Port for reading and writing documents in the backing store.

    Implementations must:
    - Validate configuration before touching the driver
    - Surface every failure as a DataStoreError subclass
    - Never retry internally
    """

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """True once initialize() has succeeded."""

    @abstractmethod
    async def initialize(
        self, config: StoreConfig | Mapping[str, Any]
    ) -> "DataStorePort":
        """Open the connection to the backing store.

        Args:
            config: A StoreConfig, or a mapping in the shape
                ``{"adapter": "mongodb", "mongodb": {"uri": ...}}``.

        Returns:
            The adapter itself, for chaining.

        Raises:
            ConfigurationError: Missing or wrong adapter discriminator.
                No connection is attempted in this case.
            DatabaseConnectionError: Connecting failed or produced no
                usable database.
        """

    @abstractmethod
    async def update(
        self,
        name: str,
        selector: Mapping[str, Any],
        data: Mapping[str, Any],
    ) -> int:
        """Set fields on every document matching a selector.

        ``data`` is applied as a partial update (``$set``), never as a
        document replacement.

        Args:
            name: Collection name.
            selector: Query selecting the documents to update.
            data: Fields to set on each matching document.

        Returns:
            Number of documents modified.

        Raises:
            NotInitializedError: initialize() has not succeeded.
            UpdateError: The driver reported a failure.
        """

    @abstractmethod
    async def find_one(
        self, name: str, selector: Mapping[str, Any]
    ) -> dict[str, Any] | None:
        """Find the first document matching a selector.

        Args:
            name: Collection name.
            selector: Query to match.

        Returns:
            The document, or None if nothing matches.

        Raises:
            NotInitializedError: initialize() has not succeeded.
            FindError: The driver reported a failure.
        """

    @abstractmethod
    async def insert_one(
        self, name: str, item: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Insert a single document.

        Args:
            name: Collection name.
            item: Document to insert. Not mutated.

        Returns:
            The inserted document, including any store-assigned ``_id``.

        Raises:
            InvalidDocumentError: ``item`` is not a mapping. Raised before
                any driver interaction.
            NotInitializedError: initialize() has not succeeded.
            InsertError: The driver reported a failure.
            MultiInsertError: The driver reported other than exactly one
                inserted document.
        """
