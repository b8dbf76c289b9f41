"""Error taxonomy for the data store adapter.

Every error carries the module prefix so callers can tell where a
message came from when it is surfaced as a plain string. Errors that
have a natural built-in counterpart also subclass it, so callers can
catch either the adapter error or the built-in category.
"""

MODULE_ID = "advtxt-db-mongo"


class DataStoreError(Exception):
    """Base class for all data store adapter errors."""

    def __init__(self, message: str):
        self.detail = message
        super().__init__(f"{MODULE_ID}: {message}")


class ConfigurationError(DataStoreError, ValueError):
    """Adapter discriminator missing or wrong, or connection settings invalid."""


class DatabaseConnectionError(DataStoreError, ConnectionError):
    """Connection attempt failed or yielded no usable database."""


class NotInitializedError(DataStoreError, RuntimeError):
    """A data operation was attempted before initialize() succeeded."""


class UpdateError(DataStoreError):
    """The driver reported a failure during update."""


class FindError(DataStoreError, LookupError):
    """The driver reported a failure during find_one."""


class InvalidDocumentError(DataStoreError, TypeError):
    """insert_one was given something that is not a document."""


class InsertError(DataStoreError):
    """The driver reported a failure during insert_one."""


class MultiInsertError(InsertError):
    """An insert reported other than exactly one inserted document."""


__all__ = [
    "MODULE_ID",
    "ConfigurationError",
    "DataStoreError",
    "DatabaseConnectionError",
    "FindError",
    "InsertError",
    "InvalidDocumentError",
    "MultiInsertError",
    "NotInitializedError",
    "UpdateError",
]
