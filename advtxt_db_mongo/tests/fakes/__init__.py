"""Fake implementations of the core port for testing.

- FakeDataStorePort: In-memory document store with call recording
"""

from .store import FakeDataStorePort

__all__ = ["FakeDataStorePort"]
