"""Data store adapters for document persistence.

Implementations:
- MongoDB (motor, asyncio)
"""

from .mongodb import MongoDBDataStore

__all__ = ["MongoDBDataStore"]
