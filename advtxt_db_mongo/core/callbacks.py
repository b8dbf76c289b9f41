"""Error-first callback bridge for data store operations.

Callers written against the ``callback(error, result)`` convention can
wrap any adapter coroutine with :func:`complete_with_callback`. The
callback runs exactly once: an error short-circuits the operation.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from .errors import DataStoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Callback = Callable[[DataStoreError | None, Any], None]


async def complete_with_callback(
    operation: Awaitable[T], callback: Callback
) -> None:
    """Await an operation and report its outcome to an error-first callback.

    Args:
        operation: Awaitable returned by a DataStorePort method.
        callback: Called as ``callback(None, result)`` on success or
            ``callback(error, None)`` if a DataStoreError was raised.

    Raises:
        Exception: Anything other than a DataStoreError propagates, and the
            callback is not invoked.
    """
    try:
        result = await operation
    except DataStoreError as e:
        logger.debug(f"Delivering error to callback: {e}")
        callback(e, None)
        return

    callback(None, result)
