"""
FastAPI dependencies.

The query service and the response cache are created by
``create_app`` and stored on ``app.state``; handlers receive them
through these dependencies instead of importing module globals.
"""

import logging
from typing import Any, Callable, TypeVar

from fastapi import Request

from ..core.cache import TTLCache
from ..services.college_service import CollegeService

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_college_service(request: Request) -> CollegeService:
    return request.app.state.college_service


def get_cache(request: Request) -> TTLCache:
    return request.app.state.cache


def cached(cache: TTLCache, key: str, compute: Callable[[], T]) -> T:
    """Return the cached value for ``key`` or compute and store it.

    The computation runs outside the cache lock; concurrent misses on
    the same key may compute twice and the later write wins.
    """
    value: Any = cache.get(key)
    if value is not None:
        logger.debug("Cache hit for %s", key)
        return value
    logger.debug("Cache miss for %s", key)
    value = compute()
    cache.set(key, value)
    return value
