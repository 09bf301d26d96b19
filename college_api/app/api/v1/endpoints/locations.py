"""
State and district listings.

Both lists are sorted and free of duplicates; they are cached as
tuples so a cached value cannot be altered by a caller.
"""

from typing import List

from fastapi import APIRouter, Depends

from college_api.app.api.deps import cached, get_cache, get_college_service
from college_api.app.core.cache import TTLCache, make_cache_key
from college_api.app.services.college_service import CollegeService

router = APIRouter()


@router.get("/allstates", response_model=List[str])
async def list_states(
    service: CollegeService = Depends(get_college_service),
    cache: TTLCache = Depends(get_cache),
) -> List[str]:
    return list(cached(cache, "allstates", lambda: tuple(service.list_states())))


@router.get("/districts/{state}", response_model=List[str])
async def list_districts(
    state: str,
    service: CollegeService = Depends(get_college_service),
    cache: TTLCache = Depends(get_cache),
) -> List[str]:
    """Districts of ``state``; an unknown state yields an empty list."""
    key = make_cache_key("districts", state)
    return list(cached(cache, key, lambda: tuple(service.list_districts(state))))
