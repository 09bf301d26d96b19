"""
College endpoints for API v1.

Keyword search takes its parameters from the JSON body; the state and
district filters take ``page`` and ``limit`` from the query string.
Paginated responses are cached per endpoint and parameter set.
"""

from fastapi import APIRouter, Depends, Query

from college_api.app.api.deps import cached, get_cache, get_college_service
from college_api.app.core.cache import TTLCache, make_cache_key
from college_api.app.schemas.college import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    CollegePage,
    SearchRequest,
    TotalRead,
    WholeNumber,
)
from college_api.app.services.college_service import CollegeService

router = APIRouter()


@router.get("/total", response_model=TotalRead)
async def total_colleges(service: CollegeService = Depends(get_college_service)) -> TotalRead:
    """Number of institutions in the dataset."""
    return TotalRead(total=service.total())


@router.post("/search", response_model=CollegePage)
async def search_colleges(
    query: SearchRequest,
    service: CollegeService = Depends(get_college_service),
    cache: TTLCache = Depends(get_cache),
) -> CollegePage:
    """Search institutions whose name contains ``keyword``.

    - **keyword**: required, matched case-insensitively.
    - **page**: 1-based page number (default 1).
    - **limit**: page size between 1 and 100 (default 10).
    """
    key = make_cache_key("search", query.keyword, query.page, query.limit)
    return cached(
        cache, key, lambda: service.search_by_keyword(query.keyword, query.page, query.limit)
    )


@router.get("/state/{state}", response_model=CollegePage)
async def colleges_by_state(
    state: str,
    page: WholeNumber = Query(DEFAULT_PAGE, ge=1),
    limit: WholeNumber = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    service: CollegeService = Depends(get_college_service),
    cache: TTLCache = Depends(get_cache),
) -> CollegePage:
    """Institutions located in ``state`` (case-insensitive)."""
    key = make_cache_key("state", state, page, limit)
    return cached(cache, key, lambda: service.filter_by_state(state, page, limit))


@router.get("/district/{district}", response_model=CollegePage)
async def colleges_by_district(
    district: str,
    page: WholeNumber = Query(DEFAULT_PAGE, ge=1),
    limit: WholeNumber = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    service: CollegeService = Depends(get_college_service),
    cache: TTLCache = Depends(get_cache),
) -> CollegePage:
    """Institutions located in ``district`` (case-insensitive)."""
    key = make_cache_key("district", district, page, limit)
    return cached(cache, key, lambda: service.filter_by_district(district, page, limit))
