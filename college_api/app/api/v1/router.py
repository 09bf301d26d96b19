"""
Top-level router for version 1 of the API.

The college listing routes live under ``/colleges``; the state and
district listings keep their historical root paths (``/allstates``
and ``/districts/{state}``).
"""

from fastapi import APIRouter

from .endpoints import colleges, locations

router = APIRouter()

router.include_router(colleges.router, prefix="/colleges", tags=["colleges"])
router.include_router(locations.router, tags=["locations"])
