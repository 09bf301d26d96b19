"""
Pydantic models for college listings.

``SearchRequest`` is the body of ``POST /colleges/search``.
``CollegePage`` is the envelope returned by every paginated endpoint.
``WholeNumber`` is the integer type used for ``page`` and ``limit``
both in the body and in query strings.
"""

import re
from typing import Annotated, Any, Dict, List

from pydantic import BaseModel, BeforeValidator, Field, field_validator

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

_INTEGER_RE = re.compile(r"[+-]?\d+")


def require_integer(value: Any) -> Any:
    """Refuse booleans and strings such as ``"1.0"`` before int coercion."""
    if isinstance(value, bool):
        raise ValueError("must be an integer")
    if isinstance(value, str) and not _INTEGER_RE.fullmatch(value.strip()):
        raise ValueError("must be an integer")
    return value


WholeNumber = Annotated[int, BeforeValidator(require_integer)]


class SearchRequest(BaseModel):
    keyword: str = Field(..., examples=["engineering"])
    page: WholeNumber = Field(DEFAULT_PAGE, ge=1, examples=[1])
    limit: WholeNumber = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, examples=[10])

    @field_validator("keyword")
    @classmethod
    def keyword_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("keyword must not be empty")
        return value


class CollegePage(BaseModel):
    """One page of a filtered result set plus the totals."""

    data: List[Dict[str, str]]
    page: int
    limit: int
    total: int
    total_pages: int = Field(..., alias="totalPages")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }


class TotalRead(BaseModel):
    total: int
