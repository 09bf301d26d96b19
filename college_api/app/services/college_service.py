"""
Query logic for college listings.

``CollegeService`` wraps an immutable dataset and answers the keyword
search, state/district filters and the distinct-value listings.  All
operations are plain reads; the service keeps lower-cased copies of
the searchable columns so each request only does one pass over the
rows.  Names are cleaned with :func:`normalize_name` on the way out;
the stored records are never modified.
"""

import logging
import math
from typing import List, Sequence

from ..core.dataset import Dataset, Record
from ..schemas.college import CollegePage
from .names import normalize_name

logger = logging.getLogger(__name__)


def paginate(results: Sequence[Record], page: int, limit: int) -> CollegePage:
    """Cut one page out of ``results`` and wrap it with the totals.

    ``page`` is 1-based.  A page past the end yields an empty ``data``
    list; the totals still describe the full result set.
    """
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive")
    total = len(results)
    offset = (page - 1) * limit
    return CollegePage(
        data=[present(record) for record in results[offset:offset + limit]],
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
    )


def present(record: Record) -> dict:
    """Copy a record for output with its name cleaned."""
    item = dict(record)
    item["name"] = normalize_name(record["name"])
    return item


class CollegeService:
    """Read-only queries over a loaded dataset."""

    def __init__(self, dataset: Dataset):
        self.dataset = dataset
        self._names = [record["name"].lower() for record in dataset]
        self._states = [record["state"].lower() for record in dataset]
        self._districts = [record["district"].lower() for record in dataset]

    def total(self) -> int:
        return len(self.dataset)

    def search_by_keyword(self, keyword: str, page: int, limit: int) -> CollegePage:
        """Case-insensitive substring match on the name column."""
        needle = keyword.lower()
        results = [r for r, name in zip(self.dataset, self._names) if needle in name]
        logger.debug("Keyword %r matched %d records", keyword, len(results))
        return paginate(results, page, limit)

    def filter_by_state(self, state: str, page: int, limit: int) -> CollegePage:
        return paginate(self._matching(self._states, state), page, limit)

    def filter_by_district(self, district: str, page: int, limit: int) -> CollegePage:
        return paginate(self._matching(self._districts, district), page, limit)

    def list_states(self) -> List[str]:
        """Distinct state values as stored, sorted ascending."""
        return sorted({record["state"] for record in self.dataset})

    def list_districts(self, state: str) -> List[str]:
        """Distinct districts of one state (matched case-insensitively)."""
        return sorted({record["district"] for record in self._matching(self._states, state)})

    def _matching(self, column: List[str], value: str) -> List[Record]:
        value = value.lower()
        return [record for record, cell in zip(self.dataset, column) if cell == value]
