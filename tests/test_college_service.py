"""
Unit tests for CollegeService and pagination.
"""

import math

import pytest

from college_api.app.core.dataset import build_dataset
from college_api.app.services.college_service import CollegeService, paginate


class TestCollegeService:
    """Test cases for CollegeService."""

    @pytest.fixture
    def service(self, dataset):
        return CollegeService(dataset)

    def test_total(self, service):
        """Test total counts every record."""
        assert service.total() == 3

    def test_search_by_keyword(self, service):
        """Test keyword search normalizes names and keeps dataset order."""
        result = service.search_by_keyword("abc", 1, 10)

        assert result.total == 2
        assert result.total_pages == 1
        assert [item["name"] for item in result.data] == ["ABC College", "ABC Tech"]
        assert result.data[0] == {"name": "ABC College", "state": "X", "district": "D1"}

    def test_search_is_case_insensitive(self, service):
        """Test 'abc' and 'ABC' yield identical pages."""
        assert service.search_by_keyword("abc", 1, 10) == service.search_by_keyword("ABC", 1, 10)

    def test_search_no_match(self, service):
        """Test a keyword matching nothing gives an empty page."""
        result = service.search_by_keyword("nothing", 1, 10)
        assert result.data == []
        assert result.total == 0
        assert result.total_pages == 0

    def test_search_does_not_modify_dataset(self, service, dataset):
        """Test names are cleaned in the output only."""
        service.search_by_keyword("abc", 1, 10)
        assert dataset[0]["name"] == "ABC College (Id:12)"

    def test_filter_by_state(self, service):
        """Test state filter is exact and case-insensitive."""
        assert service.filter_by_state("Y", 1, 10).total == 1
        assert service.filter_by_state("x", 1, 10).total == 2
        assert service.filter_by_state("X ", 1, 10).total == 0

    def test_filter_by_district(self, service):
        """Test district filter is exact and case-insensitive."""
        result = service.filter_by_district("d2", 1, 10)
        assert result.total == 1
        assert result.data[0]["name"] == "XYZ Inst"
        assert service.filter_by_district("D", 1, 10).total == 0

    def test_list_states(self, service):
        """Test distinct states are sorted."""
        assert service.list_states() == ["X", "Y"]

    def test_list_states_keeps_stored_case(self):
        """Test states differing in case are listed separately."""
        service = CollegeService(
            build_dataset(
                [
                    {"name": "a", "state": "kerala", "district": "k"},
                    {"name": "b", "state": "Kerala", "district": "k"},
                    {"name": "c", "state": "Kerala", "district": "k"},
                ]
            )
        )
        assert service.list_states() == ["Kerala", "kerala"]

    def test_list_districts(self, service):
        """Test districts of a state are distinct and sorted."""
        assert service.list_districts("x") == ["D1", "D2"]
        assert service.list_districts("unknown") == []

    def test_empty_dataset(self):
        """Test every operation works on an empty dataset."""
        service = CollegeService(())
        assert service.total() == 0
        assert service.list_states() == []
        assert service.filter_by_state("X", 1, 10).total_pages == 0


class TestPagination:
    """Test cases for paginate."""

    @pytest.fixture
    def service(self, large_dataset):
        return CollegeService(large_dataset)

    def test_last_partial_page(self, service):
        """Test page 3 of 25 records with limit 10 holds records 21-25."""
        result = service.filter_by_state("S", 3, 10)

        assert result.total == 25
        assert result.total_pages == 3
        assert [item["name"] for item in result.data] == [f"College {i}" for i in range(21, 26)]

    def test_page_past_the_end(self, service):
        """Test a page beyond the last one is empty but keeps the totals."""
        result = service.filter_by_state("S", 4, 10)

        assert result.data == []
        assert result.page == 4
        assert result.limit == 10
        assert result.total == 25
        assert result.total_pages == 3

    @pytest.mark.parametrize("limit", [1, 2, 3, 7, 10, 24, 25, 26, 100])
    def test_pages_reconstruct_result_set(self, service, limit):
        """Test concatenating every page yields the full result in order."""
        first = service.filter_by_state("S", 1, limit)
        assert first.total_pages == math.ceil(25 / limit)

        names = []
        for page in range(1, first.total_pages + 1):
            result = service.filter_by_state("S", page, limit)
            assert len(result.data) <= limit
            names.extend(item["name"] for item in result.data)

        assert names == [f"College {i:02d}" for i in range(1, 26)]

    def test_extra_columns_are_kept(self, service):
        """Test columns beyond name/state/district are returned."""
        result = service.filter_by_district("d", 1, 1)
        assert result.data[0]["type"] == "Affiliated"

    @pytest.mark.parametrize("page, limit", [(0, 10), (1, 0), (-1, 5)])
    def test_rejects_non_positive_arguments(self, page, limit):
        """Test paginate refuses values that validation should have caught."""
        with pytest.raises(ValueError):
            paginate([], page, limit)
