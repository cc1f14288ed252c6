"""Unit tests for IdeaPageQuery."""

import math

import pytest

from ideapool.domain.error import ErrorKind, IdeaError
from ideapool.domain.value import IdeaPageQuery


class TestFromOptions:
    """Tests for IdeaPageQuery.from_options()."""

    def test_defaults_to_first_page(self):
        """Should return page 1 in offset mode when nothing is given."""
        query = IdeaPageQuery.from_options()

        assert query.page == 1
        assert not query.is_cursor

    @pytest.mark.parametrize("page, expected", [(1, 1), (3, 3), (2.0, 2)])
    def test_accepts_positive_integers(self, page, expected):
        """Should accept whole page numbers, including integral floats."""
        assert IdeaPageQuery.from_options(page=page).page == expected

    @pytest.mark.parametrize(
        "page", [0, -1, 1.5, math.nan, math.inf, "2", True, False, [1]]
    )
    def test_rejects_invalid_pages(self, page):
        """Should reject anything that is not a positive integer."""
        with pytest.raises(IdeaError) as exc_info:
            IdeaPageQuery.from_options(page=page)

        assert exc_info.value.kind == ErrorKind.INVALID_PAGE_NUMBER

    @pytest.mark.parametrize("last", [0, 5, 5.666666666666667])
    def test_accepts_last_score(self, last):
        """Should switch to cursor mode for a non-negative score."""
        query = IdeaPageQuery.from_options(last=last)

        assert query.is_cursor
        assert query.last == float(last)

    @pytest.mark.parametrize("last", [-0.1, math.nan, math.inf, "5", True])
    def test_rejects_invalid_last(self, last):
        """Should reject a cursor that is not a finite number >= 0."""
        with pytest.raises(IdeaError) as exc_info:
            IdeaPageQuery.from_options(last=last)

        assert exc_info.value.kind == ErrorKind.INVALID_LAST_SCORE

    def test_last_takes_precedence(self):
        """Should ignore an invalid page when last is given."""
        query = IdeaPageQuery.from_options(last=4, page=-3)

        assert query.is_cursor
        assert query.last == 4.0


class TestFromQuery:
    """Tests for IdeaPageQuery.from_query() with raw query-string values."""

    def test_parses_numbers(self):
        """Should parse numeric text."""
        assert IdeaPageQuery.from_query(last=None, page="2").page == 2
        assert IdeaPageQuery.from_query(last="7.5", page=None).last == 7.5

    def test_empty_values_are_absent(self):
        """Should treat empty parameters as not given."""
        query = IdeaPageQuery.from_query(last="", page=" ")

        assert query.page == 1
        assert not query.is_cursor

    def test_rejects_non_numeric_page(self):
        """Should reject a page that is not a number."""
        with pytest.raises(IdeaError) as exc_info:
            IdeaPageQuery.from_query(last=None, page="abc")

        assert exc_info.value.kind == ErrorKind.INVALID_PAGE_NUMBER

    def test_rejects_non_numeric_last(self):
        """Should reject a cursor that is not a number."""
        with pytest.raises(IdeaError) as exc_info:
            IdeaPageQuery.from_query(last="high", page="1")

        assert exc_info.value.kind == ErrorKind.INVALID_LAST_SCORE
