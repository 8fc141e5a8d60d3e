"""Testing – Hypothesis strategies for grid search criteria.

Example::

    criteria = search_criteria_strategy(
        EMPLOYEE_GRID,
        values={"active": st.booleans(), "lastname": st.sampled_from(["a", "o"])},
    )

    @given(criteria)
    def test_count_matches_rows(c): ...
"""
from __future__ import annotations

from typing import Any, Mapping

import hypothesis.strategies as st
from hypothesis.strategies import SearchStrategy

from shop_grid.application.grid.definition import GridDefinition
from shop_grid.application.search.criteria import Pagination, SearchCriteria, SortDirection, Sorting


def sorting_strategy(definition: GridDefinition) -> SearchStrategy[Sorting | None]:
    """``None`` or an allow-listed field in either direction."""
    return st.none() | st.builds(
        Sorting,
        field=st.sampled_from(sorted(definition.sortable)),
        direction=st.sampled_from(list(SortDirection)),
    )


def pagination_strategy(max_page_size: int = 10, max_page_index: int = 5) -> SearchStrategy[Pagination]:
    return st.builds(
        Pagination,
        page_index=st.integers(min_value=0, max_value=max_page_index),
        page_size=st.integers(min_value=1, max_value=max_page_size),
    )


def filters_strategy(values: Mapping[str, SearchStrategy[Any]]) -> SearchStrategy[dict[str, Any]]:
    """Any subset of *values*' keys, each with a drawn value."""
    return st.fixed_dictionaries({}, optional=dict(values))


def search_criteria_strategy(
    definition: GridDefinition,
    values: Mapping[str, SearchStrategy[Any]] | None = None,
    *,
    paginate: bool | None = None,
    max_page_size: int = 10,
) -> SearchStrategy[SearchCriteria]:
    """Valid criteria for *definition*.

    Args:
        values: Value strategy per filter field; fields without one are never
            filtered.  Keys must be allow-listed by *definition*.
        paginate: ``True`` always paginates, ``False`` never, ``None`` either.
        max_page_size: Largest drawn page size.
    """
    values = dict(values or {})
    unknown = set(values) - definition.filter_names
    if unknown:
        raise ValueError(f"Not filterable in grid '{definition.name}': {sorted(unknown)}")

    pages = pagination_strategy(max_page_size)
    if paginate is None:
        pagination: SearchStrategy[Pagination | None] = st.none() | pages
    elif paginate:
        pagination = pages
    else:
        pagination = st.none()

    return st.builds(
        SearchCriteria,
        filters=filters_strategy(values),
        sorting=sorting_strategy(definition),
        pagination=pagination,
    )


__all__ = [
    "filters_strategy",
    "pagination_strategy",
    "search_criteria_strategy",
    "sorting_strategy",
]
