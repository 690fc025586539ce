"""Pagination — offset window, clamping, cap, and response metadata."""

from pokedex_api.core.pagination import (
    DEFAULT_LIMIT, MAX_LIMIT, PageWindow, build_pagination_meta, paginate,
)


def test_defaults_to_first_page_of_twenty():
    window = paginate()
    assert window == PageWindow(page=1, limit=DEFAULT_LIMIT)
    assert window.offset == 0


def test_offset_is_page_minus_one_times_limit():
    assert paginate(3, 20).offset == 40
    assert paginate(2, 15).offset == 15


def test_limit_is_capped_at_one_hundred():
    window = paginate(1, 500)
    assert window.limit == MAX_LIMIT


def test_offset_uses_capped_limit():
    assert paginate(2, 500).offset == 100


def test_non_positive_page_clamped_to_one():
    assert paginate(0, 20).page == 1
    assert paginate(-4, 20).page == 1


def test_non_positive_limit_clamped_to_default():
    assert paginate(1, 0).limit == DEFAULT_LIMIT
    assert paginate(1, -10).limit == DEFAULT_LIMIT


def test_meta_first_of_three_pages():
    meta = build_pagination_meta(paginate(1, 20), 45)
    assert meta == {
        "currentPage": 1,
        "totalPages": 3,
        "totalItems": 45,
        "itemsPerPage": 20,
        "hasNextPage": True,
        "hasPreviousPage": False,
    }


def test_meta_last_page():
    meta = build_pagination_meta(paginate(3, 20), 45)
    assert meta["hasNextPage"] is False
    assert meta["hasPreviousPage"] is True


def test_meta_exact_multiple():
    assert build_pagination_meta(paginate(1, 20), 40)["totalPages"] == 2


def test_meta_no_items():
    meta = build_pagination_meta(paginate(), 0)
    assert meta["totalPages"] == 0
    assert meta["hasNextPage"] is False
    assert meta["hasPreviousPage"] is False
