"""Tests for listing filters, pagination, search and statistics."""

import pytest

from catalog.core.errors import DomainError, ErrorKind
from catalog.core.query import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    ProductQuery,
    compute_stats,
    list_products,
    parse_int,
    search_products,
    total_pages,
)
from catalog.data.product_store import Product


def _names(products):
    return [p.name for p in products]


class TestParseInt:
    @pytest.mark.parametrize("raw, expected", [
        ("2", 2),
        ("  7", 7),
        ("2abc", 2),
        ("-3", -3),
        ("+4", 4),
        ("0", 0),
        ("1.9", 1),
    ])
    def test_leading_integer(self, raw, expected):
        assert parse_int(raw, 99) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", "-", " "])
    def test_falls_back_to_default(self, raw):
        assert parse_int(raw, 99) == 99


class TestProductQuery:
    def test_defaults(self):
        query = ProductQuery.from_params()
        assert query == ProductQuery(page=DEFAULT_PAGE, limit=DEFAULT_LIMIT)

    @pytest.mark.parametrize("raw, expected", [
        ("true", True),
        ("false", False),
        ("TRUE", False),
        ("1", False),
        ("", False),
        (None, None),
    ])
    def test_in_stock_parsing(self, raw, expected):
        assert ProductQuery.from_params(in_stock=raw).in_stock is expected

    def test_empty_strings_disable_filters(self):
        query = ProductQuery.from_params(category="", search="")
        assert query.category is None
        assert query.search is None


class TestListProducts:
    def test_default_page_returns_all_seeds(self, store):
        result = list_products(store.snapshot(), ProductQuery.from_params(page="1", limit="10"))
        assert result.total == 3
        assert result.total_pages == 1
        assert len(result.data) == 3

    def test_second_page_of_one(self, store):
        result = list_products(store.snapshot(), ProductQuery.from_params(page="2", limit="1"))
        assert result.total_pages == 3
        assert result.data == [store.snapshot()[1]]

    def test_category_case_insensitive_exact(self, store):
        result = list_products(store.snapshot(), ProductQuery.from_params(category="eLeCtRoNiCs"))
        assert _names(result.data) == ["Laptop"]
        result = list_products(store.snapshot(), ProductQuery.from_params(category="Electro"))
        assert result.total == 0

    def test_stock_filter(self, store):
        in_stock = list_products(store.snapshot(), ProductQuery.from_params(in_stock="true"))
        assert _names(in_stock.data) == ["Laptop", "Coffee Maker"]
        out_of_stock = list_products(store.snapshot(), ProductQuery.from_params(in_stock="nope"))
        assert _names(out_of_stock.data) == ["Desk Chair"]

    def test_search_matches_name_only(self, store):
        result = list_products(store.snapshot(), ProductQuery.from_params(search="laptop"))
        assert _names(result.data) == ["Laptop"]
        # "Ergonomic" only appears in a description
        result = list_products(store.snapshot(), ProductQuery.from_params(search="ergonomic"))
        assert result.total == 0

    def test_filters_combine(self, store):
        query = ProductQuery.from_params(category="appliances", in_stock="true", search="coffee")
        assert _names(list_products(store.snapshot(), query).data) == ["Coffee Maker"]

    def test_out_of_range_page_is_empty(self, store):
        result = list_products(store.snapshot(), ProductQuery.from_params(page="5"))
        assert result.data == []
        assert result.total == 3
        assert result.page == 5

    def test_zero_page_is_empty(self, store):
        result = list_products(store.snapshot(), ProductQuery.from_params(page="0"))
        assert result.data == []

    def test_zero_limit(self, store):
        result = list_products(store.snapshot(), ProductQuery.from_params(limit="0"))
        assert result.data == []
        assert result.total_pages is None

    def test_negative_limit_follows_slice_arithmetic(self, store):
        # start = 0, end = -1
        result = list_products(store.snapshot(), ProductQuery.from_params(limit="-1"))
        assert _names(result.data) == ["Laptop", "Coffee Maker"]
        assert result.total_pages == -3

    def test_does_not_mutate_input(self, store):
        products = store.snapshot()
        list_products(products, ProductQuery.from_params(category="Furniture"))
        assert len(products) == 3


class TestTotalPages:
    @pytest.mark.parametrize("total, limit, expected", [
        (0, 10, 0),
        (3, 10, 1),
        (10, 10, 1),
        (11, 10, 2),
        (3, 0, None),
    ])
    def test_ceil(self, total, limit, expected):
        assert total_pages(total, limit) == expected


class TestSearchProducts:
    def test_matches_name_or_description(self, store):
        assert _names(search_products(store.snapshot(), "ERGONOMIC")) == ["Desk Chair"]
        assert _names(search_products(store.snapshot(), "coffee")) == ["Coffee Maker"]

    def test_substring_across_products(self, store):
        # "a" appears in every seed product
        assert len(search_products(store.snapshot(), "a")) == 3

    def test_no_match(self, store):
        assert search_products(store.snapshot(), "bicycle") == []

    @pytest.mark.parametrize("text", [None, ""])
    def test_missing_text_is_validation_error(self, store, text):
        with pytest.raises(DomainError) as exc_info:
            search_products(store.snapshot(), text)
        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert exc_info.value.message == 'Search query parameter "q" is required'


class TestComputeStats:
    def test_seed_stats(self, store):
        assert compute_stats(store) == {
            "total": 3,
            "inStock": 2,
            "outOfStock": 1,
            "byCategory": {"Electronics": 1, "Appliances": 1, "Furniture": 1},
        }

    def test_category_keys_first_seen_order(self):
        products = [
            Product.create({"name": n, "description": "d", "price": 1, "category": c, "inStock": s})
            for n, c, s in [("a", "Toys", True), ("b", "Books", False), ("c", "Toys", False)]
        ]
        stats = compute_stats(products)
        assert list(stats["byCategory"].items()) == [("Toys", 2), ("Books", 1)]
        assert stats["inStock"] == 1
        assert stats["outOfStock"] == 2

    def test_empty(self):
        assert compute_stats([]) == {"total": 0, "inStock": 0, "outOfStock": 0, "byCategory": {}}
