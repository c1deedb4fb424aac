"""
Listing, search and statistics over the product collection.

The listing pipeline:
1. Copy the store snapshot
2. Filter by category (case-insensitive exact match)
3. Filter by stock status
4. Filter by name substring (case-insensitive)
5. Paginate with the (page - 1) * limit slice formula

Page and limit are not range-checked. Zero or negative values get whatever the
slice arithmetic produces; a zero limit yields an empty page and no totalPages.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from catalog.core.errors import validation_failed
from catalog.data.product_store import Product

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Optional[str], default: int) -> int:
    """
    Best-effort integer parsing.

    Uses the leading integer of the string ("2abc" -> 2, " 3" -> 3). Values
    with no leading digits fall back to the default.
    """
    if value is None:
        return default
    match = _LEADING_INT.match(value)
    if not match:
        return default
    return int(match.group(1))


@dataclass(frozen=True)
class ProductQuery:
    """Parsed listing parameters."""
    category: Optional[str] = None
    in_stock: Optional[bool] = None
    search: Optional[str] = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(
        cls,
        category: Optional[str] = None,
        in_stock: Optional[str] = None,
        search: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> "ProductQuery":
        """
        Build a query from raw query-string values.

        in_stock is only the literal "true" for True; any other present value,
        including an empty string, means False. Empty category/search mean no filter.
        """
        return cls(
            category=category or None,
            in_stock=None if in_stock is None else in_stock == "true",
            search=search or None,
            page=parse_int(page, DEFAULT_PAGE),
            limit=parse_int(limit, DEFAULT_LIMIT),
        )


@dataclass(frozen=True)
class ProductPage:
    """One page of listing results."""
    total: int
    page: int
    limit: int
    total_pages: Optional[int]
    data: List[Product]


def filter_products(products: Iterable[Product], query: ProductQuery) -> List[Product]:
    """Apply the category, stock and name-search filters in that order."""
    filtered = list(products)

    if query.category:
        wanted = query.category.lower()
        filtered = [p for p in filtered if p.category.lower() == wanted]

    if query.in_stock is not None:
        filtered = [p for p in filtered if p.in_stock == query.in_stock]

    if query.search:
        needle = query.search.lower()
        filtered = [p for p in filtered if needle in p.name.lower()]

    return filtered


def total_pages(total: int, limit: int) -> Optional[int]:
    """ceil(total / limit); None when limit is zero."""
    if limit == 0:
        return None
    return math.ceil(total / limit)


def paginate(products: List[Product], page: int, limit: int) -> List[Product]:
    start = (page - 1) * limit
    end = start + limit
    return products[start:end]


def list_products(products: Iterable[Product], query: ProductQuery) -> ProductPage:
    """Filter then paginate a snapshot of products."""
    filtered = filter_products(products, query)
    return ProductPage(
        total=len(filtered),
        page=query.page,
        limit=query.limit,
        total_pages=total_pages(len(filtered), query.limit),
        data=paginate(filtered, query.page, query.limit),
    )


def search_products(products: Iterable[Product], text: Optional[str]) -> List[Product]:
    """
    Case-insensitive substring search over name and description. Unpaginated.

    Raises:
        DomainError: validation kind when the search text is missing or empty
    """
    if not text:
        raise validation_failed('Search query parameter "q" is required')

    needle = text.lower()
    return [
        p for p in products
        if needle in p.name.lower() or needle in p.description.lower()
    ]


def compute_stats(products: Iterable[Product]) -> Dict[str, object]:
    """Count totals, stock status and products per category in one pass."""
    total = 0
    in_stock = 0
    by_category: Dict[str, int] = {}

    for product in products:
        total += 1
        if product.in_stock:
            in_stock += 1
        by_category[product.category] = by_category.get(product.category, 0) + 1

    return {
        "total": total,
        "inStock": in_stock,
        "outOfStock": total - in_stock,
        "byCategory": by_category,
    }
