"""
Product endpoints mounted under /api/products.

Read routes are public. Create, update and delete require the x-api-key header;
the access gate runs before body validation, and both run before the handler.
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from catalog.api.dependencies import (
    get_store,
    product_payload,
    product_update_payload,
    require_api_key,
)
from catalog.api.models import (
    DeleteResponse,
    ProductListResponse,
    ProductResponse,
    SearchResponse,
    StatsResponse,
)
from catalog.core.errors import not_found
from catalog.core.query import ProductQuery, compute_stats, list_products, search_products
from catalog.data.product_store import NOT_FOUND_INDEX, Product, ProductStore
from catalog.utils.logger import get_logger

logger = get_logger("api.routes")

router = APIRouter(prefix="/api/products", tags=["products"])


def _product_not_found(product_id: str):
    return not_found(f"Product with ID {product_id} not found")


@router.get("/stats", response_model=StatsResponse)
async def product_stats(store: ProductStore = Depends(get_store)):
    """Totals, stock counts and per-category counts over the live store."""
    return StatsResponse.model_validate(compute_stats(store))


@router.get("/search", response_model=SearchResponse)
async def search(
    q: Optional[str] = None,
    store: ProductStore = Depends(get_store),
):
    """Search name and description. Not paginated."""
    results = search_products(store.snapshot(), q)
    return SearchResponse(
        query=q,
        count=len(results),
        data=[ProductResponse.from_product(p) for p in results],
    )


@router.get("", response_model=ProductListResponse)
async def get_products(
    category: Optional[str] = None,
    in_stock: Optional[str] = Query(default=None, alias="inStock"),
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    store: ProductStore = Depends(get_store),
):
    """
    List products with optional filters and pagination.

    Query parameters:
    - category: case-insensitive exact match
    - inStock: "true" for in-stock products, any other value for out-of-stock
    - search: case-insensitive substring of the product name
    - page / limit: defaults 1 / 10
    """
    query = ProductQuery.from_params(
        category=category,
        in_stock=in_stock,
        search=search,
        page=page,
        limit=limit,
    )
    result = list_products(store.snapshot(), query)

    return ProductListResponse(
        total=result.total,
        page=result.page,
        limit=result.limit,
        total_pages=result.total_pages,
        data=[ProductResponse.from_product(p) for p in result.data],
    )


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    product = store.find_by_id(product_id)
    if product is None:
        raise _product_not_found(product_id)
    return ProductResponse.from_product(product)


@router.post(
    "",
    status_code=201,
    response_model=ProductResponse,
    dependencies=[Depends(require_api_key)],
)
async def create_product(
    payload: Dict[str, Any] = Depends(product_payload),
    store: ProductStore = Depends(get_store),
):
    product = Product.create(payload)
    # Render first so a product that cannot be serialised never reaches the store
    response = ProductResponse.from_product(product)
    store.insert(product)
    logger.info(f"Created product {product.id} ({product.name})")
    return response


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    dependencies=[Depends(require_api_key)],
)
async def update_product(
    product_id: str,
    payload: Dict[str, Any] = Depends(product_update_payload),
    store: ProductStore = Depends(get_store),
):
    """Overwrite any subset of name, description, price, category and inStock."""
    index = store.find_index_by_id(product_id)
    if index == NOT_FOUND_INDEX:
        raise _product_not_found(product_id)

    updated = store.get_at(index).updated(payload)
    response = ProductResponse.from_product(updated)
    store.replace_at(index, updated)
    logger.info(f"Updated product {product_id}")
    return response


@router.delete(
    "/{product_id}",
    response_model=DeleteResponse,
    dependencies=[Depends(require_api_key)],
)
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    index = store.find_index_by_id(product_id)
    if index == NOT_FOUND_INDEX:
        raise _product_not_found(product_id)

    removed = store.remove_at(index)
    logger.info(f"Deleted product {product_id}")
    return DeleteResponse(
        message="Product deleted successfully",
        product=ProductResponse.from_product(removed),
    )
