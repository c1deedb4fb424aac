"""
FastAPI dependencies shared by the product routes.

The store and config live on app.state; handlers reach them through
get_store() / get_catalog_config() instead of module globals.
"""
import json
from typing import Any, Dict, Optional

from fastapi import Depends, Header, Request

from catalog.core.auth import check_api_key
from catalog.core.config import CatalogConfig
from catalog.core.errors import validation_failed
from catalog.core.validation import validate_product, validate_product_update
from catalog.data.product_store import ProductStore

API_KEY_HEADER = "x-api-key"


def _reject_constant(token: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {token}")


async def get_store(request: Request) -> ProductStore:
    return request.app.state.store


async def get_catalog_config(request: Request) -> CatalogConfig:
    return request.app.state.config


async def require_api_key(
    api_key: Optional[str] = Header(None, alias=API_KEY_HEADER),
    config: CatalogConfig = Depends(get_catalog_config),
) -> None:
    """Access gate for mutating routes."""
    check_api_key(api_key, config.api_key)


async def read_json_body(request: Request) -> Dict[str, Any]:
    """
    Parse the request body as a JSON object.

    An empty body counts as {}; anything that is not a JSON object is rejected.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        # RecursionError: nesting deeper than the decoder can follow
        raise validation_failed("Request body must be valid JSON")
    if not isinstance(body, dict):
        raise validation_failed("Request body must be a JSON object")
    return body


async def product_payload(body: Dict[str, Any] = Depends(read_json_body)) -> Dict[str, Any]:
    """Body of a create request, fully validated."""
    validate_product(body)
    return body


async def product_update_payload(body: Dict[str, Any] = Depends(read_json_body)) -> Dict[str, Any]:
    """Body of an update request; only the supplied fields are validated."""
    validate_product_update(body)
    return body
