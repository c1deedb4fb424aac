"""
FastAPI server for the product catalog.

Usage:
    python -m catalog
    # or
    uvicorn catalog.api.server:app --reload --port 3000
"""
from typing import Optional

from fastapi import FastAPI

from catalog import __version__
from catalog.api.errors import register_error_handlers
from catalog.api.middleware import ErrorBoundaryMiddleware, RequestLoggingMiddleware
from catalog.api.models import MessageResponse
from catalog.api.routes import router as product_router
from catalog.core.config import CatalogConfig, get_config
from catalog.data.product_store import ProductStore
from catalog.utils.logger import get_logger, set_log_level

logger = get_logger("api.server")


def create_app(
    config: Optional[CatalogConfig] = None,
    store: Optional[ProductStore] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        config: Service configuration (defaults to the global config)
        store: Product store (defaults to a store with the three seed products)
    """
    config = config or get_config()
    set_log_level(config.log_level)

    app = FastAPI(
        title="Product Catalog API",
        description="In-memory CRUD service for catalog products",
        version=__version__,
    )
    app.state.config = config
    app.state.store = store if store is not None else ProductStore.with_seed_data()

    register_error_handlers(app)

    # add_middleware prepends, so the logger added last runs first
    app.add_middleware(ErrorBoundaryMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/", response_model=MessageResponse)
    async def root():
        return MessageResponse(message="Hello World")

    app.include_router(product_router)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    config = app.state.config
    logger.info(f"Server is running on http://localhost:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
