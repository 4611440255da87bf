"""FastAPI application factory for the product API."""

from __future__ import annotations

from fastapi import FastAPI

from product_api.core.config import Settings, get_settings
from product_api.core.errors import install_error_handlers
from product_api.repositories import JsonProductRepository, ProductRepository
from product_api.routers import products as products_router
from product_api.services.product_service import ProductService


def create_app(
    repository: ProductRepository | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the app; defaults to the JSON file store configured in settings."""
    settings = settings or get_settings()
    if repository is None:
        repository = JsonProductRepository(settings.data_file)

    app = FastAPI(title="Product API")
    app.state.settings = settings
    app.state.product_repository = repository
    app.state.product_service = ProductService(repository, serialize_writes=settings.serialize_writes)

    install_error_handlers(app)
    app.include_router(products_router.router)
    return app
