"""Server entry point: build the app and serve it with uvicorn."""
from __future__ import annotations

import logging

import uvicorn

from product_api.app import create_app
from product_api.core.config import get_settings
from product_api.core.logging_config import configure_logging

logger = logging.getLogger(__name__)

ENDPOINTS = (
    ("GET", "/products", "Get all products"),
    ("GET", "/products/instock", "Get products in stock"),
    ("POST", "/products", "Create a new product"),
    ("PUT", "/products/:id", "Update a product"),
    ("DELETE", "/products/:id", "Delete a product"),
)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = create_app(settings=settings)
    logger.info("Server is running on http://localhost:%s", settings.port)
    logger.info("Products are stored in %s", settings.data_file)
    logger.info("Available endpoints:")
    for method, path, summary in ENDPOINTS:
        logger.info("%-6s %-18s - %s", method, path, summary)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
