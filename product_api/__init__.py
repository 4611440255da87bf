"""Product catalog HTTP service backed by a JSON file."""
from product_api.app import create_app

__all__ = ["create_app"]
