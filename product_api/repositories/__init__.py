"""
Persistence adapters.

Each adapter loads and saves the whole product collection at once:
``load_all()`` never raises and ``save_all()`` reports failure through its
return value. Services depend on this contract, not on the JSON file.
"""

from .base import ProductRepository
from .json_storage import JsonProductRepository
from .memory import InMemoryProductRepository

__all__ = ["ProductRepository", "JsonProductRepository", "InMemoryProductRepository"]
