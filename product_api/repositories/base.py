"""Interface shared by the persistence adapters."""

from __future__ import annotations

from typing import Protocol


class ProductRepository(Protocol):
    def load_all(self) -> list[dict]:
        """Return the whole collection; an unreadable store reads as empty."""

    def save_all(self, products: list[dict]) -> bool:
        """Overwrite the whole collection; False when the write failed."""
