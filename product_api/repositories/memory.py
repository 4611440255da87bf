"""In-process adapter with the same contract as the JSON file store."""

from __future__ import annotations

import copy


class InMemoryProductRepository:
    def __init__(self, products: list[dict] | None = None, *, fail_saves: bool = False) -> None:
        self._products = copy.deepcopy(products or [])
        self.fail_saves = fail_saves
        self.save_count = 0

    def load_all(self) -> list[dict]:
        return copy.deepcopy(self._products)

    def save_all(self, products: list[dict]) -> bool:
        if self.fail_saves:
            return False
        self._products = copy.deepcopy(products)
        self.save_count += 1
        return True
