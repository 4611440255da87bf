"""
JSON-file persistence adapter.

The backing file holds the full collection as a pretty-printed JSON array.
It is created on the first successful save; a missing file reads as an
empty collection.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonProductRepository:
    """Whole-collection load/save against a single JSON file."""

    def __init__(self, data_file: Path | str) -> None:
        self.data_file = Path(data_file)

    def load_all(self) -> list[dict]:
        if not self.data_file.exists():
            return []
        try:
            with self.data_file.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.exception("Error reading products file %s", self.data_file)
            return []
        if not isinstance(data, list):
            logger.error("Products file %s does not contain a JSON array", self.data_file)
            return []
        if not all(isinstance(product, dict) for product in data):
            logger.error("Products file %s holds entries that are not JSON objects", self.data_file)
            return []
        return data

    def save_all(self, products: list[dict]) -> bool:
        try:
            payload = json.dumps(products, ensure_ascii=False, indent=2)
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            self.data_file.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError):
            logger.exception("Error writing products file %s", self.data_file)
            return False
        return True
