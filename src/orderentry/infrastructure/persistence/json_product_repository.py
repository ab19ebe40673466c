"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from orderentry.domain.model.product import Product
from orderentry.domain.model.value_objects import Money
from orderentry.domain.repository.product_repository import ProductRepository
from orderentry.infrastructure.persistence._json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    # --- ProductRepository interface ------------------------------------------

    def get_by_sku(self, sku: str) -> Product | None:
        for raw in self._file.read():
            if raw["sku"] == sku:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._file.read()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            sku=raw["sku"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"])),
        )
