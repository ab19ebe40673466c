"""JSON-file-backed stand-in for the inventory system.

The file maps SKU to units on hand, e.g. ``{"WID-1": 12}``.  A SKU is
in stock when it has at least one unit; unknown SKUs are out of stock.
"""

from __future__ import annotations

from pathlib import Path

from orderentry.domain.gateway.inventory_gateway import InventoryGateway
from orderentry.infrastructure.persistence._json_file import JsonFile


class JsonInventoryGateway(InventoryGateway):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty={})

    def is_in_stock(self, sku: str) -> bool:
        return self._file.read().get(sku, 0) > 0
