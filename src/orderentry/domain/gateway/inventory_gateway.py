"""Abstract gateway to the inventory system."""

from __future__ import annotations

from abc import ABC, abstractmethod


class InventoryGateway(ABC):

    @abstractmethod
    def is_in_stock(self, sku: str) -> bool:
        """Return True if the product with this SKU is currently in stock."""
