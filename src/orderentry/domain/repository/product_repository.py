"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Used to turn SKUs typed by a user into Products;
the placement workflow itself receives fully built orders.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderentry.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_sku(self, sku: str) -> Product | None:
        """Return a product by its SKU, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""
