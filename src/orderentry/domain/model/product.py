"""Product entity.

Products come from the catalog. The order workflow only reads them:
the SKU is the uniqueness key inside an order and the price feeds the
net total.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderentry.domain.exceptions import ValidationError
from orderentry.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: str
    sku: str
    name: str
    price: Money
    description: str = ""

    def __post_init__(self) -> None:
        if not self.sku or not self.sku.strip():
            raise ValidationError("Product SKU is required")
