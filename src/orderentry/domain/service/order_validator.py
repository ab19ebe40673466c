"""Domain service: Order Validation.

Checks a proposed order against the placement rules before anything
with a side effect happens.  Every rule is evaluated so that all
problems are reported together, in a fixed order:

  1. the order exists
  2. SKUs are unique across items
  3. every SKU is in stock
"""

from __future__ import annotations

import logging

from orderentry.domain.exceptions import ValidationError
from orderentry.domain.gateway.inventory_gateway import InventoryGateway
from orderentry.domain.model.order import Order

logger = logging.getLogger(__name__)

ORDER_IS_NULL = "Order is null"
SKUS_NOT_UNIQUE = "SKUs are not unique"
PRODUCT_OUT_OF_STOCK = "A product is out of stock"


class OrderValidator:

    def __init__(self, inventory: InventoryGateway) -> None:
        self._inventory = inventory

    def validate(self, order: Order | None) -> list[str]:
        """Return the reason for every violated rule (empty if valid)."""
        # Nothing else can be checked without an order.
        if order is None:
            return [ORDER_IS_NULL]

        reasons: list[str] = []
        if not self._skus_are_unique(order):
            reasons.append(SKUS_NOT_UNIQUE)
        if not self._all_in_stock(order):
            reasons.append(PRODUCT_OUT_OF_STOCK)
        return reasons

    def ensure_valid(self, order: Order | None) -> None:
        """Raise ValidationError carrying every violated rule."""
        reasons = self.validate(order)
        if reasons:
            raise ValidationError(*reasons)

    # --- Rules ----------------------------------------------------------------

    @staticmethod
    def _skus_are_unique(order: Order) -> bool:
        skus = order.skus
        return len(set(skus)) == len(skus)

    def _all_in_stock(self, order: Order) -> bool:
        for sku in order.skus:
            if not self._inventory.is_in_stock(sku):
                logger.debug("SKU %s is out of stock", sku)
                return False
        return True
