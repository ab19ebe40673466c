"""Order aggregate.

An Order is built by the caller for a single placement request.  It
owns its items; the placement workflow reads it but never changes it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from orderentry.domain.model.product import Product
from orderentry.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderItem:
    """One product at a positive quantity."""

    product: Product
    quantity: Quantity

    @property
    def sku(self) -> str:
        return self.product.sku

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for a proposed order.

    Nothing is enforced at construction time: a malformed order (e.g.
    duplicate SKUs) must be representable so the validator can report
    every problem at once.
    """

    customer_id: int | None
    items: list[OrderItem] = field(default_factory=list)

    def add_item(self, product: Product, quantity: int) -> OrderItem:
        item = OrderItem(product=product, quantity=Quantity(quantity))
        self.items.append(item)
        return item

    # --- Computed properties --------------------------------------------------

    @property
    def skus(self) -> list[str]:
        """SKU of every item, in item order (duplicates kept)."""
        return [item.sku for item in self.items]

    @property
    def net_total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result
