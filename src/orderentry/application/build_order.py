"""Application service: Build Order use case.

Resolves the SKUs a user typed into catalog Products and assembles an
Order ready for placement.  Rule checking is left to placement, so
duplicate SKUs pass through here untouched.
"""

from __future__ import annotations

from orderentry.application.dto import OrderItemSpec
from orderentry.domain.exceptions import EntityNotFoundError
from orderentry.domain.model.order import Order
from orderentry.domain.repository.product_repository import ProductRepository


class BuildOrderHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, customer_id: int | None, item_specs: list[OrderItemSpec]) -> Order:
        order = Order(customer_id=customer_id)

        for spec in item_specs:
            product = self._product_repo.get_by_sku(spec.sku)
            if product is None:
                raise EntityNotFoundError(f"Product not found: SKU '{spec.sku}'")
            order.add_item(product, spec.quantity)

        return order
