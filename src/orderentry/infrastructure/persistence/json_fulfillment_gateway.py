"""JSON-file-backed stand-in for the fulfillment system.

Every submission is appended to a log and confirmed with the next
sequential order ID.  The order number is the ID zero-padded to six
digits.  Nothing is deduplicated: submitting the same order twice
yields two confirmations.
"""

from __future__ import annotations

from pathlib import Path

from orderentry.domain.exceptions import FulfillmentError
from orderentry.domain.gateway.fulfillment_gateway import FulfillmentGateway
from orderentry.domain.model.confirmation import OrderConfirmation
from orderentry.domain.model.order import Order
from orderentry.infrastructure.persistence._json_file import JsonFile


class JsonFulfillmentGateway(FulfillmentGateway):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    def submit(self, order: Order) -> OrderConfirmation:
        if order.customer_id is None:
            raise FulfillmentError("Cannot fulfill an order without a customer")

        records = self._file.read()
        order_id = max((r["order_id"] for r in records), default=0) + 1
        confirmation = OrderConfirmation(
            order_id=order_id,
            order_number=f"{order_id:06d}",
            customer_id=order.customer_id,
        )

        records.append(
            {
                "order_id": confirmation.order_id,
                "order_number": confirmation.order_number,
                "customer_id": confirmation.customer_id,
                "items": [
                    {"sku": item.sku, "quantity": item.quantity.value}
                    for item in order.items
                ],
            }
        )
        self._file.write(records)
        return confirmation
