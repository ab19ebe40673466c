"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from orderentry.application.place_order import PlaceOrderHandler
from orderentry.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from orderentry.infrastructure.persistence.json_fulfillment_gateway import (
    JsonFulfillmentGateway,
)
from orderentry.infrastructure.persistence.json_inventory_gateway import (
    JsonInventoryGateway,
)
from orderentry.infrastructure.persistence.json_outbox_notifier import (
    JsonOutboxNotifier,
)
from orderentry.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from orderentry.infrastructure.persistence.json_tax_rate_gateway import (
    JsonTaxRateGateway,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def product_repository(data_dir: Path) -> JsonProductRepository:
    return JsonProductRepository(data_dir / "products.json")


def place_order_handler(data_dir: Path) -> PlaceOrderHandler:
    return PlaceOrderHandler(
        inventory=JsonInventoryGateway(data_dir / "stock.json"),
        fulfillment=JsonFulfillmentGateway(data_dir / "fulfillments.json"),
        customer_repo=JsonCustomerRepository(data_dir / "customers.json"),
        tax_rates=JsonTaxRateGateway(data_dir / "tax_rates.json"),
        notifier=JsonOutboxNotifier(data_dir / "outbox.json"),
    )
