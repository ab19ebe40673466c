"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderentry.domain.model.tax import TaxEntry
from orderentry.domain.model.value_objects import Money


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (SKU + quantity)."""

    sku: str
    quantity: int


@dataclass(frozen=True)
class OrderSummary:
    """Output: the result of placing an order.

    Built once per successful placement and never changed afterwards.
    """

    order_id: int
    order_number: str
    customer_id: int
    taxes: tuple[TaxEntry, ...]
    net_total: Money
    total: Money
