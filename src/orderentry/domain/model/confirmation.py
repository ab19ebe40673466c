"""Result handed back by the fulfillment system for an accepted order."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderConfirmation:
    order_id: int
    order_number: str
    customer_id: int
