"""Abstract gateway to the external fulfillment system.

Submitting an order is the first side effect of placement; it only
ever happens for an order that passed validation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderentry.domain.model.confirmation import OrderConfirmation
from orderentry.domain.model.order import Order


class FulfillmentGateway(ABC):

    @abstractmethod
    def submit(self, order: Order) -> OrderConfirmation:
        """Hand the order over for fulfillment and return its confirmation."""
