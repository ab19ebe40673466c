"""Abstract gateway for customer notifications (e.g. email)."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Notifier(ABC):

    @abstractmethod
    def send_order_confirmation(self, customer_id: int, order_id: int) -> None:
        """Tell the customer their order was placed."""
