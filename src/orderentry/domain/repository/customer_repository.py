"""Abstract repository for the customer directory."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderentry.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by ID, or None if not found."""
