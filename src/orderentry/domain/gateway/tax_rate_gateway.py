"""Abstract gateway to the tax-rate service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderentry.domain.model.tax import TaxEntry


class TaxRateGateway(ABC):

    @abstractmethod
    def get_tax_entries(self, postal_code: str, country: str) -> list[TaxEntry]:
        """Return the tax schedule applicable to a locale (may be empty)."""
