"""Tax schedule entries and selection of the default rate.

A customer's locale maps to a schedule of named rate components.  The
gross total uses the single component described as "Default".
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from orderentry.domain.exceptions import DefaultTaxRateMissingError, ValidationError

DEFAULT_TAX_DESCRIPTION = "Default"


@dataclass(frozen=True)
class TaxEntry:
    """A named rate component, e.g. ``TaxEntry("Default", Decimal("0.1"))`` for 10%."""

    description: str
    rate: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.rate, Decimal):
            raise ValidationError(
                f"Tax rate must be a Decimal, got {type(self.rate).__name__}"
            )
        if self.rate < Decimal("0"):
            raise ValidationError(f"Tax rate cannot be negative, got {self.rate}")

    @staticmethod
    def of(description: str, rate: str | int | Decimal) -> TaxEntry:
        return TaxEntry(description=description, rate=Decimal(str(rate)))


def default_tax_rate(entries: Iterable[TaxEntry]) -> Decimal:
    """Return the rate of the first entry described as "Default".

    Raises DefaultTaxRateMissingError when the schedule has none; there
    is no implicit zero rate.
    """
    for entry in entries:
        if entry.description == DEFAULT_TAX_DESCRIPTION:
            return entry.rate
    raise DefaultTaxRateMissingError(
        f'Tax schedule has no "{DEFAULT_TAX_DESCRIPTION}" entry'
    )
