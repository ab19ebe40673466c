"""JSON-file-backed stand-in for the tax-rate service.

Each record holds the schedule for one locale::

    {"postal_code": "10115", "country": "DE",
     "entries": [{"description": "Default", "rate": "0.19"}]}

Rates are stored as strings so they load as exact Decimals.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from orderentry.domain.gateway.tax_rate_gateway import TaxRateGateway
from orderentry.domain.model.tax import TaxEntry
from orderentry.infrastructure.persistence._json_file import JsonFile


class JsonTaxRateGateway(TaxRateGateway):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    def get_tax_entries(self, postal_code: str, country: str) -> list[TaxEntry]:
        for raw in self._file.read():
            if raw["postal_code"] == postal_code and raw["country"] == country:
                return [
                    TaxEntry(description=e["description"], rate=Decimal(e["rate"]))
                    for e in raw["entries"]
                ]
        return []
