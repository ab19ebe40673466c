"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

from pathlib import Path

from orderentry.domain.model.customer import Customer
from orderentry.domain.repository.customer_repository import CustomerRepository
from orderentry.infrastructure.persistence._json_file import JsonFile


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    def get_by_id(self, customer_id: int) -> Customer | None:
        for raw in self._file.read():
            if raw["id"] == customer_id:
                return Customer(
                    id=raw["id"],
                    postal_code=raw["postal_code"],
                    country=raw["country"],
                )
        return None
