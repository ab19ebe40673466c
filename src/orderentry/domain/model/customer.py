"""Customer entity, as returned by the customer directory."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """Only the fields needed to look up the customer's tax schedule."""

    id: int
    postal_code: str
    country: str
