"""Data Transfer Objects that cross the application boundary.

The stock manager never lets a domain error escape; it returns a
``StockOutcome`` instead and leaves rendering to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass

from warehouse.domain.exceptions import DomainException


@dataclass(frozen=True)
class StockOutcome:
    """Result of one stock operation: either a success or a reported error."""

    operation: str
    item_id: int
    message: str
    quantity: int | None = None
    error: DomainException | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None
