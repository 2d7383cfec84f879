"""Domain-level exceptions.

Every invariant violation in the warehouse is expressed as a subclass of
DomainException so the stock manager can catch them uniformly and turn
them into reported outcomes.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class DuplicateItemError(DomainException):
    """An item with the same ID is already stored."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Item with ID {item_id} already exists.")
        self.item_id = item_id


class ItemNotFoundError(DomainException):
    """No item is stored under the requested ID."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Item with ID {item_id} not found.")
        self.item_id = item_id


class InvalidQuantityError(DomainException):
    """A quantity would become negative."""

    def __init__(self, value: int, message: str = "Quantity cannot be negative.") -> None:
        super().__init__(message)
        self.value = value
