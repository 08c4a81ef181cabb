"""Customer entity for the vehicle rental application."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """
    Represents a registered customer.
    
    Customers are immutable once registered and are never deleted.
    """
    id: int
    name: str
    phone: str
