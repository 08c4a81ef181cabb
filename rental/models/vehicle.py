"""Vehicle entity for the vehicle rental application."""

from dataclasses import dataclass


@dataclass
class Vehicle:
    """
    Represents a rentable vehicle.
    
    Attributes:
        id: Sequential identifier, starting at 1 and never reused
        vehicle_type: Free-text category (Car, Bike, ...)
        model: Free-text model or name
        rate_per_day: Daily tariff, never negative
        available: False while an unreturned booking references the vehicle
    """
    id: int
    vehicle_type: str
    model: str
    rate_per_day: float
    available: bool = True

    def mark_booked(self) -> None:
        """Take the vehicle out of the available pool."""
        self.available = False

    def mark_returned(self) -> None:
        """Put the vehicle back into the available pool."""
        self.available = True
