"""Booking entity for the vehicle rental application."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class BookingStatus(Enum):
    """Lifecycle states of a booking. RETURNED is terminal."""
    ACTIVE = "ACTIVE"
    RETURNED = "RETURNED"


def inclusive_days(start: date, end: date) -> int:
    """Whole days between start and end, counting both ends."""
    return (end - start).days + 1


@dataclass
class Booking:
    """
    Represents a rental of one vehicle by one customer.
    
    Attributes:
        id: Sequential identifier
        vehicle_id: ID of the booked vehicle (lookup only, not owned)
        customer_id: ID of the renting customer (lookup only, not owned)
        start_date: First rental day
        end_date: Planned last day, replaced by the actual day on return
        total_cost: Inclusive day count times the daily rate
        returned: Whether the vehicle has been brought back
    """
    id: int
    vehicle_id: int
    customer_id: int
    start_date: date
    end_date: date
    total_cost: float
    returned: bool = False

    @property
    def status(self) -> BookingStatus:
        """Current lifecycle state derived from the returned flag."""
        return BookingStatus.RETURNED if self.returned else BookingStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        """Whether the vehicle is still out."""
        return not self.returned

    @property
    def days(self) -> int:
        """Inclusive day count of the current rental period."""
        return inclusive_days(self.start_date, self.end_date)

    def close(self, return_date: date, total_cost: float) -> None:
        """Record the actual return and the recalculated cost."""
        self.end_date = return_date
        self.total_cost = total_cost
        self.returned = True
