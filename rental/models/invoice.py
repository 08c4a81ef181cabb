"""Invoice view for the vehicle rental application."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Invoice:
    """
    Read-only join of a booking with its vehicle and customer.
    
    The rate is the vehicle's current daily rate, the total is the amount
    stored on the booking.
    """
    booking_id: int
    customer_id: int
    customer_name: str
    customer_phone: str
    vehicle_id: int
    vehicle_type: str
    vehicle_model: str
    start_date: date
    end_date: date
    days: int
    rate_per_day: float
    total_cost: float
    returned: bool
