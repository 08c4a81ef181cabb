"""Entity models for the vehicle rental application."""
from rental.models.vehicle import Vehicle
from rental.models.customer import Customer
from rental.models.booking import Booking, BookingStatus, inclusive_days
from rental.models.invoice import Invoice


__all__ = [
    'Vehicle',
    'Customer',
    'Booking',
    'BookingStatus',
    'Invoice',
    'inclusive_days',
]
