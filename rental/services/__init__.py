"""Services operating on the in-memory rental registries."""
from rental.services.errors import (
    RentalError,
    NotFoundError,
    ConflictError,
    InvalidRangeError,
    AlreadyReturnedError,
    InvalidInputError,
)
from rental.services.store import RentalStore
from rental.services.vehicle_service import VehicleService
from rental.services.customer_service import CustomerService
from rental.services.booking_service import BookingService
from rental.services.rental_system import RentalSystem


__all__ = [
    'RentalError',
    'NotFoundError',
    'ConflictError',
    'InvalidRangeError',
    'AlreadyReturnedError',
    'InvalidInputError',
    'RentalStore',
    'VehicleService',
    'CustomerService',
    'BookingService',
    'RentalSystem',
]
