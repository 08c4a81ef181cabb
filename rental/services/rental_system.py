"""Facade wiring the rental services over one store."""

from typing import Optional

from rental.services.booking_service import BookingService
from rental.services.customer_service import CustomerService
from rental.services.store import RentalStore
from rental.services.vehicle_service import VehicleService


class RentalSystem:
    """
    One isolated rental context: a store plus the services that act on it.
    
    Separate instances never see each other's vehicles, customers or bookings.
    """

    def __init__(self, store: Optional[RentalStore] = None):
        self.store = store or RentalStore()
        self.vehicles = VehicleService(self.store)
        self.customers = CustomerService(self.store)
        self.bookings = BookingService(self.store, self.vehicles, self.customers)
