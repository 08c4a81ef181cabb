"""Booking service for the vehicle rental application."""

import logging
import re
from datetime import date, datetime
from typing import Any, List, Optional

from rental.config import DATE_FORMAT
from rental.models import Booking, BookingStatus, Invoice, inclusive_days
from rental.services.customer_service import CustomerService
from rental.services.errors import (
    AlreadyReturnedError,
    ConflictError,
    InvalidInputError,
    InvalidRangeError,
    NotFoundError,
)
from rental.services.store import RentalStore
from rental.services.vehicle_service import VehicleService

logger = logging.getLogger(__name__)

# Zero-padded year, month and day only
DATE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}")


def to_date(value: Any, field: str = "date") -> date:
    """
    Coerce a date or YYYY-MM-DD string to a date.
    
    Raises:
        InvalidInputError: If the value is neither
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if DATE_SHAPE.fullmatch(text):
            try:
                return datetime.strptime(text, DATE_FORMAT).date()
            except ValueError:
                # Right shape, impossible day such as 2024-02-30
                pass
        logger.warning("Rejected %s %r", field, value)
        raise InvalidInputError(f"Invalid {field} '{value}'. Use YYYY-MM-DD.")
    logger.warning("Rejected %s of type %s", field, type(value).__name__)
    raise InvalidInputError(f"Invalid {field}: expected a date, got {type(value).__name__}")


class BookingService:
    """Service for booking, returning and invoicing vehicles."""

    def __init__(self, store: RentalStore, vehicles: VehicleService, customers: CustomerService):
        self.store = store
        self.vehicles = vehicles
        self.customers = customers

    def book(self, vehicle_id: int, customer_id: int, start_date: Any, end_date: Any) -> Booking:
        """
        Book an available vehicle for a customer over an inclusive date range.
        
        Args:
            vehicle_id: ID of the vehicle to book
            customer_id: ID of the renting customer
            start_date: First day, as a date or YYYY-MM-DD string
            end_date: Last day, as a date or YYYY-MM-DD string
            
        Returns:
            Booking: The new active booking
            
        Raises:
            NotFoundError: If the vehicle or customer does not exist
            ConflictError: If the vehicle is already booked
            InvalidInputError: If a date cannot be read
            InvalidRangeError: If the end date is before the start date
        """
        vehicle = self.vehicles.get_vehicle(vehicle_id)
        customer = self.customers.get_customer(customer_id)

        if not vehicle.available:
            logger.warning("Refused booking of vehicle %d: not available", vehicle_id)
            raise ConflictError(f"Vehicle {vehicle_id} is not available currently")

        start = to_date(start_date, "start date")
        end = to_date(end_date, "end date")
        if end < start:
            logger.warning("Refused booking of vehicle %d: %s is before %s", vehicle_id, end, start)
            raise InvalidRangeError("End date cannot be before start date")

        days = inclusive_days(start, end)
        booking = Booking(
            id=self.store.next_id("bookings"),
            vehicle_id=vehicle.id,
            customer_id=customer.id,
            start_date=start,
            end_date=end,
            total_cost=days * vehicle.rate_per_day,
        )
        self.store.bookings[booking.id] = booking
        vehicle.mark_booked()

        logger.info("Booking %d: vehicle %d for customer %d, %s to %s (%d days, %.2f)",
                    booking.id, vehicle.id, customer.id, start, end, days, booking.total_cost)
        return booking

    def get_booking(self, booking_id: int) -> Booking:
        """
        Get a booking by ID.
        
        Raises:
            NotFoundError: If no such booking exists
        """
        booking = self.store.lookup("bookings", booking_id)
        if booking is None:
            logger.warning("Booking %r not found", booking_id)
            raise NotFoundError(f"Booking with ID {booking_id} not found")
        return booking

    def return_vehicle(self, booking_id: int, actual_return_date: Optional[Any] = None) -> Booking:
        """
        Close a booking and make its vehicle available again.
        
        The cost is recalculated from the actual return date using the
        vehicle's current daily rate, which may differ from the rate at
        booking time if the vehicle was edited in between.
        
        Args:
            booking_id: ID of the booking to close
            actual_return_date: Day the vehicle came back; defaults to the
                planned end date
                
        Returns:
            Booking: The updated booking
            
        Raises:
            NotFoundError: If no such booking exists
            AlreadyReturnedError: If the booking was already closed
            InvalidInputError: If the date cannot be read
            InvalidRangeError: If the return date is before the start date
        """
        booking = self.get_booking(booking_id)

        if booking.returned:
            logger.warning("Refused return of booking %d: already returned", booking_id)
            raise AlreadyReturnedError(f"Booking {booking_id} has already been returned")

        if actual_return_date is None:
            returned_on = booking.end_date
        else:
            returned_on = to_date(actual_return_date, "return date")

        if returned_on < booking.start_date:
            logger.warning("Refused return of booking %d: %s is before start %s",
                           booking_id, returned_on, booking.start_date)
            raise InvalidRangeError("Return date cannot be before start date")

        vehicle = self.vehicles.get_vehicle(booking.vehicle_id)
        days = inclusive_days(booking.start_date, returned_on)
        booking.close(returned_on, days * vehicle.rate_per_day)
        vehicle.mark_returned()

        logger.info("Booking %d returned on %s (%d days, %.2f)",
                    booking.id, returned_on, days, booking.total_cost)
        return booking

    def invoice(self, booking_id: int) -> Invoice:
        """
        Build the invoice view of a booking. Nothing is modified.
        
        Raises:
            NotFoundError: If the booking, or the vehicle or customer it
                references, no longer exists
        """
        booking = self.get_booking(booking_id)
        vehicle = self.vehicles.get_vehicle(booking.vehicle_id)
        customer = self.customers.get_customer(booking.customer_id)

        return Invoice(
            booking_id=booking.id,
            customer_id=customer.id,
            customer_name=customer.name,
            customer_phone=customer.phone,
            vehicle_id=vehicle.id,
            vehicle_type=vehicle.vehicle_type,
            vehicle_model=vehicle.model,
            start_date=booking.start_date,
            end_date=booking.end_date,
            days=booking.days,
            rate_per_day=vehicle.rate_per_day,
            total_cost=booking.total_cost,
            returned=booking.returned,
        )

    def list_bookings(self, status: Optional[BookingStatus] = None) -> List[Booking]:
        """List bookings in creation order, optionally filtered by status."""
        bookings = list(self.store.bookings.values())
        if status is not None:
            bookings = [b for b in bookings if b.status == status]
        return bookings
