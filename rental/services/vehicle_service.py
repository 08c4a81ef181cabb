"""Vehicle service for the vehicle rental application."""

import logging
import math
from typing import Any, List

from rental.models import Vehicle
from rental.services.errors import ConflictError, InvalidInputError, NotFoundError
from rental.services.store import RentalStore

logger = logging.getLogger(__name__)


def parse_rate(rate: Any) -> float:
    """
    Convert a daily rate to a float.
    
    Args:
        rate: Number or numeric string
        
    Returns:
        float: The rate
        
    Raises:
        InvalidInputError: If the rate is not a finite, non-negative number
    """
    if isinstance(rate, bool):
        raise InvalidInputError("Rate per day must be a number")
    try:
        value = float(rate.strip() if isinstance(rate, str) else rate)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Rate per day must be a number, got '{rate}'")
    if not math.isfinite(value):
        raise InvalidInputError("Rate per day must be a finite number")
    if value < 0:
        raise InvalidInputError("Rate per day cannot be negative")
    return value


class VehicleService:
    """Service for handling vehicle operations."""

    def __init__(self, store: RentalStore):
        self.store = store

    def add_vehicle(self, vehicle_type: str, model: str, rate_per_day: Any) -> Vehicle:
        """
        Register a new vehicle as available.
        
        Args:
            vehicle_type: Category such as Car or Bike
            model: Model or name
            rate_per_day: Daily tariff, must be non-negative
            
        Returns:
            Vehicle: The stored vehicle
            
        Raises:
            InvalidInputError: If the rate is rejected
        """
        try:
            rate = parse_rate(rate_per_day)
        except InvalidInputError as e:
            logger.warning("Rejected vehicle %r: %s", model, e)
            raise

        vehicle = Vehicle(
            id=self.store.next_id("vehicles"),
            vehicle_type=(vehicle_type or "").strip(),
            model=(model or "").strip(),
            rate_per_day=rate,
        )
        self.store.vehicles[vehicle.id] = vehicle
        logger.info("Added vehicle %d (%s - %s, %.2f/day)",
                    vehicle.id, vehicle.vehicle_type, vehicle.model, vehicle.rate_per_day)
        return vehicle

    def get_vehicle(self, vehicle_id: int) -> Vehicle:
        """
        Get a vehicle by its ID.
        
        Raises:
            NotFoundError: If no such vehicle exists
        """
        vehicle = self.store.lookup("vehicles", vehicle_id)
        if vehicle is None:
            logger.warning("Vehicle %r not found", vehicle_id)
            raise NotFoundError(f"Vehicle with ID {vehicle_id} not found")
        return vehicle

    def has_active_booking(self, vehicle_id: int) -> bool:
        """Check whether any unreturned booking references the vehicle."""
        return any(
            booking.vehicle_id == vehicle_id and booking.is_active
            for booking in self.store.bookings.values()
        )

    def remove_vehicle(self, vehicle_id: int) -> Vehicle:
        """
        Delete a vehicle that has no active booking.
        
        Args:
            vehicle_id: ID of the vehicle to delete
            
        Returns:
            Vehicle: The removed vehicle
            
        Raises:
            NotFoundError: If no such vehicle exists
            ConflictError: If the vehicle is currently booked
        """
        vehicle = self.get_vehicle(vehicle_id)

        if self.has_active_booking(vehicle_id):
            logger.warning("Refused to remove vehicle %d: active booking", vehicle_id)
            raise ConflictError(f"Cannot remove vehicle {vehicle_id}: it has an active booking")

        del self.store.vehicles[vehicle_id]
        logger.info("Removed vehicle %d", vehicle_id)
        return vehicle

    def list_vehicles(self) -> List[Vehicle]:
        """List vehicles in the order they were added."""
        return list(self.store.vehicles.values())
