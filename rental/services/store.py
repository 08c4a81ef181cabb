"""In-memory state shared by the rental services."""

from typing import Any, Dict, Optional

from rental.models import Booking, Customer, Vehicle

COLLECTIONS = ("vehicles", "customers", "bookings")


class RentalStore:
    """
    Holds the three registries and their ID counters.
    
    Each registry is a dict keyed by integer ID; dicts keep insertion order,
    which is the order every listing uses. Counters start at 1 and only move
    forward, so IDs are never handed out twice even after a deletion.
    """

    def __init__(self):
        self.vehicles: Dict[int, Vehicle] = {}
        self.customers: Dict[int, Customer] = {}
        self.bookings: Dict[int, Booking] = {}
        self._counters: Dict[str, int] = {name: 1 for name in COLLECTIONS}

    def next_id(self, collection: str) -> int:
        """
        Hand out the next ID for a collection.
        
        Args:
            collection: One of "vehicles", "customers" or "bookings"
            
        Returns:
            int: The reserved ID
            
        Raises:
            KeyError: If the collection name is unknown
        """
        if collection not in self._counters:
            raise KeyError(f"Unknown collection '{collection}'")
        new_id = self._counters[collection]
        self._counters[collection] = new_id + 1
        return new_id

    def peek_id(self, collection: str) -> int:
        """Return the ID the next insert into a collection will get, without reserving it."""
        return self._counters[collection]

    def lookup(self, collection: str, record_id: Any) -> Optional[Any]:
        """
        Find a record by ID, or None.
        
        Only genuine integers resolve; True would otherwise hit ID 1.
        """
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            return None
        return getattr(self, collection).get(record_id)
