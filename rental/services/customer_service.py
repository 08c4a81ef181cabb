"""Customer service for the vehicle rental application."""

import logging
from typing import List

from rental.models import Customer
from rental.services.errors import NotFoundError
from rental.services.store import RentalStore

logger = logging.getLogger(__name__)


class CustomerService:
    """Service for registering and looking up customers."""

    def __init__(self, store: RentalStore):
        self.store = store

    def add_customer(self, name: str, phone: str) -> Customer:
        """Register a customer. Name and phone are taken as given."""
        customer = Customer(
            id=self.store.next_id("customers"),
            name=(name or "").strip(),
            phone=(phone or "").strip(),
        )
        self.store.customers[customer.id] = customer
        logger.info("Registered customer %d (%s)", customer.id, customer.name)
        return customer

    def get_customer(self, customer_id: int) -> Customer:
        """
        Get a customer by ID.
        
        Raises:
            NotFoundError: If no such customer exists
        """
        customer = self.store.lookup("customers", customer_id)
        if customer is None:
            logger.warning("Customer %r not found", customer_id)
            raise NotFoundError(f"Customer with ID {customer_id} not found")
        return customer

    def list_customers(self) -> List[Customer]:
        """List customers in registration order."""
        return list(self.store.customers.values())
