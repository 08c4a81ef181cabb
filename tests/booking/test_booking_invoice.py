"""Tests for invoices and booking listings."""

import pytest
from datetime import date

from rental.models import BookingStatus, Invoice
from rental.services import RentalSystem
from rental.services.errors import NotFoundError


@pytest.fixture
def system():
    system = RentalSystem()
    system.vehicles.add_vehicle("Car", "Sedan", 50.0)
    system.vehicles.add_vehicle("Bike", "Scooter", 12.5)
    system.customers.add_customer("Alice", "555-1111")
    system.customers.add_customer("Bob", "555-2222")
    system.bookings.book(1, 1, date(2024, 1, 1), date(2024, 1, 3))
    system.bookings.book(2, 2, date(2024, 1, 10), date(2024, 1, 11))
    return system


class TestInvoice:
    """Test class for the invoice join."""

    def test_invoice_fields(self, system):
        invoice = system.bookings.invoice(1)

        assert invoice == Invoice(
            booking_id=1,
            customer_id=1,
            customer_name="Alice",
            customer_phone="555-1111",
            vehicle_id=1,
            vehicle_type="Car",
            vehicle_model="Sedan",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 3),
            days=3,
            rate_per_day=50.0,
            total_cost=150.0,
            returned=False,
        )

    def test_invoice_does_not_mutate(self, system):
        before = system.bookings.get_booking(2)
        snapshot = (before.end_date, before.total_cost, before.returned)

        system.bookings.invoice(2)
        system.bookings.invoice(2)

        assert (before.end_date, before.total_cost, before.returned) == snapshot
        assert system.vehicles.get_vehicle(2).available is False

    def test_invoice_after_return(self, system):
        system.bookings.return_vehicle(1, date(2024, 1, 5))
        invoice = system.bookings.invoice(1)

        assert invoice.days == 5
        assert invoice.total_cost == pytest.approx(250.0)
        assert invoice.returned is True

    def test_invoice_unknown_booking(self, system):
        with pytest.raises(NotFoundError):
            system.bookings.invoice(9)

    def test_invoice_after_vehicle_removed(self, system):
        system.bookings.return_vehicle(1)
        system.vehicles.remove_vehicle(1)

        with pytest.raises(NotFoundError):
            system.bookings.invoice(1)


class TestListBookings:
    """Test class for the booking listing."""

    def test_list_in_creation_order(self, system):
        assert [b.id for b in system.bookings.list_bookings()] == [1, 2]

    def test_list_reports_returned_status(self, system):
        system.bookings.return_vehicle(2)
        statuses = [b.status for b in system.bookings.list_bookings()]

        assert statuses == [BookingStatus.ACTIVE, BookingStatus.RETURNED]

    def test_list_filtered_by_status(self, system):
        system.bookings.return_vehicle(2)

        active = system.bookings.list_bookings(BookingStatus.ACTIVE)
        returned = system.bookings.list_bookings(BookingStatus.RETURNED)

        assert [b.id for b in active] == [1]
        assert [b.id for b in returned] == [2]

    def test_list_empty(self):
        assert RentalSystem().bookings.list_bookings() == []
