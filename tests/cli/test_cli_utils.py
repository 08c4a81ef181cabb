"""Tests for CLI parsing and rendering helpers."""

import pytest
from datetime import date

from rental.cli_module.utils import (
    parse_id,
    render_bookings,
    render_customers,
    render_vehicles,
    yes_no,
)
from rental.services import RentalSystem
from rental.services.errors import InvalidInputError


@pytest.fixture
def system():
    system = RentalSystem()
    system.vehicles.add_vehicle("Car", "Sedan", 50)
    system.customers.add_customer("Alice", "555-1111")
    system.bookings.book(1, 1, date(2024, 1, 1), date(2024, 1, 3))
    return system


def test_parse_id():
    assert parse_id(" 12 ") == 12


@pytest.mark.parametrize("text", ["", "abc", "1.5"])
def test_parse_id_rejects(text):
    with pytest.raises(InvalidInputError):
        parse_id(text, "vehicle ID")


def test_yes_no():
    assert yes_no(True) == "Yes"
    assert yes_no(False) == "No"


def test_render_vehicles_keeps_two_decimals(system):
    table = render_vehicles(system.vehicles.list_vehicles(), "plain")

    assert "50.00" in table
    assert "Sedan" in table
    assert "No" in table


def test_render_customers(system):
    table = render_customers(system.customers.list_customers(), "plain")
    assert "Alice" in table
    assert "555-1111" in table


def test_render_bookings_marks_returned(system):
    assert "(Returned)" not in render_bookings(system.bookings.list_bookings(), "plain")

    system.bookings.return_vehicle(1, date(2024, 1, 4))
    table = render_bookings(system.bookings.list_bookings(), "plain")

    assert "(Returned)" in table
    assert "2024-01-04" in table
    assert "200.00" in table
