"""Booking, invoice and return actions for the rental CLI."""

import click

from rental.cli_module.commands.customer_commands import list_customers
from rental.cli_module.commands.vehicle_commands import list_vehicles
from rental.cli_module.utils import (
    echo_invoice,
    parse_id,
    prompt_id,
    prompt_optional_date,
    render_bookings,
    reports_errors,
)
from rental.services import RentalSystem
from rental.services.booking_service import to_date


@reports_errors
def book_vehicle(system: RentalSystem, tablefmt: str) -> None:
    """Walk the user through booking a vehicle and print the invoice."""
    if not system.vehicles.list_vehicles():
        click.echo("No vehicles available. Add vehicles first.")
        return
    if not system.customers.list_customers():
        click.echo("No customers registered. Register a customer first.")
        return

    list_vehicles(system, tablefmt)
    vehicle_id = prompt_id("Enter vehicle ID to book")
    vehicle = system.vehicles.get_vehicle(vehicle_id)
    if not vehicle.available:
        click.echo("Vehicle not available currently.")
        return

    list_customers(system, tablefmt)
    customer_id = prompt_id("Enter customer ID")
    system.customers.get_customer(customer_id)

    start = to_date(click.prompt("Enter start date (YYYY-MM-DD)"), "start date")
    end = to_date(click.prompt("Enter end date (YYYY-MM-DD)"), "end date")

    booking = system.bookings.book(vehicle_id, customer_id, start, end)
    click.echo(f"Booking successful. Booking ID: {booking.id}")
    echo_invoice(system.bookings.invoice(booking.id))


@reports_errors
def view_bookings(system: RentalSystem, tablefmt: str) -> None:
    """List all bookings, then optionally show one invoice."""
    click.echo("\n--- Bookings ---")
    bookings = system.bookings.list_bookings()
    if not bookings:
        click.echo("No bookings yet.")
        return

    click.echo(render_bookings(bookings, tablefmt))
    choice = click.prompt("Enter booking ID to view invoice (or press Enter to go back)",
                          default="", show_default=False).strip()
    if not choice:
        return
    booking_id = parse_id(choice, "booking ID")
    echo_invoice(system.bookings.invoice(booking_id))


@reports_errors
def return_vehicle(system: RentalSystem) -> None:
    """Close a booking, optionally on a different day than planned."""
    click.echo("\n--- Return Vehicle ---")
    booking_id = prompt_id("Enter booking ID")
    booking = system.bookings.get_booking(booking_id)
    if booking.returned:
        click.echo("Already returned.")
        return

    actual = prompt_optional_date(
        "Enter actual return date (YYYY-MM-DD) or press Enter to use planned end date")
    system.bookings.return_vehicle(booking_id, actual)
    click.echo("Vehicle returned. Updated booking:")
    echo_invoice(system.bookings.invoice(booking_id))
