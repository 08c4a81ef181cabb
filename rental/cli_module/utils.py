"""Utility functions for the CLI interface."""

from functools import wraps
from typing import Iterable, Optional

import click
from tabulate import tabulate

from rental.config import DATE_FORMAT, format_money
from rental.models import Booking, Customer, Invoice, Vehicle
from rental.services.booking_service import to_date
from rental.services.errors import InvalidInputError, RentalError


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def parse_id(text: str, label: str = "ID") -> int:
    """Read a numeric ID typed by the user."""
    try:
        return int(text.strip())
    except (AttributeError, ValueError):
        raise InvalidInputError(f"Invalid {label}.")


def prompt_id(text: str, label: str = "ID") -> int:
    """Prompt for an ID and parse it."""
    return parse_id(click.prompt(text, default="", show_default=False), label)


def prompt_optional_date(text: str) -> Optional[str]:
    """Prompt for a date that may be left blank. Returns None when blank."""
    value = click.prompt(text, default="", show_default=False).strip()
    if not value:
        return None
    to_date(value)
    return value


def reports_errors(f):
    """
    Decorator that reports rejected operations instead of propagating them.
    
    The wrapped menu action is abandoned, the error goes to stderr, and
    control returns to the calling menu.
    """
    @wraps(f)
    def wrapped(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except RentalError as e:
            click.echo(f"Error: {str(e)}", err=True)
            return None
    return wrapped


def render_vehicles(vehicles: Iterable[Vehicle], tablefmt: str) -> str:
    table_data = [
        [v.id, v.vehicle_type, v.model, format_money(v.rate_per_day), yes_no(v.available)]
        for v in vehicles
    ]
    return tabulate(
        table_data,
        headers=["ID", "Type", "Model", "Rate/day", "Available"],
        tablefmt=tablefmt,
        disable_numparse=True,
    )


def render_customers(customers: Iterable[Customer], tablefmt: str) -> str:
    table_data = [[c.id, c.name, c.phone] for c in customers]
    return tabulate(
        table_data,
        headers=["ID", "Name", "Phone"],
        tablefmt=tablefmt,
        disable_numparse=True,
    )


def render_bookings(bookings: Iterable[Booking], tablefmt: str) -> str:
    table_data = [
        [
            b.id,
            b.vehicle_id,
            b.customer_id,
            b.start_date.strftime(DATE_FORMAT),
            b.end_date.strftime(DATE_FORMAT),
            format_money(b.total_cost),
            "(Returned)" if b.returned else "",
        ]
        for b in bookings
    ]
    return tabulate(
        table_data,
        headers=["BID", "VehID", "CustID", "Start", "End", "Cost", ""],
        tablefmt=tablefmt,
        disable_numparse=True,
    )


def echo_invoice(invoice: Invoice) -> None:
    """Print an invoice block."""
    click.echo("\n--- Invoice ---")
    click.echo(f"Booking ID: {invoice.booking_id}")
    click.echo(f"Customer: {invoice.customer_name} (ID {invoice.customer_id})")
    click.echo(f"Phone: {invoice.customer_phone}")
    click.echo(f"Vehicle: {invoice.vehicle_type} - {invoice.vehicle_model} (ID {invoice.vehicle_id})")
    click.echo(f"Period: {invoice.start_date.strftime(DATE_FORMAT)} to "
               f"{invoice.end_date.strftime(DATE_FORMAT)}")
    click.echo(f"Days: {invoice.days}")
    click.echo(f"Rate per day: {format_money(invoice.rate_per_day)}")
    click.echo(f"Total: {format_money(invoice.total_cost)}")
    click.echo(f"Returned: {yes_no(invoice.returned)}")
