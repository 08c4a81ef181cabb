"""Customer management menu for the rental CLI."""

import click

from rental.cli_module.utils import render_customers
from rental.services import RentalSystem


def customer_menu(system: RentalSystem, tablefmt: str) -> None:
    """Loop over the customer management submenu until the user goes back."""
    while True:
        click.echo("\n--- Customer Management ---")
        click.echo("1. Register customer")
        click.echo("2. List customers")
        click.echo("0. Back")
        choice = click.prompt("Choose", default="", show_default=False).strip()

        if choice == "1":
            register_customer(system)
        elif choice == "2":
            list_customers(system, tablefmt)
        elif choice == "0":
            return
        else:
            click.echo("Invalid choice.")


def register_customer(system: RentalSystem) -> None:
    name = click.prompt("Enter name", default="", show_default=False)
    phone = click.prompt("Enter phone", default="", show_default=False)
    customer = system.customers.add_customer(name, phone)
    click.echo(f"Registered: ID:{customer.id} | {customer.name} | {customer.phone}")


def list_customers(system: RentalSystem, tablefmt: str) -> None:
    click.echo("\nCustomers:")
    customers = system.customers.list_customers()
    if not customers:
        click.echo("  (no customers)")
        return
    click.echo(render_customers(customers, tablefmt))
