"""Interactive main menu for the rental CLI."""

import click

from rental.cli_module.commands.booking_commands import book_vehicle, return_vehicle, view_bookings
from rental.cli_module.commands.customer_commands import customer_menu
from rental.cli_module.commands.vehicle_commands import vehicle_menu
from rental.config import TABLE_FORMAT
from rental.services import RentalSystem


def main_menu(system: RentalSystem, tablefmt: str = TABLE_FORMAT) -> None:
    """Run the top-level menu until the user exits."""
    while True:
        click.echo("\n=== Vehicle Rental Management ===")
        click.echo("1. Vehicle management")
        click.echo("2. Customer management")
        click.echo("3. Book vehicle")
        click.echo("4. View bookings / Invoice")
        click.echo("5. Return vehicle")
        click.echo("0. Exit")
        choice = click.prompt("Choose", default="", show_default=False).strip()

        if choice == "1":
            vehicle_menu(system, tablefmt)
        elif choice == "2":
            customer_menu(system, tablefmt)
        elif choice == "3":
            book_vehicle(system, tablefmt)
        elif choice == "4":
            view_bookings(system, tablefmt)
        elif choice == "5":
            return_vehicle(system)
        elif choice == "0":
            click.echo("Goodbye!")
            return
        else:
            click.echo("Invalid choice.")


@click.command(name="menu", help="Start the interactive rental menu")
@click.pass_context
def menu_command(ctx):
    """
    Start the interactive rental menu.
    
    All data lives in memory and is discarded when the menu exits.
    """
    settings = ctx.find_root().obj or {}
    main_menu(RentalSystem(), settings.get("table_format", TABLE_FORMAT))
