"""Vehicle management menu for the rental CLI."""

import click

from rental.cli_module.utils import prompt_id, render_vehicles, reports_errors
from rental.services import RentalSystem
from rental.services.errors import InvalidInputError
from rental.services.vehicle_service import parse_rate


def vehicle_menu(system: RentalSystem, tablefmt: str) -> None:
    """Loop over the vehicle management submenu until the user goes back."""
    while True:
        click.echo("\n--- Vehicle Management ---")
        click.echo("1. Add vehicle")
        click.echo("2. Remove vehicle")
        click.echo("3. List vehicles")
        click.echo("0. Back")
        choice = click.prompt("Choose", default="", show_default=False).strip()

        if choice == "1":
            add_vehicle(system)
        elif choice == "2":
            remove_vehicle(system, tablefmt)
        elif choice == "3":
            list_vehicles(system, tablefmt)
        elif choice == "0":
            return
        else:
            click.echo("Invalid choice.")


@reports_errors
def add_vehicle(system: RentalSystem) -> None:
    """Prompt for a vehicle and register it."""
    vehicle_type = click.prompt("Enter vehicle type (Car/Bike/...)", default="", show_default=False)
    model = click.prompt("Enter model/name", default="", show_default=False)

    # Keep asking until the rate is usable
    while True:
        raw_rate = click.prompt("Enter rate per day (numeric)", default="", show_default=False)
        try:
            rate = parse_rate(raw_rate)
            break
        except InvalidInputError:
            click.echo("Invalid rate. Try again.")

    vehicle = system.vehicles.add_vehicle(vehicle_type, model, rate)
    click.echo(f"Added: ID:{vehicle.id} | {vehicle.vehicle_type} - {vehicle.model} | "
               f"rate/day: {vehicle.rate_per_day:.2f} | available: Yes")


@reports_errors
def remove_vehicle(system: RentalSystem, tablefmt: str) -> None:
    """Show the fleet, then remove the chosen vehicle."""
    list_vehicles(system, tablefmt)
    vehicle_id = prompt_id("Enter vehicle ID to remove")
    system.vehicles.remove_vehicle(vehicle_id)
    click.echo(f"Removed vehicle ID {vehicle_id}")


def list_vehicles(system: RentalSystem, tablefmt: str) -> None:
    click.echo("\nVehicles:")
    vehicles = system.vehicles.list_vehicles()
    if not vehicles:
        click.echo("  (no vehicles)")
        return
    click.echo(render_vehicles(vehicles, tablefmt))
