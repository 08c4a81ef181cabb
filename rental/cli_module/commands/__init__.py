"""Command modules for the rental CLI."""

from rental.cli_module.commands.menu_commands import menu_command, main_menu

__all__ = [
    'menu_command',
    'main_menu',
]
