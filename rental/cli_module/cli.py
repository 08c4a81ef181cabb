"""Main CLI entry point for the vehicle rental application."""

import logging

import click

from rental import __version__
from rental.config import LOG_LEVEL, TABLE_FORMAT
from rental.cli_module.commands.menu_commands import menu_command

# Set context settings to properly display help for all commands
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
    "show_default": True
}

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=LOG_LEVEL, help="Logging level")
@click.option("--table-format", default=TABLE_FORMAT, help="tabulate table format")
@click.version_option(__version__, prog_name="rental")
@click.pass_context
def cli(ctx, log_level, table_format):
    """Vehicle rental management. Runs the interactive menu by default."""
    logging.basicConfig(level=getattr(logging, log_level.upper()))
    ctx.obj = {"table_format": table_format}

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu_command)


cli.add_command(menu_command)


def main():
    """Entry point for the application."""
    cli()


if __name__ == '__main__':
    main()
