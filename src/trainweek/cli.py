"""CLI entry point for trainweek."""

import click

from . import __version__
from .commands import init, serve, users, workouts
from .config import get_settings
from .logger import setup_logger


@click.group()
@click.version_option(version=__version__, prog_name="trainweek")
def main():
    """trainweek: users and weekly workout plans.

    Example usage:

        # Create the database with demo data
        trainweek init --seed

        # Inspect data
        trainweek users list
        trainweek workouts list --user 1

        # Serve the REST API
        trainweek serve
    """
    settings = get_settings()
    setup_logger(level=settings.log_level, log_file=settings.log_file)


# Register commands
main.add_command(init)
main.add_command(serve)
main.add_command(users)
main.add_command(workouts)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
