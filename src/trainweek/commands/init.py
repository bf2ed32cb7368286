"""Initialize project command."""

import click

from ..config import get_settings
from ..data.seed import seed_demo_data
from ..db import SQLiteUserRepository, SQLiteWorkoutDayRepository, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@click.option("--seed", is_flag=True, help="Insert demo users and a weekly plan")
@async_command
async def init(seed: bool):
    """Initialize the trainweek database.

    Creates the data directory and the SQLite schema. Safe to run again on an
    existing database.
    """
    settings = get_settings()
    db_path = settings.db_path

    echo_info(f"Initializing trainweek in {db_path.parent}")
    await init_db(db_path)
    echo_success("Database initialized")

    if seed:
        users_added, days_added = await seed_demo_data(
            SQLiteUserRepository(db_path), SQLiteWorkoutDayRepository(db_path)
        )
        echo_success(f"Demo data added ({users_added} users, {days_added} workout days)")

    click.echo()
    click.echo("Next steps:")
    click.echo("  trainweek serve          # start the API on http://127.0.0.1:8000")
    click.echo("  trainweek users list     # list active users")
