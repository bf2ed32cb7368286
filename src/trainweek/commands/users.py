"""User management commands."""

import click

from ..models.user import User
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    users_service,
)


@click.group()
@click.pass_context
def users(ctx):
    """Manage users.

    Commands for listing, inspecting and changing the status of users.
    """
    ensure_initialized(ctx)


@users.command(name="list")
@async_command
async def list_users():
    """List active users."""
    all_users = await users_service().list_active()

    if not all_users:
        echo_info("No active users found.")
        return

    headers = ["ID", "Name", "Email", "Role", "Joined"]
    rows = [
        [str(u.id), u.display_name, u.email, u.role.value, u.created_at.strftime("%Y-%m-%d")]
        for u in all_users
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(all_users)} user(s)")


@users.command()
@click.argument("user_id")
@async_command
async def show(user_id: str):
    """Show details of a user."""
    user = await users_service().get(user_id)
    _print_user(user)


@users.command()
@click.argument("user_id")
@async_command
async def remove(user_id: str):
    """Soft delete a user (mark inactive)."""
    user = await users_service().remove(user_id)
    echo_success(f"User {user.name} deleted")


@users.command()
@click.argument("user_id")
@async_command
async def activate(user_id: str):
    """Reactivate a user."""
    user = await users_service().activate(user_id)
    echo_success(f"User {user.name} is now {user.status.value}")


@users.command()
@click.argument("user_id")
@async_command
async def suspend(user_id: str):
    """Suspend a user."""
    user = await users_service().suspend(user_id)
    echo_success(f"User {user.name} is now {user.status.value}")


@users.command()
@click.argument("user_id")
@async_command
async def ban(user_id: str):
    """Ban a user."""
    user = await users_service().ban(user_id)
    echo_success(f"User {user.name} is now {user.status.value}")


def _print_user(user: User) -> None:
    click.echo()
    click.echo(click.style(user.display_name, bold=True))
    click.echo(f"  ID:       {user.id}")
    click.echo(f"  Email:    {user.email}")
    click.echo(f"  Role:     {user.role.value}")
    click.echo(f"  Status:   {user.status.value}")
    if user.age is not None:
        click.echo(f"  Age:      {user.age} ({user.age_group})")
    if user.location:
        click.echo(f"  Location: {user.location}")
    if user.specialties:
        click.echo(f"  Focus:    {', '.join(user.specialties)}")
    click.echo(f"  Joined:   {user.joined_date}")
    if user.stats:
        click.echo(
            f"  Stats:    {user.stats.total_workouts} workouts, "
            f"streak {user.stats.current_streak}, "
            f"{user.stats.monthly_progress}% of monthly goal"
        )
    click.echo()
