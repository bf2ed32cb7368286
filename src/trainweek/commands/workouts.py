"""Workout day commands."""

import click

from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    workout_days_service,
)


@click.group()
@click.pass_context
def workouts(ctx):
    """Manage weekly workout plans."""
    ensure_initialized(ctx)


@workouts.command(name="list")
@click.option("--user", "-u", "user_id", default=None, help="Only this user's plan")
@async_command
async def list_workouts(user_id: str | None):
    """List active workout days."""
    service = workout_days_service()
    if user_id is not None:
        workout_days = await service.list_by_user(user_id)
    else:
        workout_days = await service.list_active()

    if not workout_days:
        echo_info("No active workout days found.")
        return

    headers = ["ID", "Day", "Name", "Type", "Duration", "Intensity", "User"]
    rows = [
        [w.id, w.day_name, w.name, w.workout_type.value, w.formatted_duration,
         w.intensity_name, w.user_id]
        for w in workout_days
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(workout_days)} workout day(s)")


@workouts.command()
@click.argument("workout_day_id")
@async_command
async def show(workout_day_id: str):
    """Show details of a workout day."""
    w = await workout_days_service().get(workout_day_id)

    click.echo()
    click.echo(click.style(f"{w.day_name}: {w.name}", bold=True))
    if w.description:
        click.echo(f"  {w.description}")
    click.echo(f"  Type:      {w.workout_type.value}")
    click.echo(f"  Duration:  {w.formatted_duration}" + (" (long)" if w.is_long_workout else ""))
    click.echo(f"  Intensity: {w.intensity_level}/5 ({w.intensity_name})")
    click.echo(f"  User:      {w.user_id}")
    click.echo(f"  Active:    {'yes' if w.is_active else 'no'}")
    click.echo()


@workouts.command()
@click.argument("workout_day_id")
@async_command
async def remove(workout_day_id: str):
    """Soft delete a workout day."""
    w = await workout_days_service().remove(workout_day_id)
    echo_success(f'Workout day "{w.name}" deleted')
