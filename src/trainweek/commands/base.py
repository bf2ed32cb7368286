"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..config import get_settings
from ..db import SQLiteUserRepository, SQLiteWorkoutDayRepository
from ..errors import TrainweekError
from ..services import UsersService, WorkoutDaysService


def async_command(f):
    """Decorator to run async Click commands.

    Domain errors are printed and turned into a non-zero exit.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return asyncio.run(f(*args, **kwargs))
        except TrainweekError as e:
            echo_error(str(e))
            raise SystemExit(1) from None

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_settings().db_path
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'trainweek init' first."
        )
        ctx.exit(1)


def users_service() -> UsersService:
    db_path = get_settings().db_path
    return UsersService(SQLiteUserRepository(db_path))


def workout_days_service() -> WorkoutDaysService:
    db_path = get_settings().db_path
    return WorkoutDaysService(
        SQLiteWorkoutDayRepository(db_path),
        SQLiteUserRepository(db_path),
    )


ECHO_TAGS = {
    "ok": ("[OK] ", "green"),
    "error": ("[ERROR] ", "red"),
    "info": ("[INFO] ", "blue"),
}


def _echo(kind: str, message: str) -> None:
    tag, colour = ECHO_TAGS[kind]
    click.echo(click.style(tag, fg=colour) + message)


def echo_success(message: str) -> None:
    _echo("ok", message)


def echo_error(message: str) -> None:
    _echo("error", message)


def echo_info(message: str) -> None:
    _echo("info", message)


def _cell(value, max_width: int) -> str:
    text = str(value)
    return text if len(text) <= max_width else text[: max_width - 3] + "..."


def format_table(
    headers: list[str], rows: list[list], padding: int = 2, max_width: int = 33
) -> str:
    """Render rows under headers as fixed-width columns.

    Cells longer than ``max_width`` are cut and end in ``...``.
    """
    if not rows:
        return ""

    cells = [[_cell(value, max_width) for value in row] for row in rows]
    widths = [max(len(h), *(len(row[i]) for row in cells)) for i, h in enumerate(headers)]
    gap = " " * padding

    lines = [gap.join(h.ljust(w) for h, w in zip(headers, widths)).rstrip()]
    lines.append(gap.join("-" * w for w in widths))
    lines.extend(gap.join(c.ljust(w) for c, w in zip(row, widths)).rstrip() for row in cells)
    return "\n".join(lines)
