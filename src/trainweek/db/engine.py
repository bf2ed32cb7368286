"""Database engine setup and initialization."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiosqlite
from loguru import logger

from .filters import LOWER_FUNCTION, unicode_lower

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
DB_FILENAME = "trainweek.db"


def get_db_path(data_dir: Path | None = None, filename: str = DB_FILENAME) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / filename


@asynccontextmanager
async def connect(db_path: Path) -> AsyncIterator[aiosqlite.Connection]:
    """Open a connection with named rows, foreign keys and Unicode lowercasing."""
    async with aiosqlite.connect(db_path) as db:
        db.row_factory = aiosqlite.Row
        await db.create_function(LOWER_FUNCTION, 1, unicode_lower, deterministic=True)
        await db.execute("PRAGMA foreign_keys = ON")
        yield db


async def _run_migrations(db: aiosqlite.Connection) -> None:
    """Run database migrations for schema updates."""
    # Databases created before profiles gained optional fields
    cursor = await db.execute("PRAGMA table_info(users)")
    columns = await cursor.fetchall()
    user_columns = {col[1] for col in columns}

    for col, ddl in [
        ("age", "INTEGER"),
        ("specialties", "TEXT"),
        ("stats", "TEXT"),
    ]:
        if col not in user_columns:
            logger.info(f"Adding users.{col} column")
            await db.execute(f"ALTER TABLE users ADD COLUMN {col} {ddl}")

    await db.commit()


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Users table; email uniqueness is enforced here, not only in services
        await db.execute("""
            CREATE TABLE IF NOT EXISTS users (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name VARCHAR(100) NOT NULL,
                email VARCHAR(255) NOT NULL UNIQUE,
                role TEXT NOT NULL DEFAULT 'user',
                status TEXT NOT NULL DEFAULT 'active',
                age INTEGER,
                avatar TEXT,
                bio TEXT,
                phone TEXT,
                location TEXT,
                specialties TEXT,
                stats TEXT,
                created_at TIMESTAMP NOT NULL,
                updated_at TIMESTAMP NOT NULL
            )
        """)

        # Weekly workout plan entries
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_days (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name VARCHAR(100) NOT NULL,
                description TEXT,
                day_of_week INTEGER NOT NULL CHECK (day_of_week BETWEEN 1 AND 7),
                duration_minutes INTEGER NOT NULL CHECK (duration_minutes BETWEEN 1 AND 300),
                intensity_level INTEGER NOT NULL DEFAULT 3 CHECK (intensity_level BETWEEN 1 AND 5),
                workout_type VARCHAR(50) NOT NULL DEFAULT 'Force',
                is_active INTEGER NOT NULL DEFAULT 1,
                user_id INTEGER NOT NULL,
                created_at TIMESTAMP NOT NULL,
                updated_at TIMESTAMP NOT NULL,
                FOREIGN KEY (user_id) REFERENCES users(id)
            )
        """)

        # At most one active entry per user and weekday
        await db.execute("""
            CREATE UNIQUE INDEX IF NOT EXISTS uq_workout_days_user_day_active
            ON workout_days(user_id, day_of_week)
            WHERE is_active = 1
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_users_status
            ON users(status)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_days_user
            ON workout_days(user_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_days_day
            ON workout_days(day_of_week)
        """)

        await db.commit()

        # Run migrations for existing databases
        await _run_migrations(db)

    logger.info(f"Database initialized at {db_path}")
