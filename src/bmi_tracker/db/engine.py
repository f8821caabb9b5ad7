"""Database engine setup and initialization."""

import logging
import os
from pathlib import Path

import aiosqlite

logger = logging.getLogger(__name__)

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
DATA_DIR_ENV = "BMI_TRACKER_DATA_DIR"


def get_data_dir() -> Path:
    """Data directory, overridable with BMI_TRACKER_DATA_DIR."""
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else DATA_DIR


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "bmi_tracker.db"


async def _run_migrations(db: aiosqlite.Connection) -> None:
    """Add columns introduced after the first schema."""
    cursor = await db.execute("PRAGMA table_info(users)")
    columns = await cursor.fetchall()
    user_columns = {col[1] for col in columns}

    if "sex" not in user_columns:
        await db.execute("ALTER TABLE users ADD COLUMN sex TEXT DEFAULT 'not specified'")
        logger.info("Added users.sex column")
    if "name" not in user_columns:
        await db.execute("ALTER TABLE users ADD COLUMN name TEXT DEFAULT ''")
        logger.info("Added users.name column")

    await db.commit()


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # One row per authenticated user
        await db.execute("""
            CREATE TABLE IF NOT EXISTS users (
                user_id TEXT PRIMARY KEY,
                name TEXT DEFAULT '',
                measurement_system TEXT NOT NULL DEFAULT 'metric',
                height_cm REAL,
                date_of_birth TEXT,
                sex TEXT DEFAULT 'not specified',
                onboarding_completed INTEGER NOT NULL DEFAULT 0,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Height/weight observations, always in cm/kg
        await db.execute("""
            CREATE TABLE IF NOT EXISTS bmi_entries (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id TEXT NOT NULL,
                recorded_at TIMESTAMP NOT NULL,
                height_cm REAL NOT NULL,
                weight_kg REAL NOT NULL,
                bmi REAL NOT NULL,
                FOREIGN KEY (user_id) REFERENCES users(user_id) ON DELETE CASCADE
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_bmi_entries_user
            ON bmi_entries(user_id, recorded_at)
        """)

        await db.commit()

        # Run migrations for existing databases
        await _run_migrations(db)

    logger.debug("Database ready at %s", db_path)
