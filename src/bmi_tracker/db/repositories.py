"""Data access layer for bmi-tracker."""

import logging
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..models.entry import BMIEntry
from ..models.user_profile import UserProfile
from .engine import get_db_path

logger = logging.getLogger(__name__)


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class UserProfileRepository:
    """Repository for user profiles, keyed by the authenticated user id."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, user_id: str) -> UserProfile:
        """Create an empty, not yet onboarded profile."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "INSERT OR IGNORE INTO users (user_id, onboarding_completed) VALUES (?, 0)",
                (user_id,),
            )
            await db.commit()
        logger.info("Created profile for user %s", user_id)
        return await self.get(user_id)

    async def get(self, user_id: str) -> UserProfile | None:
        """Get a profile by user id."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM users WHERE user_id = ?", (user_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_profile(row)

    async def get_or_create(self, user_id: str) -> UserProfile:
        """Get a profile, creating it on first access."""
        profile = await self.get(user_id)
        if profile is None:
            profile = await self.create(user_id)
        return profile

    async def save(self, profile: UserProfile) -> None:
        """Create or update a profile."""
        data = profile.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO users
                (user_id, name, measurement_system, height_cm, date_of_birth, sex,
                 onboarding_completed)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(user_id) DO UPDATE SET
                    name = excluded.name,
                    measurement_system = excluded.measurement_system,
                    height_cm = excluded.height_cm,
                    date_of_birth = excluded.date_of_birth,
                    sex = excluded.sex,
                    onboarding_completed = excluded.onboarding_completed,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (
                    data["user_id"],
                    data["name"],
                    data["measurement_system"],
                    data["height_cm"],
                    data["date_of_birth"],
                    data["sex"],
                    int(data["onboarding_completed"]),
                ),
            )
            await db.commit()
        logger.info("Saved profile for user %s", profile.user_id)

    async def delete(self, user_id: str) -> None:
        """Delete a profile and all of its entries."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM bmi_entries WHERE user_id = ?", (user_id,))
            await db.execute("DELETE FROM users WHERE user_id = ?", (user_id,))
            await db.commit()
        logger.info("Deleted profile for user %s", user_id)

    def _row_to_profile(self, row: aiosqlite.Row) -> UserProfile:
        """Convert a database row to a UserProfile."""
        data = {
            "user_id": row["user_id"],
            "name": row["name"],
            "measurement_system": row["measurement_system"],
            "height_cm": row["height_cm"],
            "date_of_birth": row["date_of_birth"],
            "sex": row["sex"],
            "onboarding_completed": row["onboarding_completed"],
        }
        return UserProfile.from_dict(
            data,
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )


class BMIEntryRepository:
    """Repository for BMI entries.

    Every statement that touches an existing entry is scoped by both the
    entry id and the owning user id. Writes always recompute the stored BMI.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, entry: BMIEntry) -> int:
        """Store a new entry and return its id."""
        entry.recalculate()
        data = entry.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO bmi_entries
                (user_id, recorded_at, height_cm, weight_kg, bmi)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    data["user_id"],
                    data["recorded_at"],
                    data["height_cm"],
                    data["weight_kg"],
                    data["bmi"],
                ),
            )
            await db.commit()
            entry.id = cursor.lastrowid
        logger.info("Created entry %s for user %s", entry.id, entry.user_id)
        return entry.id

    async def get(self, entry_id: int, user_id: str) -> BMIEntry | None:
        """Get an entry owned by the given user."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM bmi_entries WHERE id = ? AND user_id = ?",
                (entry_id, user_id),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_entry(row)

    async def list_for_user(self, user_id: str) -> list[BMIEntry]:
        """List a user's entries, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM bmi_entries
                WHERE user_id = ?
                ORDER BY recorded_at DESC, id DESC
                """,
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_entry(row) for row in rows]

    async def update(self, entry: BMIEntry) -> bool:
        """Update an existing entry. Returns False if no owned row matched."""
        if entry.id is None:
            raise ValueError("Entry must have an ID to update")

        entry.recalculate()
        data = entry.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                UPDATE bmi_entries SET
                    recorded_at = ?, height_cm = ?, weight_kg = ?, bmi = ?
                WHERE id = ? AND user_id = ?
                """,
                (
                    data["recorded_at"],
                    data["height_cm"],
                    data["weight_kg"],
                    data["bmi"],
                    entry.id,
                    entry.user_id,
                ),
            )
            await db.commit()
            updated = cursor.rowcount > 0
        if updated:
            logger.info("Updated entry %s for user %s", entry.id, entry.user_id)
        return updated

    async def delete(self, entry_id: int, user_id: str) -> bool:
        """Delete an entry owned by the given user."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM bmi_entries WHERE id = ? AND user_id = ?",
                (entry_id, user_id),
            )
            await db.commit()
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("Deleted entry %s for user %s", entry_id, user_id)
        return deleted

    def _row_to_entry(self, row: aiosqlite.Row) -> BMIEntry:
        """Convert a database row to a BMIEntry."""
        data = {
            "user_id": row["user_id"],
            "recorded_at": row["recorded_at"],
            "height_cm": row["height_cm"],
            "weight_kg": row["weight_kg"],
            "bmi": row["bmi"],
        }
        return BMIEntry.from_dict(data, id=row["id"])
