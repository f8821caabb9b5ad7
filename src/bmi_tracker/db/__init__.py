"""Database layer for bmi-tracker."""

from .engine import get_data_dir, get_db_path, init_db
from .repositories import BMIEntryRepository, UserProfileRepository

__all__ = [
    "BMIEntryRepository",
    "get_data_dir",
    "get_db_path",
    "init_db",
    "UserProfileRepository",
]
