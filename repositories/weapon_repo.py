"""
repositories/weapon_repo.py
---------------------------
Weapon name search.
"""

from datetime import datetime
from typing import Callable

from db.connection import Database
from models.weapon import WEAPON_SCHEMA, Weapon
from repositories.base import Repository


class WeaponRepository(Repository):
    """Repository for the weapons table."""

    def __init__(self, db: Database, clock: Callable[[], datetime] = datetime.now):
        super().__init__(db, WEAPON_SCHEMA, clock)

    def search_by_name(self, prefix: str) -> list[Weapon]:
        """Weapons whose name starts with ``prefix`` (case-sensitive)."""
        return self.fetch_by("name", prefix, prefix=True)
