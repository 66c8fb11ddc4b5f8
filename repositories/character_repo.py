"""
repositories/character_repo.py
------------------------------
Character lookups by house and by name.
"""

from datetime import datetime
from typing import Callable, Optional

from db.connection import Database
from models.character import CHARACTER_SCHEMA, Character
from repositories.base import Repository


def title_case(name: str) -> str:
    """Upper-case the first letter of each word, leaving the rest untouched."""
    return " ".join(word[:1].upper() + word[1:] for word in name.split(" "))


class CharacterRepository(Repository):
    """Repository for the characters table."""

    def __init__(self, db: Database, clock: Callable[[], datetime] = datetime.now):
        super().__init__(db, CHARACTER_SCHEMA, clock)

    def by_affinity(self, affinity: str) -> list[Character]:
        """All characters of a house, e.g. 'Black Eagles'."""
        return self.fetch_by("affinity", affinity)

    def by_name(self, name: str) -> Optional[Character]:
        """
        Exact-name lookup; ``"edelgard"`` finds ``"Edelgard"``.

        Returns:
            The first matching character, or None.
        """
        matches = self.fetch_by("name", title_case(name))
        return matches[0] if matches else None
