"""
repositories/character_skills_repo.py
-------------------------------------
Skill lists, looked up by list ID or by owning character.
"""

from datetime import datetime
from typing import Callable, Optional

from db.connection import Database
from models.character_skills import CHARACTER_SKILLS_SCHEMA, CharacterSkills
from repositories.base import Repository


class CharacterSkillsRepository(Repository):
    """Repository for the character_skills table."""

    def __init__(self, db: Database, clock: Callable[[], datetime] = datetime.now):
        super().__init__(db, CHARACTER_SKILLS_SCHEMA, clock)

    def by_character(self, char_id: int) -> Optional[CharacterSkills]:
        """The skill list of a character, or None if it has none."""
        matches = self.fetch_by("char_id", char_id)
        return matches[0] if matches else None
