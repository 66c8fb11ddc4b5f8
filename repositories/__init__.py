"""
repositories/ - Data Access Layer
==================================
One generic Repository executes every query; the per-kind subclasses only
add the secondary lookups their routes need.
"""

from datetime import datetime
from typing import Callable

from db.connection import Database
from models import SCHEMAS
from repositories.base import Repository
from repositories.character_repo import CharacterRepository
from repositories.character_skills_repo import CharacterSkillsRepository
from repositories.weapon_repo import WeaponRepository

_SPECIALIZED = {
    "characters": CharacterRepository,
    "weapons": WeaponRepository,
    "charskilllist": CharacterSkillsRepository,
}


def build_repositories(
    db: Database, clock: Callable[[], datetime] = datetime.now
) -> dict[str, Repository]:
    """One repository per resource kind, all sharing ``db``."""
    repos: dict[str, Repository] = {}
    for kind, schema in SCHEMAS.items():
        cls = _SPECIALIZED.get(kind)
        repos[kind] = cls(db, clock) if cls else Repository(db, schema, clock)
    return repos


__all__ = [
    "Repository",
    "CharacterRepository",
    "CharacterSkillsRepository",
    "WeaponRepository",
    "build_repositories",
]
