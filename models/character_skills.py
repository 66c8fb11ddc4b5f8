"""
models/character_skills.py
--------------------------
Domain model for a character's skill list: spells and combat arts learned,
skill-type boons/banes and budding talent.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from models.schema import ResourceSchema, int_array, integer, string


@dataclass
class CharacterSkills:
    """
    Represents the skill list of one character.

    Attributes:
        char_id: ID of the owning character.
        spell_list: Spell IDs the character learns.
        ca_list: Combat art IDs the character learns.
        boons: Skill type IDs the character is strong in.
        banes: Skill type IDs the character is weak in.
        budding_talent: Skill type unlocked by budding talent, if any.
    """
    name: str = ""
    char_id: int = 0
    spell_list: Optional[list[int]] = None
    ca_list: Optional[list[int]] = None
    boons: Optional[list[int]] = None
    banes: Optional[list[int]] = None
    budding_talent: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


CHARACTER_SKILLS_SCHEMA = ResourceSchema(
    kind="charskilllist",
    table="character_skills",
    model=CharacterSkills,
    fields=(
        string("name"),
        integer("char_id"),
        int_array("spell_list"),
        int_array("ca_list"),
        int_array("boons", nullable=True),
        int_array("banes", nullable=True),
        string("budding_talent", nullable=True),
    ),
)
