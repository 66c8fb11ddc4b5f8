"""
models/spell.py
---------------
Domain model for spells (black/white/dark magic).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from models.schema import ResourceSchema, integer, string


@dataclass
class Spell:
    """
    Represents a spell. Combat values are None where the spell has none
    (e.g. a healing spell has no critical rate).
    """
    name: str = ""
    type: str = ""
    might: Optional[int] = None
    hit: Optional[int] = None
    critical: Optional[int] = None
    uses: int = 0
    weight: Optional[int] = None
    range_min: int = 0
    range_max: Optional[int] = None
    description: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


SPELL_SCHEMA = ResourceSchema(
    kind="spells",
    table="spells",
    model=Spell,
    fields=(
        string("name"),
        string("type"),
        integer("might", nullable=True),
        integer("hit", nullable=True),
        integer("critical", nullable=True),
        integer("uses"),
        integer("weight", nullable=True),
        integer("range_min"),
        integer("range_max", nullable=True),
        string("description", nullable=True),
    ),
)
