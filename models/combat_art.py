"""
models/combat_art.py
--------------------
Domain model for combat arts.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from models.schema import ResourceSchema, integer, string


@dataclass
class CombatArt:
    """
    Represents a combat art.

    Attributes:
        type_id: Skill type (weapon family) the art belongs to.
        str_mag: Damage type ('Str' or 'Mag'); None when the art deals none.
        durability_cost: Weapon durability consumed per use.
    """
    name: str = ""
    type_id: int = 0
    str_mag: Optional[str] = None
    might: Optional[int] = None
    hit: Optional[int] = None
    critical: Optional[int] = None
    durability_cost: int = 0
    range_min: int = 0
    range_max: Optional[int] = None
    description: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


COMBAT_ART_SCHEMA = ResourceSchema(
    kind="combat_arts",
    table="combat_arts",
    model=CombatArt,
    fields=(
        string("name"),
        integer("type_id"),
        string("str_mag", nullable=True),
        integer("might", nullable=True),
        integer("hit", nullable=True),
        integer("critical", nullable=True),
        integer("durability_cost"),
        integer("range_min"),
        integer("range_max", nullable=True),
        string("description", nullable=True),
    ),
)
