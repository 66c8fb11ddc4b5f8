"""
models/weapon.py
----------------
Domain model for weapons.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from models.schema import ResourceSchema, integer, string


@dataclass
class Weapon:
    name: str = ""
    type_id: int = 0
    str_mag: Optional[str] = None
    might: Optional[int] = None
    hit: Optional[int] = None
    critical: Optional[int] = None
    durability: int = 0
    weight: int = 0
    range_min: int = 0
    range_max: Optional[int] = None
    description: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __str__(self) -> str:
        return f"{self.name} (Mt {self.might}, Hit {self.hit}, Dur {self.durability})"


WEAPON_SCHEMA = ResourceSchema(
    kind="weapons",
    table="weapons",
    model=Weapon,
    fields=(
        string("name"),
        integer("type_id"),
        string("str_mag", nullable=True),
        integer("might", nullable=True),
        integer("hit", nullable=True),
        integer("critical", nullable=True),
        integer("durability"),
        integer("weight"),
        integer("range_min"),
        integer("range_max", nullable=True),
        string("description", nullable=True),
    ),
)
