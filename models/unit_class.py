"""
models/unit_class.py
--------------------
Domain model for character classes. Stat vectors are stored as integer
arrays in the fixed order HP, Str, Mag, Dex, Spd, Lck, Def, Res, Cha.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from models.schema import ResourceSchema, int_array, string


@dataclass
class UnitClass:
    """
    Represents a class.

    Attributes:
        rank: Tier ('Beginner', 'Intermediate', 'Advanced', 'Master', ...).
        base: Minimum base stats granted by the class.
        bonus: Flat stat bonuses while in the class, if any.
        growth: Growth-rate modifiers (%), if any.
    """
    name: str = ""
    rank: str = ""
    base: Optional[list[int]] = None
    bonus: Optional[list[int]] = None
    growth: Optional[list[int]] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


CLASS_SCHEMA = ResourceSchema(
    kind="classes",
    table="classes",
    model=UnitClass,
    fields=(
        string("name"),
        string("rank"),
        int_array("base"),
        int_array("bonus", nullable=True),
        int_array("growth", nullable=True),
    ),
)
