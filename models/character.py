"""
models/character.py
-------------------
Domain model for playable characters and their base stats/growth rates.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from models.schema import ResourceSchema, integer, string


@dataclass
class Character:
    """
    Represents a character.

    Attributes:
        id: Database primary key (None for new records).
        name: Character name, e.g. 'Edelgard'.
        image_link: URL of the portrait.
        affinity: House the character belongs to.
        base_lv: Level at recruitment.
        hp .. cha_growth: Base stat and growth rate (%) pairs.
        created_at: Timestamp when the record was created.
        updated_at: Timestamp of the last update.
    """
    name: str = ""
    image_link: str = ""
    affinity: str = ""
    base_lv: int = 0
    hp: int = 0
    hp_growth: int = 0
    strength: int = 0
    str_growth: int = 0
    magic: int = 0
    mag_growth: int = 0
    dexterity: int = 0
    dex_growth: int = 0
    speed: int = 0
    spd_growth: int = 0
    luck: int = 0
    lck_growth: int = 0
    defence: int = 0
    def_growth: int = 0
    resistance: int = 0
    res_growth: int = 0
    charm: int = 0
    cha_growth: int = 0
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __str__(self) -> str:
        return f"{self.name} ({self.affinity}) Lv {self.base_lv}"


_STATS = (
    "hp", "strength", "magic", "dexterity", "speed",
    "luck", "defence", "resistance", "charm",
)
_GROWTH = {
    "hp": "hp_growth", "strength": "str_growth", "magic": "mag_growth",
    "dexterity": "dex_growth", "speed": "spd_growth", "luck": "lck_growth",
    "defence": "def_growth", "resistance": "res_growth", "charm": "cha_growth",
}

CHARACTER_SCHEMA = ResourceSchema(
    kind="characters",
    table="characters",
    model=Character,
    fields=(
        string("name"),
        string("image_link"),
        string("affinity"),
        integer("base_lv"),
        *(d for stat in _STATS for d in (integer(stat), integer(_GROWTH[stat]))),
    ),
)
