"""
models/ - Domain Layer
======================
One dataclass per resource kind, each paired with the ResourceSchema that
maps it onto its table.
"""

from errors import ValidationError
from models.character import CHARACTER_SCHEMA
from models.character_skills import CHARACTER_SKILLS_SCHEMA
from models.combat_art import COMBAT_ART_SCHEMA
from models.schema import ResourceSchema
from models.skill import SKILL_SCHEMA
from models.spell import SPELL_SCHEMA
from models.unit_class import CLASS_SCHEMA
from models.weapon import WEAPON_SCHEMA

SCHEMAS: dict[str, ResourceSchema] = {
    s.kind: s
    for s in (
        CHARACTER_SCHEMA,
        SKILL_SCHEMA,
        SPELL_SCHEMA,
        COMBAT_ART_SCHEMA,
        WEAPON_SCHEMA,
        CHARACTER_SKILLS_SCHEMA,
        CLASS_SCHEMA,
    )
}


def describe(kind: str) -> ResourceSchema:
    """
    Look up the schema of a resource kind.

    Raises:
        ValidationError: If ``kind`` is not a known resource kind.
    """
    try:
        return SCHEMAS[kind]
    except KeyError:
        raise ValidationError(f"Unknown resource kind {kind!r}") from None
