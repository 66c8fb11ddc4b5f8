"""
models/skill.py
---------------
Domain model for skill types (Sword, Reason, Faith, ...).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from models.schema import ResourceSchema, string


@dataclass
class Skill:
    name: str = ""
    skill_icon: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


SKILL_SCHEMA = ResourceSchema(
    kind="skill_types",
    table="skills",
    model=Skill,
    fields=(
        string("name"),
        string("skill_icon", nullable=True),
    ),
)
