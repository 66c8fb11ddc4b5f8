"""
End-to-end repository tests against PostgreSQL.

Skipped unless TEST_DATABASE_URL points at a scratch database; the tables
in schema.sql are created on first use and truncated before every test.
"""

import dataclasses

import pytest

from models import SCHEMAS
from models.character import Character
from models.character_skills import CHARACTER_SKILLS_SCHEMA, CharacterSkills
from models.combat_art import CombatArt
from models.skill import Skill
from models.spell import Spell
from models.unit_class import UnitClass
from models.weapon import Weapon
from repositories import build_repositories

SAMPLES = {
    "characters": Character(
        name="Edelgard", image_link="edelgard.png", affinity="Black Eagles",
        base_lv=1, hp=29, hp_growth=40, strength=13, str_growth=55, magic=6,
        mag_growth=45, dexterity=6, dex_growth=45, speed=8, spd_growth=40,
        luck=5, lck_growth=30, defence=6, def_growth=35, resistance=4,
        res_growth=35, charm=10, cha_growth=60,
    ),
    "skill_types": Skill(name="Axe", skill_icon="axe.png"),
    "spells": Spell(name="Fire", type="Black Magic", might=3, hit=90, critical=0,
                    uses=10, weight=3, range_min=1, range_max=2),
    "combat_arts": CombatArt(name="Smash", type_id=1, str_mag="Str", might=3, hit=-10,
                             critical=20, durability_cost=2, range_min=1, range_max=1),
    "weapons": Weapon(name="Iron Sword", type_id=1, str_mag="Str", might=5, hit=90,
                      critical=0, durability=40, weight=5, range_min=1, range_max=1),
    "charskilllist": CharacterSkills(name="Edelgard", char_id=1, spell_list=[1, 2, 3],
                                     ca_list=[], boons=[4, 5], banes=None),
    "classes": UnitClass(name="Fighter", rank="Beginner", base=[20, 8, 0, 5, 0, 0, 3, 0, 0],
                         bonus=[], growth=None),
}


@pytest.fixture
def repos(clean_db):
    return build_repositories(clean_db)


def _copy(kind):
    return dataclasses.replace(SAMPLES[kind])


def _columns(resource, exclude=("id", "created_at", "updated_at")):
    return {k: v for k, v in dataclasses.asdict(resource).items() if k not in exclude}


@pytest.mark.parametrize("kind", sorted(SCHEMAS))
def test_insert_then_fetch_round_trips(repos, kind):
    repo = repos[kind]
    saved = repo.insert(_copy(kind))

    fetched = repo.fetch_one(saved.id)

    assert fetched is not None
    assert fetched.id == saved.id
    assert fetched.created_at is not None and fetched.updated_at is not None
    assert _columns(fetched) == _columns(SAMPLES[kind])


def test_single_field_update_leaves_other_columns(repos):
    repo = repos["weapons"]
    saved = repo.insert(_copy("weapons"))
    before = repo.fetch_one(saved.id)

    updated = repo.update(saved.id, repo.schema.partial({"might": 6}))

    after = repo.fetch_one(saved.id)
    assert updated == after
    assert after.might == 6
    assert _columns(after, exclude=("might", "updated_at")) == _columns(before, exclude=("might", "updated_at"))
    assert after.updated_at >= before.updated_at


def test_empty_update_only_refreshes_timestamp(repos):
    repo = repos["spells"]
    saved = repo.insert(_copy("spells"))
    before = repo.fetch_one(saved.id)

    after = repo.update(saved.id, repo.schema.partial({}))

    assert after is not None
    assert _columns(after, exclude=("updated_at",)) == _columns(before, exclude=("updated_at",))
    assert after.updated_at >= before.updated_at


def test_explicit_zero_and_null_are_written(repos):
    repo = repos["spells"]
    saved = repo.insert(_copy("spells"))

    after = repo.update(saved.id, repo.schema.partial({"might": None, "range_min": 0}))

    assert after.might is None
    assert after.range_min == 0


def test_array_survives_scalar_update(repos):
    repo = repos["charskilllist"]
    saved = repo.insert(_copy("charskilllist"))

    repo.update(saved.id, CHARACTER_SKILLS_SCHEMA.partial({"budding_talent": "Lance"}))

    fetched = repo.fetch_one(saved.id)
    assert fetched.spell_list == [1, 2, 3]
    assert fetched.ca_list == []
    assert fetched.banes is None
    assert fetched.budding_talent == "Lance"


def test_update_unknown_key(repos):
    assert repos["skill_types"].update(12345, Skill(name="Bow")) is None


def test_delete_existing_and_missing(repos):
    repo = repos["classes"]
    saved = repo.insert(_copy("classes"))

    assert repo.delete(saved.id + 1000) is False
    assert repo.fetch_one(saved.id) is not None

    assert repo.delete(saved.id) is True
    assert repo.fetch_one(saved.id) is None
    assert repo.delete(saved.id) is False


def test_name_prefix_search(repos):
    repo = repos["weapons"]
    for name in ("Adamant Sword", "Adept Bow", "Broadsword", "Blade Ad", "Bad Axe"):
        repo.insert(dataclasses.replace(SAMPLES["weapons"], name=name))

    names = sorted(w.name for w in repo.search_by_name("Ad"))

    assert names == ["Adamant Sword", "Adept Bow"]


def test_fetch_all_empty_and_populated(repos):
    repo = repos["skill_types"]
    assert repo.fetch_all() == []

    repo.insert(Skill(name="Sword"))
    repo.insert(Skill(name="Lance"))

    assert [s.name for s in repo.fetch_all()] == ["Sword", "Lance"]


def test_character_lookups(repos):
    repo = repos["characters"]
    repo.insert(_copy("characters"))
    repo.insert(dataclasses.replace(SAMPLES["characters"], name="Dimitri", affinity="Blue Lions"))

    assert repo.by_name("edelgard").affinity == "Black Eagles"
    assert [c.name for c in repo.by_affinity("Blue Lions")] == ["Dimitri"]
    assert repo.by_name("claude") is None
