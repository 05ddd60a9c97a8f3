import pytest

from ammobot.item_manager import ItemManager
from ammobot.map_manager import MapManager
from ammobot.monster_manager import MonsterManager
from ammobot.types import GatheringRequirement, ItemOrder

ITEMS = {
    "copper_ore": {"code": "copper_ore", "type": "resource", "subtype": "mining", "level": 1, "effects": [], "craft": None},
    "copper_bar": {
        "code": "copper_bar",
        "type": "resource",
        "subtype": "bar",
        "level": 1,
        "effects": [],
        "craft": {"skill": "mining", "level": 1, "items": [{"code": "copper_ore", "quantity": 10}]},
    },
    "copper_dagger": {
        "code": "copper_dagger",
        "type": "weapon",
        "subtype": "",
        "level": 1,
        "effects": [{"code": "attack_air", "value": 6}, {"code": "critical_strike", "value": 35}],
        "craft": {"skill": "weaponcrafting", "level": 1, "items": [{"code": "copper_bar", "quantity": 6}]},
    },
    "copper_helmet": {
        "code": "copper_helmet",
        "type": "helmet",
        "level": 1,
        "effects": [{"code": "res_fire", "value": 5}, {"code": "hp", "value": 10}, {"code": "dmg_water", "value": 3}],
        "conditions": [{"code": "level", "value": 1}, {"code": "level", "value": 4}],
    },
    "feather": {"code": "feather", "type": "resource", "subtype": "mob", "level": 1},
}

MONSTERS = {
    "chicken": {"code": "chicken", "level": 1, "drops": [{"code": "feather", "rate": 8, "min_quantity": 1, "max_quantity": 2}]},
    "wolf": {"code": "wolf", "level": 15, "drops": [{"code": "feather", "rate": 4, "min_quantity": 1, "max_quantity": 1}]},
}


@pytest.fixture
def monsters():
    manager = MonsterManager(MapManager(None))
    manager.load(MONSTERS)
    return manager


@pytest.fixture
def items(monsters):
    manager = ItemManager()
    manager.load(ITEMS, monsters)
    return manager


def test_items_are_sorted_codes(items):
    assert items.items() == sorted(ITEMS)


def test_recipe_is_built_from_craft(items):
    recipe = items.recipe("copper_bar")
    assert recipe.skill_name == "mining"
    assert recipe.skill_level == 1
    assert recipe.target_item == "copper_bar"
    assert recipe.required_items == [ItemOrder("copper_ore", 10)]


def test_item_without_craft_has_no_recipe(items):
    assert items.recipe("copper_ore") is None
    assert items.recipe("unknown") is None


def test_gathering_only_for_gathering_subtypes(items):
    assert items.gathering_skill("copper_ore") == GatheringRequirement("mining", 1)
    assert items.gathering_skill("copper_bar") is None
    assert items.gathering_skill("feather") is None


def test_weapon_attack_and_weapons_sum(items):
    assert items.is_weapon("copper_dagger")
    assert not items.is_weapon("copper_helmet")
    assert items.weapon_attack("copper_dagger") == (0, 0, 0, 6)
    assert items.weapons() == {"copper_dagger": 6}


def test_armor_stats(items):
    assert items.armor_resistance("copper_helmet") == (5, 0, 0, 0)
    assert items.armor_damage("copper_helmet") == (0, 3, 0, 0)
    assert items.armor_hp("copper_helmet") == 10


def test_last_condition_sets_required_level(items):
    assert items.required_level("copper_helmet") == 4
    assert items.required_level("copper_dagger") == 0


def test_unknown_items_default_to_zero(items):
    assert items.item_level("unknown") == 0
    assert items.effect_value("unknown", "hp") == 0
    assert items.effect_value("copper_dagger", "res_fire") == 0
    assert not items.is_type("unknown", "weapon")


def test_is_type(items):
    assert items.is_type("copper_helmet", "helmet")
    assert not items.is_type("copper_helmet", "weapon")


def test_loot_prefers_strongest_monster(items):
    assert items.loot_monster_name("feather") == "wolf"
    assert items.loot_monster_name("copper_ore") is None


def test_initialize_reads_from_client(monsters):
    class FakeClient:
        def get_items(self):
            return {"feather": ITEMS["feather"]}

    manager = ItemManager()
    manager.initialize(FakeClient(), monsters)
    assert manager.items() == ["feather"]
    assert manager.item_level("feather") == 1


def test_reload_replaces_previous_catalogue(items, monsters):
    items.load({"feather": ITEMS["feather"]}, monsters)
    assert items.recipe("copper_bar") is None
    assert items.items() == ["feather"]