"""Item catalogue: recipes, gathering requirements, effects and loot sources."""

from __future__ import annotations

from typing import Any, Mapping

from .types import GatheringRequirement, ItemOrder, Recipe

GATHERING_SKILLS = frozenset({"mining", "woodcutting", "fishing", "alchemy"})

_ATTACK_EFFECTS = ("attack_fire", "attack_water", "attack_earth", "attack_air")
_RESISTANCE_EFFECTS = ("res_fire", "res_water", "res_earth", "res_air")
_DAMAGE_EFFECTS = ("dmg_fire", "dmg_water", "dmg_earth", "dmg_air")


class ItemManager:
    """Indexes every item of the game by code."""

    def __init__(self) -> None:
        self._items: dict[str, Any] = {}
        self._recipes: dict[str, Recipe] = {}
        self._gathering: dict[str, GatheringRequirement] = {}
        self._looting: dict[str, list[str]] = {}
        self._effects: dict[str, dict[str, int]] = {}
        self._levels: dict[str, int] = {}
        self._required_levels: dict[str, int] = {}

    def initialize(self, client: Any, monster_manager: Any) -> None:
        self.load(client.get_items(), monster_manager)

    def load(self, items: Mapping[str, Any], monster_manager: Any) -> None:
        """Replace the catalogue with ``items`` (keyed by code) and index loot sources."""
        self._items = dict(items)
        self._recipes = {}
        self._gathering = {}
        self._looting = {}
        self._effects = {}
        self._levels = {}
        self._required_levels = {}

        for code in sorted(self._items):
            item = self._items[code]
            craft = item.get("craft")
            if craft is not None:
                self._recipes[code] = Recipe(
                    skill_name=str(craft["skill"]),
                    skill_level=int(craft["level"]),
                    target_item=code,
                    required_items=[ItemOrder.from_dict(entry) for entry in craft.get("items") or []],
                )
            if item.get("type") == "resource":
                subtype = item.get("subtype")
                if subtype in GATHERING_SKILLS:
                    self._gathering[code] = GatheringRequirement(str(subtype), int(item["level"]))
            for effect in item.get("effects") or []:
                self._effects.setdefault(code, {})[str(effect["code"])] = int(effect["value"])
            self._levels[code] = int(item.get("level") or 0)
            for condition in item.get("conditions") or []:
                self._required_levels[code] = int(condition["value"])

        for monster in monster_manager.monster_list():
            for loot in monster_manager.monster_loot(monster):
                self._looting.setdefault(loot.code, []).append(monster)

    def weapons(self) -> dict[str, int]:
        """Every weapon with the sum of its elemental attacks."""
        result: dict[str, int] = {}
        for code in sorted(self._items):
            item = self._items[code]
            if item.get("type") != "weapon":
                continue
            result[code] = sum(
                int(effect["value"])
                for effect in item.get("effects") or []
                if effect["code"] in _ATTACK_EFFECTS
            )
        return result

    def items(self) -> list[str]:
        """All item codes, sorted."""
        return sorted(self._items)

    def is_weapon(self, item_code: str) -> bool:
        return self.is_type(item_code, "weapon")

    def _effect_vector(self, item_code: str, names: tuple[str, ...]) -> tuple[int, int, int, int]:
        fire, water, earth, air = (self.effect_value(item_code, name) for name in names)
        return fire, water, earth, air

    def weapon_attack(self, item_code: str) -> tuple[int, int, int, int]:
        return self._effect_vector(item_code, _ATTACK_EFFECTS)

    def armor_resistance(self, item_code: str) -> tuple[int, int, int, int]:
        return self._effect_vector(item_code, _RESISTANCE_EFFECTS)

    def armor_damage(self, item_code: str) -> tuple[int, int, int, int]:
        return self._effect_vector(item_code, _DAMAGE_EFFECTS)

    def armor_hp(self, item_code: str) -> int:
        return self.effect_value(item_code, "hp")

    def required_level(self, item_code: str) -> int:
        """Level a character needs to equip the item; 0 when unconditioned."""
        return self._required_levels.get(item_code, 0)

    def item_level(self, item_code: str) -> int:
        return self._levels.get(item_code, 0)

    def is_type(self, item_code: str, item_type: str) -> bool:
        item = self._items.get(item_code)
        return item is not None and item.get("type") == item_type

    def effect_value(self, item_code: str, effect_code: str) -> int:
        return self._effects.get(item_code, {}).get(effect_code, 0)

    def recipe(self, item_code: str) -> Recipe | None:
        return self._recipes.get(item_code)

    def gathering_skill(self, item_code: str) -> GatheringRequirement | None:
        return self._gathering.get(item_code)

    def loot_monster_name(self, item_code: str) -> str | None:
        """The strongest monster dropping ``item_code``, or None."""
        monsters = self._looting.get(item_code)
        return monsters[0] if monsters else None