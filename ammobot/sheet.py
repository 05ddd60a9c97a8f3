"""Read-only view over the character state returned by the server."""

from __future__ import annotations

from typing import Any

from .orders import EquipmentType, FightItems, InventoryArmorPart, InventoryWeapon
from .types import ItemOrder

_SKILL_FIELDS = {
    "mining": "mining_level",
    "woodcutting": "woodcutting_level",
    "fishing": "fishing_level",
    "alchemy": "alchemy_level",
    "weaponcrafting": "weaponcrafting_level",
    "gearcrafting": "gearcrafting_level",
    "jewelrycrafting": "jewelrycrafting_level",
    "cooking": "cooking_level",
    "combat": "level",
}

_EQUIPPED_SLOTS = (
    "weapon_slot",
    "rune_slot",
    "shield_slot",
    "helmet_slot",
    "body_armor_slot",
    "leg_armor_slot",
    "boots_slot",
    "ring1_slot",
    "ring2_slot",
    "amulet_slot",
)

_ARMOR_GROUPS = (
    ("helmet", "helmets"),
    ("body_armor", "body_armors"),
    ("leg_armor", "leg_armors"),
    ("shield", "shields"),
    ("ring", "rings1"),
    ("amulet", "amulets"),
)

_ELEMENTS = ("fire", "water", "earth", "air")


class CharacterSheet:
    """Answers questions about a character from its cached server state."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data: Any = data if data is not None else {}

    def _elements(self, prefix: str) -> tuple[int, int, int, int]:
        fire, water, earth, air = (int(self.data[f"{prefix}_{e}"]) for e in _ELEMENTS)
        return fire, water, earth, air

    def _inventory(self) -> list[Any]:
        return list(self.data.get("inventory") or [])

    def life_current(self) -> int:
        return int(self.data["hp"])

    def life_max(self) -> int:
        return int(self.data["max_hp"])

    def attack(self) -> tuple[int, int, int, int]:
        return self._elements("attack")

    def damage(self) -> tuple[int, int, int, int]:
        """Elemental damage bonuses, each including the generic bonus."""
        bonus = int(self.data["dmg"])
        fire, water, earth, air = (value + bonus for value in self._elements("dmg"))
        return fire, water, earth, air

    def resistance(self) -> tuple[int, int, int, int]:
        return self._elements("res")

    def item_count(self, item_code: str) -> int:
        """Quantity of ``item_code`` in the first inventory slot holding it."""
        for entry in self._inventory():
            if entry["code"] == item_code:
                return int(entry["quantity"])
        return 0

    def equipped_item(self, slot: EquipmentType | str) -> str:
        """Code of the item in ``slot``; empty when nothing is equipped."""
        name = slot.value if isinstance(slot, EquipmentType) else slot
        return str(self.data[f"{name}_slot"] or "")

    def is_item_equipped(self, item_code: str) -> bool:
        return any(self.data.get(slot) == item_code for slot in _EQUIPPED_SLOTS)

    def inventory_slot_count(self) -> int:
        return len(self._inventory())

    def inventory_remaining_slot_count(self) -> int:
        return sum(1 for entry in self._inventory() if int(entry["quantity"]) == 0)

    def inventory_remaining_space(self) -> int:
        used = sum(int(entry["quantity"]) for entry in self._inventory())
        return int(self.data["inventory_max_items"]) - used

    def inventory_item(self, slot: int) -> ItemOrder:
        """The stack in inventory slot ``slot``, or an empty order when out of range."""
        inventory = self._inventory()
        if 0 <= slot < len(inventory):
            entry = inventory[slot]
            return ItemOrder(str(entry["code"]), int(entry["quantity"]))
        return ItemOrder("", 0)

    def fight_items(self, item_manager: Any, level: int) -> FightItems:
        """Weapons and armour in the inventory usable at ``level``."""
        items = FightItems()
        codes = [str(entry["code"]) for entry in self._inventory()]

        for code in codes:
            if item_manager.is_weapon(code) and item_manager.item_level(code) <= level:
                items.weapons.append(
                    InventoryWeapon(
                        code,
                        tuple(item_manager.weapon_attack(code)),
                        (0, 0, 0, 0),
                        item_manager.item_level(code),
                    )
                )

        for armor_type, group in _ARMOR_GROUPS:
            bucket = getattr(items, group)
            for code in codes:
                if item_manager.is_type(code, armor_type) and item_manager.item_level(code) <= level:
                    bucket.append(
                        InventoryArmorPart(
                            code,
                            tuple(item_manager.armor_resistance(code)),
                            tuple(item_manager.armor_damage(code)),
                            item_manager.armor_hp(code),
                            item_manager.item_level(code),
                        )
                    )
        return items

    def is_inventory_slot_resource(self, item_manager: Any, slot: int) -> bool:
        return bool(item_manager.is_type(self._inventory()[slot]["code"], "resource"))

    def gold(self) -> int:
        return int(self.data["gold"])

    def skill_level(self, skill: str) -> int:
        """Level of a skill; ``combat`` is the character level, unknown skills are 0."""
        field_name = _SKILL_FIELDS.get(skill)
        if field_name is None:
            return 0
        return int(self.data[field_name])

    def is_task_item(self) -> bool:
        return self.data.get("task_type") == "items"

    def is_task_monster(self) -> bool:
        return self.data.get("task_type") == "monsters"

    def task_remaining(self) -> int:
        return int(self.data["task_total"]) - int(self.data["task_progress"])

    def task(self) -> str:
        return str(self.data["task"] or "")