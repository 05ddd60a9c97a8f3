"""Orders a character can queue, and the equipment it may choose to fight with."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum, auto

from .types import ItemOrder, MapCoord

Vector4 = tuple[int, int, int, int]


class CharacterOrderType(Enum):
    """The kind of action an order asks the server to perform."""

    MOVE = auto()
    FIGHT = auto()
    REST = auto()
    CRAFT = auto()
    USE_ITEM = auto()
    UNEQUIP_ITEM = auto()
    EQUIP_ITEM = auto()
    GATHERING = auto()
    RECYCLING = auto()
    TASK_NEW = auto()
    TASK_TRADE = auto()
    TASK_COMPLETE = auto()
    DEPOSIT_ITEM = auto()
    WITHDRAW_ITEM = auto()
    DEPOSIT_GOLD = auto()
    WITHDRAW_GOLD = auto()
    BUY_ITEM = auto()


@dataclass(frozen=True)
class CharacterOrder:
    """One queued action with whatever arguments it needs."""

    type: CharacterOrderType
    coord: MapCoord = MapCoord()
    item: ItemOrder = ItemOrder()
    slot: str = ""

    @classmethod
    def move(cls, coord: MapCoord) -> CharacterOrder:
        return cls(CharacterOrderType.MOVE, coord=coord)

    @classmethod
    def fight(cls) -> CharacterOrder:
        return cls(CharacterOrderType.FIGHT)

    @classmethod
    def rest(cls) -> CharacterOrder:
        return cls(CharacterOrderType.REST)

    @classmethod
    def craft(cls, item: ItemOrder) -> CharacterOrder:
        return cls(CharacterOrderType.CRAFT, item=item)

    @classmethod
    def use_item(cls, item: ItemOrder) -> CharacterOrder:
        return cls(CharacterOrderType.USE_ITEM, item=item)

    @classmethod
    def unequip_item(cls, slot: str) -> CharacterOrder:
        return cls(CharacterOrderType.UNEQUIP_ITEM, slot=slot)

    @classmethod
    def equip_item(cls, slot: str, item_code: str) -> CharacterOrder:
        return cls(CharacterOrderType.EQUIP_ITEM, item=ItemOrder(item_code, 1), slot=slot)

    @classmethod
    def gathering(cls) -> CharacterOrder:
        return cls(CharacterOrderType.GATHERING)

    @classmethod
    def recycling(cls, item: ItemOrder) -> CharacterOrder:
        return cls(CharacterOrderType.RECYCLING, item=item)

    @classmethod
    def task_new(cls) -> CharacterOrder:
        return cls(CharacterOrderType.TASK_NEW)

    @classmethod
    def task_trade(cls, item: ItemOrder) -> CharacterOrder:
        return cls(CharacterOrderType.TASK_TRADE, item=item)

    @classmethod
    def task_complete(cls) -> CharacterOrder:
        return cls(CharacterOrderType.TASK_COMPLETE)

    @classmethod
    def deposit_item(cls, item: ItemOrder) -> CharacterOrder:
        return cls(CharacterOrderType.DEPOSIT_ITEM, item=item)

    @classmethod
    def withdraw_item(cls, item: ItemOrder) -> CharacterOrder:
        return cls(CharacterOrderType.WITHDRAW_ITEM, item=item)

    @classmethod
    def deposit_gold(cls, amount: int) -> CharacterOrder:
        return cls(CharacterOrderType.DEPOSIT_GOLD, item=ItemOrder("", amount))

    @classmethod
    def withdraw_gold(cls, amount: int) -> CharacterOrder:
        return cls(CharacterOrderType.WITHDRAW_GOLD, item=ItemOrder("", amount))

    @classmethod
    def buy_item(cls, item: ItemOrder) -> CharacterOrder:
        return cls(CharacterOrderType.BUY_ITEM, item=item)


class EquipmentType(Enum):
    """Equipment slots; the value is the slot's name on the server."""

    WEAPON = "weapon"
    HELMET = "helmet"
    SHIELD = "shield"
    BODY_ARMOR = "body_armor"
    BOOTS = "boots"
    RING1 = "ring1"
    RING2 = "ring2"
    AMULET = "amulet"
    UTILITY1 = "utility1"
    UTILITY2 = "utility2"
    BAG = "bag"
    LEG_ARMOR = "leg_armor"
    RUNE = "rune"
    ARTIFACT1 = "artifact1"
    ARTIFACT2 = "artifact2"
    ARTIFACT3 = "artifact3"


@dataclass(frozen=True)
class InventoryWeapon:
    """A weapon that could be equipped, with its elemental stats."""

    code: str
    attacks: Vector4
    damages: Vector4
    level: int


@dataclass(frozen=True)
class InventoryArmorPart:
    """A piece of armour that could be equipped, with its elemental stats."""

    code: str
    resistances: Vector4
    damages: Vector4
    hp: int
    level: int


@dataclass
class FightItems:
    """Candidate fight equipment, grouped by slot."""

    weapons: list[InventoryWeapon] = field(default_factory=list)
    helmets: list[InventoryArmorPart] = field(default_factory=list)
    body_armors: list[InventoryArmorPart] = field(default_factory=list)
    leg_armors: list[InventoryArmorPart] = field(default_factory=list)
    boots: list[InventoryArmorPart] = field(default_factory=list)
    shields: list[InventoryArmorPart] = field(default_factory=list)
    rings1: list[InventoryArmorPart] = field(default_factory=list)
    rings2: list[InventoryArmorPart] = field(default_factory=list)
    amulets: list[InventoryArmorPart] = field(default_factory=list)

    def extend(self, other: FightItems) -> None:
        """Append every candidate of ``other`` to the matching group."""
        for group in fields(self):
            getattr(self, group.name).extend(getattr(other, group.name))