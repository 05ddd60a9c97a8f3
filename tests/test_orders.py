import pytest

from ammobot.orders import (
    CharacterOrder,
    CharacterOrderType,
    EquipmentType,
    FightItems,
    InventoryArmorPart,
    InventoryWeapon,
)
from ammobot.types import ItemOrder, MapCoord


def test_move_carries_coord():
    order = CharacterOrder.move(MapCoord(4, 13))
    assert order.type is CharacterOrderType.MOVE
    assert order.coord == MapCoord(4, 13)
    assert order.item == ItemOrder()
    assert order.slot == ""


@pytest.mark.parametrize(
    "factory, kind",
    [
        (CharacterOrder.fight, CharacterOrderType.FIGHT),
        (CharacterOrder.rest, CharacterOrderType.REST),
        (CharacterOrder.gathering, CharacterOrderType.GATHERING),
        (CharacterOrder.task_new, CharacterOrderType.TASK_NEW),
        (CharacterOrder.task_complete, CharacterOrderType.TASK_COMPLETE),
    ],
)
def test_argumentless_orders(factory, kind):
    order = factory()
    assert order == CharacterOrder(kind)


@pytest.mark.parametrize(
    "factory, kind",
    [
        (CharacterOrder.craft, CharacterOrderType.CRAFT),
        (CharacterOrder.use_item, CharacterOrderType.USE_ITEM),
        (CharacterOrder.recycling, CharacterOrderType.RECYCLING),
        (CharacterOrder.task_trade, CharacterOrderType.TASK_TRADE),
        (CharacterOrder.deposit_item, CharacterOrderType.DEPOSIT_ITEM),
        (CharacterOrder.withdraw_item, CharacterOrderType.WITHDRAW_ITEM),
        (CharacterOrder.buy_item, CharacterOrderType.BUY_ITEM),
    ],
)
def test_item_orders(factory, kind):
    item = ItemOrder("copper_ore", 7)
    order = factory(item)
    assert order.type is kind
    assert order.item == item
    assert order.coord == MapCoord()


def test_equip_item_uses_single_quantity():
    order = CharacterOrder.equip_item("weapon", "copper_axe")
    assert order.type is CharacterOrderType.EQUIP_ITEM
    assert order.slot == "weapon"
    assert order.item == ItemOrder("copper_axe", 1)


def test_unequip_item_sets_slot():
    order = CharacterOrder.unequip_item("helmet")
    assert order.type is CharacterOrderType.UNEQUIP_ITEM
    assert order.slot == "helmet"


@pytest.mark.parametrize(
    "factory, kind",
    [
        (CharacterOrder.deposit_gold, CharacterOrderType.DEPOSIT_GOLD),
        (CharacterOrder.withdraw_gold, CharacterOrderType.WITHDRAW_GOLD),
    ],
)
def test_gold_orders(factory, kind):
    order = factory(250)
    assert order.type is kind
    assert order.item == ItemOrder("", 250)


def test_equipment_type_values_are_slot_names():
    assert EquipmentType.BODY_ARMOR.value == "body_armor"
    assert EquipmentType("ring2") is EquipmentType.RING2


def test_fight_items_extend():
    sword = InventoryWeapon("sword", (1, 2, 3, 4), (0, 0, 0, 0), 1)
    hat = InventoryArmorPart("hat", (1, 1, 1, 1), (0, 0, 0, 0), 5, 1)
    ring = InventoryArmorPart("ring", (0, 0, 0, 0), (2, 2, 2, 2), 0, 1)
    left = FightItems(weapons=[sword])
    right = FightItems(helmets=[hat], rings1=[ring])
    left.extend(right)
    assert left.weapons == [sword]
    assert left.helmets == [hat]
    assert left.rings1 == [ring]
    assert left.boots == []
    assert right.weapons == []