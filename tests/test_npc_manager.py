from ammobot.npc_manager import NPCItemTrade, NPCManager, TradeCurrency
from ammobot.types import MapCoord

ITEMS = [
    {"code": "apple", "npc": "farmer", "currency": "gold", "buy_price": 3, "sell_price": 5},
    {"code": "charm", "npc": "tasks_trader", "currency": "tasks_coin", "buy_price": None, "sell_price": 20},
    {"code": "apple", "npc": "grocer", "currency": "gold", "buy_price": 9, "sell_price": 9},
]


class FakeClient:
    def get_npc_items(self):
        return ITEMS


def test_buyer_and_seller():
    manager = NPCManager()
    manager.load(ITEMS)
    assert manager.buyer("apple") == NPCItemTrade("farmer", TradeCurrency.GOLD, 3)
    assert manager.seller("apple") == NPCItemTrade("farmer", TradeCurrency.GOLD, 5)


def test_missing_price_is_not_recorded():
    manager = NPCManager()
    manager.load(ITEMS)
    assert manager.buyer("charm") is None
    assert manager.seller("charm") == NPCItemTrade("tasks_trader", TradeCurrency.TASK_COIN, 20)


def test_unknown_item():
    manager = NPCManager()
    manager.load(ITEMS)
    assert manager.seller("sword") is None
    assert manager.buyer("sword") is None


def test_initialize_uses_client():
    manager = NPCManager()
    manager.initialize(FakeClient())
    assert manager.seller("charm").amount == 20


def test_coords_from_known_locations():
    manager = NPCManager({"farmer": MapCoord(2, 2)})
    assert manager.coords("farmer") == MapCoord(2, 2)
    assert manager.coords("grocer") is None
    assert NPCManager().coords("farmer") is None