"""A playable character: its cached state plus a queue of timed orders."""

from __future__ import annotations

import logging
from typing import Any

from .orders import CharacterOrder, CharacterOrderType
from .sheet import CharacterSheet
from .types import ItemOrder, MapCoord

log = logging.getLogger(__name__)

# Added to every server cooldown so the next request never arrives too early.
COOLDOWN_MARGIN = 0.5

_BANK_ORDERS = frozenset(
    {
        CharacterOrderType.DEPOSIT_ITEM,
        CharacterOrderType.WITHDRAW_ITEM,
        CharacterOrderType.DEPOSIT_GOLD,
        CharacterOrderType.WITHDRAW_GOLD,
    }
)


class Character(CharacterSheet):
    """Runs queued orders against the server once each cooldown has elapsed."""

    def __init__(self, client: Any, bank: Any) -> None:
        super().__init__()
        self._client = client
        self._bank = bank
        self.name: str = ""
        self._orders: list[CharacterOrder] = []
        self._current = 0
        self._remaining = 0.0
        self._position = MapCoord()

    @property
    def orders(self) -> tuple[CharacterOrder, ...]:
        """The orders queued in the current batch."""
        return tuple(self._orders)

    @property
    def position(self) -> MapCoord:
        return self._position

    @property
    def remaining_cooldown(self) -> float:
        return self._remaining

    def set_character(self, name: str) -> None:
        """Bind to the named character and load its state from the server."""
        self.name = name
        self.data = self._client.get_character(name)
        self._remaining = float(self.data["cooldown"])
        self._position = MapCoord(int(self.data["x"]), int(self.data["y"]))
        log.info("'%s' init cooldown: %d", name, int(self._remaining))

    # -- queueing --------------------------------------------------------

    def _queue(self, order: CharacterOrder) -> None:
        self._orders.append(order)

    def add_move(self, coord: MapCoord) -> None:
        self._queue(CharacterOrder.move(coord))

    def add_fight(self) -> None:
        self._queue(CharacterOrder.fight())

    def add_rest(self) -> None:
        self._queue(CharacterOrder.rest())

    def add_craft(self, item: ItemOrder) -> None:
        self._queue(CharacterOrder.craft(item))

    def add_use_item(self, item: ItemOrder) -> None:
        self._queue(CharacterOrder.use_item(item))

    def add_unequip_item(self, slot: str) -> None:
        self._queue(CharacterOrder.unequip_item(slot))

    def add_equip_item(self, slot: str, item_code: str) -> None:
        self._queue(CharacterOrder.equip_item(slot, item_code))

    def add_gathering(self) -> None:
        self._queue(CharacterOrder.gathering())

    def add_recycle_item(self, item: ItemOrder) -> None:
        self._queue(CharacterOrder.recycling(item))

    def add_task_new(self) -> None:
        self._queue(CharacterOrder.task_new())

    def add_task_trade(self, item: ItemOrder) -> None:
        self._queue(CharacterOrder.task_trade(item))

    def add_task_complete(self) -> None:
        self._queue(CharacterOrder.task_complete())

    def add_deposit_item(self, item: ItemOrder) -> None:
        self._queue(CharacterOrder.deposit_item(item))

    def add_withdraw_item(self, item: ItemOrder) -> None:
        self._queue(CharacterOrder.withdraw_item(item))

    def add_withdraw_gold(self, amount: int) -> None:
        self._queue(CharacterOrder.withdraw_gold(amount))

    def add_buy_item(self, item: ItemOrder) -> None:
        self._queue(CharacterOrder.buy_item(item))

    # -- execution -------------------------------------------------------

    def _perform(self, order: CharacterOrder) -> tuple[int, Any] | None:
        client, name = self._client, self.name
        match order.type:
            case CharacterOrderType.MOVE:
                if not self.should_move(order.coord):
                    return None
                return client.move(name, order.coord)
            case CharacterOrderType.FIGHT:
                cooldown, states = client.fight(name)
                log.debug("raw fight state: %r", states)
                return cooldown, states[0]
            case CharacterOrderType.REST:
                return client.rest(name)
            case CharacterOrderType.CRAFT:
                return client.craft(name, order.item)
            case CharacterOrderType.USE_ITEM:
                return client.use_item(name, order.item)
            case CharacterOrderType.UNEQUIP_ITEM:
                return client.unequip_item(name, order.slot)
            case CharacterOrderType.EQUIP_ITEM:
                return client.equip_item(name, order.slot, order.item.code)
            case CharacterOrderType.GATHERING:
                return client.gather(name)
            case CharacterOrderType.RECYCLING:
                return client.recycle(name, order.item)
            case CharacterOrderType.TASK_NEW:
                return client.task_new(name)
            case CharacterOrderType.TASK_TRADE:
                return client.task_trade(name, order.item)
            case CharacterOrderType.TASK_COMPLETE:
                return client.task_complete(name)
            case CharacterOrderType.DEPOSIT_ITEM:
                return client.deposit_item(name, order.item)
            case CharacterOrderType.WITHDRAW_ITEM:
                return client.withdraw_item(name, order.item)
            case CharacterOrderType.DEPOSIT_GOLD:
                return client.deposit_gold(name, order.item.quantity)
            case CharacterOrderType.WITHDRAW_GOLD:
                return client.withdraw_gold(name, order.item.quantity)
            case CharacterOrderType.BUY_ITEM:
                return client.buy_item(name, order.item)
        return None

    def update(self, elapsed_time: float) -> None:
        """Advance the cooldown and send the next order once it has run out."""
        self._remaining -= elapsed_time
        if self._remaining >= 0.0:
            return
        if self._current >= len(self._orders):
            self._current = 0
            self._orders.clear()
            return

        order = self._orders[self._current]
        try:
            result = self._perform(order)
            if result is not None:
                cooldown, state = result
                self._remaining = float(cooldown)
                self.data = state
            if order.type in _BANK_ORDERS:
                self._bank.update_cache()
            self._current += 1
            self._remaining += COOLDOWN_MARGIN
            log.info("'%s' cooldown %d (%s)", self.name, int(self._remaining), order)
        except Exception:
            log.exception("'%s' failed on %s", self.name, order)
            raise

        self._position = MapCoord(int(self.data["x"]), int(self.data["y"]))

    def is_empty(self) -> bool:
        """True when nothing is queued and the cooldown has run out."""
        return not self._orders and self._remaining < 0.0

    def should_move(self, target: MapCoord) -> bool:
        return self._position != target

    def distance(self, target: MapCoord) -> int:
        """Manhattan distance from the character to ``target``."""
        return abs(target.x - self._position.x) + abs(target.y - self._position.y)