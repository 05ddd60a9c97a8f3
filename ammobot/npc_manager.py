"""What non-player characters buy and sell, and where they stand."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping

from .types import MapCoord


class TradeCurrency(Enum):
    GOLD = "gold"
    TASK_COIN = "tasks_coin"


@dataclass(frozen=True)
class NPCItemTrade:
    """A price offered by a merchant for one item."""

    npc: str
    currency: TradeCurrency
    amount: int


class NPCManager:
    """Looks up merchants' prices and their known locations."""

    def __init__(self, locations: Mapping[str, MapCoord] | None = None) -> None:
        self._locations = dict(locations or {})
        self._selling: dict[str, NPCItemTrade] = {}
        self._buying: dict[str, NPCItemTrade] = {}

    def initialize(self, client: Any) -> None:
        self.load(client.get_npc_items())

    def load(self, items: Iterable[Any]) -> None:
        """Record buy and sell prices; the first entry for an item wins."""
        for entry in items:
            code = str(entry["code"])
            npc = str(entry["npc"])
            currency = TradeCurrency.GOLD if entry["currency"] == "gold" else TradeCurrency.TASK_COIN
            if entry.get("buy_price") is not None:
                self._buying.setdefault(code, NPCItemTrade(npc, currency, int(entry["buy_price"])))
            if entry.get("sell_price") is not None:
                self._selling.setdefault(code, NPCItemTrade(npc, currency, int(entry["sell_price"])))

    def buyer(self, item_code: str) -> NPCItemTrade | None:
        """The buy-price entry for ``item_code``, or None."""
        return self._buying.get(item_code)

    def seller(self, item_code: str) -> NPCItemTrade | None:
        """The sell-price entry for ``item_code``, or None."""
        return self._selling.get(item_code)

    def coords(self, npc: str) -> MapCoord | None:
        """Where ``npc`` stands, if its location was given."""
        return self._locations.get(npc)