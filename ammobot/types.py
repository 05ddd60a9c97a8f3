"""Plain value types shared by the game client and the planning logic."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class MapCoord:
    """A tile position on the world map."""

    x: int = 0
    y: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MapCoord:
        return cls(int(data["x"]), int(data["y"]))


@dataclass(frozen=True)
class ItemOrder:
    """An item code together with a quantity."""

    code: str = ""
    quantity: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "quantity": self.quantity}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ItemOrder:
        return cls(str(data["code"]), int(data["quantity"]))


@dataclass(frozen=True)
class EquipOrder:
    """Request body for equipping an item into a slot."""

    code: str
    slot: str
    quantity: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "slot": self.slot, "quantity": self.quantity}


@dataclass(frozen=True)
class UnequipOrder:
    """Request body for emptying an equipment slot."""

    slot: str
    quantity: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {"slot": self.slot, "quantity": self.quantity}


@dataclass
class Recipe:
    """How an item is crafted: the skill needed and the ingredients."""

    skill_name: str
    skill_level: int
    target_item: str
    required_items: list[ItemOrder] = field(default_factory=list)


@dataclass(frozen=True)
class GatheringRequirement:
    """The skill level needed to gather a resource."""

    skill_name: str
    skill_level: int


@dataclass(frozen=True)
class Loot:
    """One possible drop of a monster."""

    code: str
    rate: int
    min_quantity: int
    max_quantity: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Loot:
        return cls(
            str(data["code"]),
            int(data["rate"]),
            int(data["min_quantity"]),
            int(data["max_quantity"]),
        )