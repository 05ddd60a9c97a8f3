"""Monster statistics and loot tables."""

from __future__ import annotations

from typing import Any, Mapping

from .types import Loot, MapCoord


class MonsterManager:
    """Holds every monster's data and what it drops."""

    def __init__(self, map_manager: Any) -> None:
        self._map_manager = map_manager
        self._monsters: dict[str, Any] = {}
        self._loot: dict[str, list[Loot]] = {}

    def initialize(self, client: Any) -> None:
        self.load(client.get_monsters())

    def load(self, monsters: Mapping[str, Any]) -> None:
        """Replace the known monsters with ``monsters``, keyed by code."""
        self._monsters = dict(monsters)
        self._loot = {}
        for code, monster in self._monsters.items():
            for drop in monster.get("drops") or []:
                self._loot.setdefault(code, []).append(Loot.from_dict(drop))

    def monster_list(self) -> list[str]:
        """Monster codes, strongest (highest level) first."""
        return sorted(sorted(self._monsters), key=lambda code: -int(self._monsters[code]["level"]))

    def _elements(self, monster: str, prefix: str) -> tuple[int, int, int, int]:
        data = self._monsters[monster]
        return (
            int(data[f"{prefix}_fire"]),
            int(data[f"{prefix}_water"]),
            int(data[f"{prefix}_earth"]),
            int(data[f"{prefix}_air"]),
        )

    def monster_hp(self, monster: str) -> int:
        return int(self._monsters[monster]["hp"])

    def monster_attack(self, monster: str) -> tuple[int, int, int, int]:
        return self._elements(monster, "attack")

    def monster_resistance(self, monster: str) -> tuple[int, int, int, int]:
        return self._elements(monster, "res")

    def monster_coord(self, monster: str) -> MapCoord | None:
        return self._map_manager.monster_coord(monster)

    def monster_loot(self, monster: str) -> list[Loot]:
        """What ``monster`` may drop; empty for unknown monsters."""
        return list(self._loot.get(monster, []))