"""Positions of monsters and resource spots on the world map."""

from __future__ import annotations

from typing import Any, Iterable

from .types import MapCoord


class MapManager:
    """Indexes map tiles by the monster or resource they hold."""

    def __init__(self, client: Any) -> None:
        self._client = client
        self._monsters: dict[str, list[MapCoord]] = {}
        self._spots: dict[str, list[MapCoord]] = {}

    def initialize(self) -> None:
        self.load(self._client.get_maps())

    def load(self, maps: Iterable[Any]) -> None:
        """Record the tiles holding monsters and resources."""
        for tile in maps:
            content = (tile.get("interactions") or {}).get("content")
            if content is None:
                continue
            coord = MapCoord(int(tile["x"]), int(tile["y"]))
            if content["type"] == "monster":
                self._monsters.setdefault(content["code"], []).append(coord)
            if content["type"] == "resource":
                self._spots.setdefault(content["code"], []).append(coord)

    def monster_coord(self, monster: str) -> MapCoord | None:
        """The first tile where ``monster`` lives, or None."""
        coords = self._monsters.get(monster)
        return coords[0] if coords else None

    def spot_coord(self, resource: str) -> MapCoord | None:
        """The first tile holding resource spot ``resource``, or None."""
        coords = self._spots.get(resource)
        return coords[0] if coords else None