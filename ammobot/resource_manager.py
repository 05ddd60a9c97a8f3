"""Where each gatherable resource can be found on the map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .types import MapCoord


@dataclass(frozen=True)
class _Spot:
    coord: MapCoord
    rate: int
    level: int


class ResourceManager:
    """Maps resource codes to the spots that drop them."""

    def __init__(self) -> None:
        self._spots: dict[str, list[_Spot]] = {}

    def initialize(self, client: Any, map_manager: Any) -> None:
        self.load(client.get_resource_spots(), map_manager)

    def load(self, spots: Iterable[Any], map_manager: Any) -> None:
        """Register the drops of each spot that appears on the map."""
        for spot in spots:
            coord = map_manager.spot_coord(spot["code"])
            if coord is None:
                continue
            level = int(spot["level"])
            for drop in spot["drops"]:
                self._spots.setdefault(drop["code"], []).append(
                    _Spot(coord, int(drop["rate"]), level)
                )

    def resource_coord(self, character: Any, resource: str) -> MapCoord | None:
        """The spot dropping ``resource`` nearest to ``character``, or None."""
        spots = self._spots.get(resource)
        if not spots:
            return None
        return min(spots, key=lambda spot: character.distance(spot.coord)).coord