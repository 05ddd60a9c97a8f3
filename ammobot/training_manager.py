"""Picks the cheapest item to craft for levelling up a skill."""

from __future__ import annotations

from typing import Any

from .types import ItemOrder


class TrainingManager:
    """Queues one more craft of a training item suited to the skill level."""

    def __init__(self, item_crafting_manager: Any) -> None:
        self._item_crafting_manager = item_crafting_manager

    def train(self, character: Any, skill: str, skill_level: int) -> None:
        """Train ``skill``; skills without a training plan are left alone."""
        trainers = {
            "alchemy": self.train_alchemy,
            "fishing": self.train_fishing,
            "woodcutting": self.train_woodcutting,
            "weaponcrafting": self.train_weaponcrafting,
            "gearcrafting": self.train_gearcrafting,
            "jewelrycrafting": self.train_jewelrycrafting,
        }
        trainer = trainers.get(skill)
        if trainer is not None:
            trainer(character, skill_level)

    def train_woodcutting(self, character: Any, skill_level: int) -> None:
        if skill_level < 10:
            self._craft_one_more(character, "ash_wood")

    def train_fishing(self, character: Any, skill_level: int) -> None:
        if skill_level < 10:
            self._craft_one_more(character, "gudgeon")

    def train_weaponcrafting(self, character: Any, skill_level: int) -> None:
        self._craft_one_more(character, "copper_dagger")

    def train_gearcrafting(self, character: Any, skill_level: int) -> None:
        if skill_level < 5:
            self._craft_one_more(character, "wooden_shield")
        elif skill_level < 10:
            self._craft_one_more(character, "feather_coat")

    def train_jewelrycrafting(self, character: Any, skill_level: int) -> None:
        self._craft_one_more(character, "copper_ring")

    def train_alchemy(self, character: Any, skill_level: int) -> None:
        if skill_level < 5:
            self._craft_one_more(character, "sunflower")
        elif skill_level < 10:
            self._craft_one_more(character, "small_health_potion")

    def _craft_one_more(self, character: Any, item_code: str) -> None:
        target = ItemOrder(item_code, character.item_count(item_code) + 1)
        self._item_crafting_manager.make_craft_item(character, target)