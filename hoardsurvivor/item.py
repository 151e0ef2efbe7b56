"""Items dropped by enemies and picked up by the player."""

from __future__ import annotations

import pygame

from .collision import CollisionCircle
from .objects import GameObject, ItemType

ITEM_RADIUS = 32.0
_DRAW_RADIUS = 24

_WEIGHTS = {
    ItemType.HP_RECOVERY: 1.0,
    ItemType.MAX_HP_UP: 2.0,
}

_COLORS = {
    ItemType.HP_RECOVERY: pygame.Color(220, 60, 80),
    ItemType.MAX_HP_UP: pygame.Color(240, 200, 40),
}


class Item(GameObject):
    """An item lying in the world until it is picked up."""

    def __init__(self, position, item_type) -> None:
        super().__init__("Item", position)
        self._item_type = ItemType(item_type)
        self.weight = _WEIGHTS[self._item_type]
        self._picked_up = False
        self.collision = CollisionCircle(self.position, ITEM_RADIUS)

    def __repr__(self) -> str:
        return f"Item({self._item_type.name}, ({self.position.x}, {self.position.y}))"

    @property
    def item_type(self) -> ItemType:
        return self._item_type

    @property
    def color(self) -> pygame.Color:
        return pygame.Color(_COLORS[self._item_type])

    @property
    def picked_up(self) -> bool:
        return self._picked_up

    def update(self) -> None:
        """Items stay where they are."""

    def draw(self, surface) -> None:
        pygame.draw.circle(surface, self.color, self.position, _DRAW_RADIUS)

    def is_discard(self) -> bool:
        return self._picked_up

    def pick_up(self) -> None:
        """Mark the item as taken so the world removes it."""
        self._picked_up = True