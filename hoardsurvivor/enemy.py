"""Enemies that chase the player and drop items when defeated."""

from __future__ import annotations

import random

import pygame

from .collision import CollisionCircle
from .item import Item
from .objects import GameObject, ItemType

ENEMY_RADIUS = 32.0
ENEMY_SPEED = 1.5
ENEMY_HP = 3
_DRAW_RADIUS = 28
_COLOR = pygame.Color(90, 40, 140)


class Enemy(GameObject):
    """Walks towards the player; leaves a random item behind when it dies."""

    def __init__(self, position=(0.0, 0.0), rng: random.Random | None = None) -> None:
        super().__init__("Enemy", position)
        self.hp = ENEMY_HP
        self._rng = rng if rng is not None else random.Random()
        self._dropped = False
        self.collision = CollisionCircle(self.position, ENEMY_RADIUS)

    def __repr__(self) -> str:
        return f"Enemy(hp={self.hp}, ({self.position.x}, {self.position.y}))"

    def update(self) -> None:
        player = self.world.find_by_tag("Player") if self.world is not None else None
        if player is None:
            return
        offset = player.position - self.position
        if offset.length_squared() > 0:
            offset.normalize_ip()
        self.position += offset * ENEMY_SPEED
        self.collision.set_pos(self.position)

    def draw(self, surface) -> None:
        pygame.draw.circle(surface, _COLOR, self.position, _DRAW_RADIUS)

    def is_discard(self) -> bool:
        """True once hit points fall below zero; drops an item the first time."""
        if self.hp >= 0:
            return False
        if not self._dropped and self.world is not None:
            self._dropped = True
            item_type = ItemType(self._rng.randint(0, len(ItemType) - 1))
            self.world.accept(Item(self.position, item_type))
        return True

    def damage(self, attack) -> None:
        self.hp -= attack.value