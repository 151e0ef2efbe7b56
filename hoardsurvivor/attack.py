"""A short-lived attack hitbox spawned by the player."""

from __future__ import annotations

import pygame

from .collision import CollisionCircle
from .objects import GameObject

ATTACK_RADIUS = 32.0
_DRAW_RADIUS = 20
_COLOR = pygame.Color(255, 150, 30)


class Attack(GameObject):
    """A hitbox that exists for a single frame and deals one point of damage."""

    def __init__(self, position) -> None:
        super().__init__("Attack", position)
        self.collision = CollisionCircle(self.position, ATTACK_RADIUS)

    @property
    def value(self) -> int:
        """Damage dealt by this attack."""
        return 1

    @property
    def color(self) -> pygame.Color:
        return pygame.Color(_COLOR)

    def update(self) -> None:
        """Attacks do not move."""

    def draw(self, surface) -> None:
        pygame.draw.circle(surface, self.color, self.position, _DRAW_RADIUS)

    def is_discard(self) -> bool:
        return True