"""An invisible object that keeps adding enemies to the world."""

from __future__ import annotations

import random

from .enemy import Enemy
from .objects import GameObject

SPAWN_INTERVAL = 60 * 3


class EnemySpawner(GameObject):
    """Spawns an enemy at its position on the first frame and every interval after."""

    def __init__(
        self,
        position=(0.0, 0.0),
        interval: int = SPAWN_INTERVAL,
        rng: random.Random | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        super().__init__("", position)
        self.interval = interval
        self.frame_counter = 0
        self._rng = rng

    def update(self) -> None:
        if self.frame_counter % self.interval == 0 and self.world is not None:
            self.world.accept(Enemy(self.position, rng=self._rng))
        self.frame_counter += 1

    def draw(self, surface) -> None:
        """The spawner is invisible."""

    def is_discard(self) -> bool:
        return False