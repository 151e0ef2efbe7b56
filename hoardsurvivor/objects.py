"""Base game object, item kinds and per-frame input state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from pygame.math import Vector2

if TYPE_CHECKING:
    from .collision import Collision
    from .world import World

UP = "up"
LEFT = "left"
DOWN = "down"
RIGHT = "right"


class ItemType(IntEnum):
    """Kinds of item an enemy can drop."""

    HP_RECOVERY = 0
    MAX_HP_UP = 1


@dataclass(frozen=True)
class Controls:
    """Input state for a single frame.

    ``held`` holds the movement directions being pressed, ``released`` those
    let go this frame. The click flags are set on the frame a mouse button
    is released.
    """

    held: frozenset[str] = frozenset()
    released: frozenset[str] = frozenset()
    left_click: bool = False
    right_click: bool = False
    pause: bool = False
    resume: bool = False
    mouse: tuple[float, float] = (0.0, 0.0)


class GameObject(ABC):
    """Something that lives in a world, updates and draws each frame."""

    def __init__(self, tag: str = "", position=(0.0, 0.0)) -> None:
        self.tag = tag
        self.world: World | None = None
        self.position = Vector2(position)
        self.collision: Collision | None = None
        self.forward = Vector2(1.0, 0.0)
        self.direction = Vector2(0.0, 0.0)
        self.velocity = Vector2(0.0, 0.0)

    def attach(self, world: World) -> None:
        """Record the world this object belongs to."""
        self.world = world

    @property
    def item_type(self) -> ItemType | None:
        """The kind of item this object is, or None if it is not an item."""
        return None

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    @abstractmethod
    def draw(self, surface) -> None:
        """Draw the object onto a pygame surface."""

    @abstractmethod
    def is_discard(self) -> bool:
        """Return True once the object should leave the world."""

    def damage(self, attack) -> None:
        """Take a hit; objects ignore hits unless they say otherwise."""