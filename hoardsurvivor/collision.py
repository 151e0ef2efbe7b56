"""Collision shapes used to detect overlapping game objects."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pygame.math import Vector2


class Collision(ABC):
    """A shape that can tell whether it overlaps another shape.

    A shape without its own geometry is a point of zero radius at the origin.
    """

    @property
    def center(self) -> Vector2:
        return Vector2(0.0, 0.0)

    @property
    def radius(self) -> float:
        return 0.0

    def set_pos(self, pos) -> None:
        """Move the shape; shapes without a position ignore this."""

    @abstractmethod
    def overlaps(self, other: Collision) -> bool:
        """Return True if this shape touches or overlaps ``other``."""


class CollisionCircle(Collision):
    """A circle with a movable centre and a fixed radius."""

    def __init__(self, pos, radius: float) -> None:
        self._center = Vector2(pos)
        self._radius = float(radius)

    def __repr__(self) -> str:
        return f"CollisionCircle(({self._center.x}, {self._center.y}), {self._radius})"

    @property
    def center(self) -> Vector2:
        return Vector2(self._center)

    @property
    def radius(self) -> float:
        return self._radius

    def set_pos(self, pos) -> None:
        self._center = Vector2(pos)

    def overlaps(self, other: Collision) -> bool:
        reach = self._radius + other.radius
        return self._center.distance_squared_to(other.center) <= reach * reach