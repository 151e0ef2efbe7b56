"""The world: the collection of live game objects."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from .objects import Controls

if TYPE_CHECKING:
    from .collision import Collision
    from .objects import GameObject


class World:
    """Holds game objects in the order they were added.

    ``controls`` is the input state for the current frame; objects read it
    through their world.
    """

    def __init__(self) -> None:
        self._objects: list[GameObject] = []
        self.controls = Controls()

    def __iter__(self) -> Iterator[GameObject]:
        return iter(list(self._objects))

    def __len__(self) -> int:
        return len(self._objects)

    @property
    def objects(self) -> tuple[GameObject, ...]:
        return tuple(self._objects)

    def accept(self, obj: GameObject) -> None:
        """Add an object to the world and attach it."""
        obj.attach(self)
        self._objects.append(obj)

    def clean_up(self) -> None:
        """Remove every object that asks to be discarded.

        Objects added while this runs are checked as well.
        """
        kept: list[GameObject] = []
        while self._objects:
            batch, self._objects = self._objects, []
            for obj in batch:
                if not obj.is_discard():
                    kept.append(obj)
        self._objects = kept

    def update(self) -> None:
        """Update every object, including ones added during the pass."""
        for obj in self._objects:
            obj.update()

    def draw(self, surface) -> None:
        for obj in self._objects:
            obj.draw(surface)

    def find_by_tag(self, tag: str) -> GameObject | None:
        """Return the first object with the given tag, or None."""
        return next((obj for obj in self._objects if obj.tag == tag), None)

    def _overlapping(self, tag: str, collision: Collision) -> GameObject | None:
        return next(
            (
                obj
                for obj in self._objects
                if obj.tag == tag
                and obj.collision is not None
                and obj.collision.overlaps(collision)
            ),
            None,
        )

    def overlapping_enemy(self, collision: Collision) -> GameObject | None:
        """Return the first enemy whose shape overlaps ``collision``."""
        return self._overlapping("Enemy", collision)

    def overlapping_item(self, collision: Collision) -> GameObject | None:
        """Return the first item whose shape overlaps ``collision``."""
        return self._overlapping("Item", collision)