"""The player's inventory of carried items."""

from __future__ import annotations

from collections.abc import Iterator

from .item import Item
from .objects import ItemType


class Inventory:
    """Items carried by the player, in the order they were added."""

    def __init__(self) -> None:
        self._items: list[Item] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def add(self, item: Item) -> None:
        self._items.append(item)

    def count(self, item_type: ItemType) -> int:
        """Number of carried items of the given kind."""
        return sum(1 for item in self._items if item.item_type == item_type)

    def total_weight(self) -> float:
        return sum((item.weight for item in self._items), 0.0)

    def use(self, item_type: ItemType) -> bool:
        """Remove the first item of the given kind; False if there is none."""
        for item in self._items:
            if item.item_type == item_type:
                self._items.remove(item)
                return True
        return False