"""The player: movement, attacks and the item inventory."""

from __future__ import annotations

import pygame
from pygame.math import Vector2

from .attack import Attack
from .collision import CollisionCircle
from .inventory import Inventory
from .item import Item
from .objects import DOWN, LEFT, RIGHT, UP, Controls, GameObject, ItemType

MAX_MOVE_SPEED = 5.0
ACCELERATION_STEP = 13.0 / 60.0
PLAYER_RADIUS = 32.0
INVENTORY_MAX_WEIGHT = 20.0
PLAYER_HP = 10
ATTACK_REACH = 32.0
_DRAW_RADIUS = 28
_COLOR = pygame.Color(40, 90, 200)


class Player(GameObject):
    """The character controlled by the keyboard and mouse."""

    def __init__(self, position=(0.0, 0.0)) -> None:
        super().__init__("Player", position)
        self.velocity_goal = Vector2(0.0, 0.0)
        self.inventory = Inventory()
        self.hp = PLAYER_HP
        self.max_hp = PLAYER_HP
        self.collision = CollisionCircle(self.position, PLAYER_RADIUS)

    def __repr__(self) -> str:
        return f"Player(hp={self.hp}/{self.max_hp}, ({self.position.x}, {self.position.y}))"

    def _controls(self) -> Controls:
        return self.world.controls if self.world is not None else Controls()

    def accelerate(self, goal: float, current: float) -> float:
        """Move ``current`` one acceleration step towards ``goal``."""
        difference = goal - current
        if difference > ACCELERATION_STEP:
            return current + ACCELERATION_STEP
        if difference < -ACCELERATION_STEP:
            return current - ACCELERATION_STEP
        return goal

    def read_movement(self) -> None:
        """Set the target velocity and facing from the held and released keys."""
        controls = self._controls()
        if UP in controls.held:
            self.velocity_goal.y = -MAX_MOVE_SPEED
            self.direction = Vector2(0.0, -1.0)
        if LEFT in controls.held:
            self.velocity_goal.x = -MAX_MOVE_SPEED
            self.direction = Vector2(-1.0, 0.0)
        if DOWN in controls.held:
            self.velocity_goal.y = MAX_MOVE_SPEED
            self.direction = Vector2(0.0, 1.0)
        if RIGHT in controls.held:
            self.velocity_goal.x = MAX_MOVE_SPEED
            self.direction = Vector2(1.0, 0.0)
        if UP in controls.released or DOWN in controls.released:
            self.velocity_goal.y = 0.0
        if LEFT in controls.released or RIGHT in controls.released:
            self.velocity_goal.x = 0.0

    def update(self) -> None:
        self.read_movement()
        self.velocity.x = self.accelerate(self.velocity_goal.x, self.velocity.x)
        self.velocity.y = self.accelerate(self.velocity_goal.y, self.velocity.y)
        self.position += self.velocity
        self.collision.set_pos(self.position)
        if self._controls().left_click and self.world is not None:
            self.world.accept(Attack(self.position + self.direction * ATTACK_REACH))
        self.attack()
        self.pick_item()

    def draw(self, surface) -> None:
        pygame.draw.circle(surface, _COLOR, self.position, _DRAW_RADIUS)

    def is_discard(self) -> bool:
        return self.hp < 0

    def add_to_inventory(self, item: Item) -> bool:
        """Carry ``item`` unless it would exceed the weight limit."""
        if self.total_weight() + item.weight <= INVENTORY_MAX_WEIGHT:
            self.inventory.add(item)
            return True
        return False

    def count_item(self, item_type: ItemType) -> int:
        return self.inventory.count(item_type)

    def total_weight(self) -> float:
        return self.inventory.total_weight()

    def recover_hp(self, amount: int) -> None:
        """Heal up to the maximum, using a recovery item; does nothing at full health."""
        if self.hp != self.max_hp:
            self.hp = min(self.max_hp, self.hp + amount)
            self.inventory.use(ItemType.HP_RECOVERY)

    def raise_max_hp(self) -> None:
        self.max_hp += 1
        self.inventory.use(ItemType.MAX_HP_UP)

    def drop_item(self, item_type: ItemType) -> None:
        """Take an item out of the inventory and put it in the world at the player."""
        self.inventory.use(item_type)
        if self.world is not None:
            self.world.accept(Item(self.position, item_type))

    def attack(self) -> GameObject | None:
        """On a left click, damage the enemy touched by the current attack."""
        if not self._controls().left_click or self.world is None:
            return None
        attacker = self.world.find_by_tag("Attack")
        if attacker is None or attacker.collision is None:
            return None
        target = self.world.overlapping_enemy(attacker.collision)
        if target is not None:
            target.damage(attacker)
        return target

    def pick_item(self) -> Item | None:
        """On a right click, pick up an item the player is touching."""
        if not self._controls().right_click or self.world is None:
            return None
        item = self.world.overlapping_item(self.collision)
        if item is not None and self.add_to_inventory(item):
            item.pick_up()
            return item
        return None