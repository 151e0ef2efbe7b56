import pytest
from pygame.math import Vector2

from hoardsurvivor.attack import Attack
from hoardsurvivor.enemy import ENEMY_HP, Enemy
from hoardsurvivor.item import Item
from hoardsurvivor.objects import RIGHT, UP, Controls, ItemType
from hoardsurvivor.player import (
    ACCELERATION_STEP,
    ATTACK_REACH,
    INVENTORY_MAX_WEIGHT,
    MAX_MOVE_SPEED,
    PLAYER_HP,
    Player,
)
from hoardsurvivor.world import World


def make_player(position=(100.0, 100.0)):
    world = World()
    player = Player(position)
    world.accept(player)
    return world, player


def test_accelerate_steps_toward_goal():
    player = Player()
    assert player.accelerate(MAX_MOVE_SPEED, 0.0) == pytest.approx(ACCELERATION_STEP)
    assert player.accelerate(-MAX_MOVE_SPEED, 0.0) == pytest.approx(-ACCELERATION_STEP)
    assert player.accelerate(0.1, 0.0) == 0.1


def test_read_movement_held_and_released():
    world, player = make_player()
    world.controls = Controls(held=frozenset({UP}))
    player.read_movement()
    assert player.velocity_goal == Vector2(0.0, -MAX_MOVE_SPEED)
    assert player.direction.x == 0.0 and player.direction.y < 0
    world.controls = Controls(released=frozenset({UP}))
    player.read_movement()
    assert player.velocity_goal == Vector2(0.0, 0.0)


def test_update_moves_one_acceleration_step():
    world, player = make_player()
    world.controls = Controls(held=frozenset({RIGHT}))
    player.update()
    assert player.position.x == pytest.approx(100.0 + ACCELERATION_STEP)
    assert player.position.y == pytest.approx(100.0)
    assert player.collision.center == player.position


def test_left_click_spawns_attack_in_front():
    world, player = make_player()
    player.direction = Vector2(1.0, 0.0)
    world.controls = Controls(left_click=True)
    player.update()
    attacks = [obj for obj in world if isinstance(obj, Attack)]
    assert len(attacks) == 1
    assert attacks[0].position == player.position + Vector2(ATTACK_REACH, 0.0)


def test_attack_damages_touching_enemy():
    world, player = make_player()
    player.direction = Vector2(1.0, 0.0)
    enemy = Enemy(player.position + Vector2(ATTACK_REACH, 0.0))
    world.accept(enemy)
    world.controls = Controls(left_click=True)
    player.update()
    assert enemy.hp == ENEMY_HP - 1


def test_attack_misses_distant_enemy():
    world, player = make_player()
    enemy = Enemy((1000.0, 1000.0))
    world.accept(enemy)
    world.controls = Controls(left_click=True)
    player.update()
    assert enemy.hp == ENEMY_HP


def test_right_click_picks_up_touching_item():
    world, player = make_player()
    item = Item(player.position, ItemType.HP_RECOVERY)
    world.accept(item)
    world.controls = Controls(right_click=True)
    player.update()
    assert item.picked_up
    assert player.count_item(ItemType.HP_RECOVERY) == 1
    world.clean_up()
    assert item not in world.objects


def test_inventory_weight_limit():
    player = Player()
    heavy = int(INVENTORY_MAX_WEIGHT // 2)
    for _ in range(heavy):
        assert player.add_to_inventory(Item((0, 0), ItemType.MAX_HP_UP))
    assert not player.add_to_inventory(Item((0, 0), ItemType.HP_RECOVERY))
    assert player.total_weight() == INVENTORY_MAX_WEIGHT
    assert player.count_item(ItemType.MAX_HP_UP) == heavy


def test_recover_hp_at_full_health_keeps_item():
    player = Player()
    player.add_to_inventory(Item((0, 0), ItemType.HP_RECOVERY))
    player.recover_hp(1)
    assert player.hp == PLAYER_HP
    assert player.count_item(ItemType.HP_RECOVERY) == 1


def test_recover_hp_uses_item():
    player = Player()
    player.add_to_inventory(Item((0, 0), ItemType.HP_RECOVERY))
    player.hp = PLAYER_HP - 3
    player.recover_hp(1)
    assert player.hp == PLAYER_HP - 2
    assert player.count_item(ItemType.HP_RECOVERY) == 0


def test_recover_hp_capped_at_max():
    player = Player()
    player.hp = PLAYER_HP - 1
    player.recover_hp(5)
    assert player.hp == player.max_hp


def test_raise_max_hp_uses_item():
    player = Player()
    player.add_to_inventory(Item((0, 0), ItemType.MAX_HP_UP))
    player.raise_max_hp()
    assert player.max_hp == PLAYER_HP + 1
    assert player.count_item(ItemType.MAX_HP_UP) == 0


def test_drop_item_puts_it_in_world():
    world, player = make_player()
    player.add_to_inventory(Item((0, 0), ItemType.MAX_HP_UP))
    player.drop_item(ItemType.MAX_HP_UP)
    assert player.count_item(ItemType.MAX_HP_UP) == 0
    dropped = [obj for obj in world if isinstance(obj, Item)]
    assert len(dropped) == 1
    assert dropped[0].item_type is ItemType.MAX_HP_UP
    assert dropped[0].position == player.position


def test_discarded_only_below_zero_hp():
    player = Player()
    player.hp = 0
    assert not player.is_discard()
    player.hp = -1
    assert player.is_discard()