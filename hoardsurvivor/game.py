"""The game loop: the world, the pause menu and the window."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

import pygame
from pygame.math import Vector2

from .item import Item
from .objects import DOWN, LEFT, RIGHT, UP, Controls, ItemType
from .player import INVENTORY_MAX_WEIGHT, Player
from .spawner import EnemySpawner
from .world import World

SCREEN_SIZE = (800, 600)
FPS = 60
SPAWNER_OFFSET = 64.0
BACKGROUND = pygame.Color(153, 204, 178)
MENU_TOP = pygame.Color(153, 127, 76)
MENU_BOTTOM = pygame.Color(51, 127, 76)
HP_BUTTON = pygame.Rect(340, 40, 420, 100)
MAX_HP_BUTTON = pygame.Rect(340, 160, 420, 100)

_MENU_RECT = pygame.Rect(0, 0, 800, 800)
_BUTTON_FILL = pygame.Color(76, 127, 153, 204)
_BUTTON_HOVER = pygame.Color(76, 127, 229, 204)
_BUTTON_FRAME = pygame.Color(127, 178, 255)
_DISABLED_FILL = pygame.Color(0, 0, 0, 102)
_DISABLED_FRAME = pygame.Color(127, 127, 127)
_WHITE = pygame.Color(255, 255, 255)

_KEY_DIRECTIONS = {
    pygame.K_w: UP,
    pygame.K_a: LEFT,
    pygame.K_s: DOWN,
    pygame.K_d: RIGHT,
}


@dataclass(frozen=True)
class _MenuButton:
    rect: pygame.Rect
    item_type: ItemType
    name: str
    description: str


_BUTTONS = (
    _MenuButton(HP_BUTTON, ItemType.HP_RECOVERY, "HP Recovery", "Restores 1 HP  Weight: 1"),
    _MenuButton(MAX_HP_BUTTON, ItemType.MAX_HP_UP, "Max HP Up", "Raises max HP by 1  Weight: 2"),
)


class Game:
    """Owns the world and the player and switches between play and the pause menu."""

    def __init__(self, size=SCREEN_SIZE, rng: random.Random | None = None) -> None:
        width, height = size
        self.size = (width, height)
        self.world = World()
        self.player = Player(Vector2(width, height) / 2)
        self.world.accept(self.player)
        self.world.accept(EnemySpawner((width + SPAWNER_OFFSET, 0.0), rng=rng))
        self.paused = False
        self._mouse = (0.0, 0.0)
        self._fonts: dict[int, pygame.font.Font] = {}
        self._icons = {kind: Item((0.0, 0.0), kind).color for kind in ItemType}

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def update(self, controls: Controls) -> None:
        """Advance one frame with the given input."""
        self.world.controls = controls
        self._mouse = controls.mouse
        if not self.paused:
            self.world.update()
            if controls.pause:
                self.pause()
        else:
            self.handle_menu(controls)
            if controls.resume:
                self.resume()
        self.world.clean_up()

    def handle_menu(self, controls: Controls) -> ItemType | None:
        """Use (left click) or drop (right click) the item under the mouse.

        Returns the kind of item acted on, or None.
        """
        mouse = (int(controls.mouse[0]), int(controls.mouse[1]))
        for button in _BUTTONS:
            if self.player.count_item(button.item_type) <= 0:
                continue
            if not button.rect.collidepoint(mouse):
                continue
            if controls.left_click:
                if button.item_type is ItemType.HP_RECOVERY:
                    self.player.recover_hp(1)
                else:
                    self.player.raise_max_hp()
                return button.item_type
            if controls.right_click:
                self.player.drop_item(button.item_type)
                return button.item_type
        return None

    def draw(self, surface) -> None:
        surface.fill(BACKGROUND)
        if self.paused:
            self._draw_menu(surface)
        else:
            self.world.draw(surface)

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _text(self, surface, text, size: int, **anchor) -> None:
        rendered = self._font(size).render(str(text), True, _WHITE)
        surface.blit(rendered, rendered.get_rect(**anchor))

    @staticmethod
    def _fill(surface, rect: pygame.Rect, color: pygame.Color) -> None:
        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        panel.fill(color)
        surface.blit(panel, rect.topleft)

    def _draw_menu(self, surface) -> None:
        last = _MENU_RECT.height - 1
        for y in range(_MENU_RECT.height):
            color = MENU_TOP.lerp(MENU_BOTTOM, y / last)
            pygame.draw.line(surface, color, (_MENU_RECT.left, y), (_MENU_RECT.right - 1, y))
        for button in _BUTTONS:
            self._draw_button(surface, button)
        weight_row = 400
        self._text(surface, "Weight", 30, topleft=(400, weight_row))
        self._text(surface, f"{self.player.total_weight():g}", 30, topleft=(500, weight_row))
        self._text(surface, " / ", 30, topleft=(550, weight_row))
        self._text(surface, f"{INVENTORY_MAX_WEIGHT:g}", 30, topleft=(600, weight_row))
        self._text(
            surface, f"HP {self.player.max_hp} / {self.player.hp}", 50, topleft=(10, 100)
        )

    def _draw_button(self, surface, button: _MenuButton) -> None:
        rect = button.rect
        count = self.player.count_item(button.item_type)
        frame = rect.inflate(4, 4)
        if count > 0:
            mouse = (int(self._mouse[0]), int(self._mouse[1]))
            hovered = rect.collidepoint(mouse)
            self._fill(surface, rect, _BUTTON_HOVER if hovered else _BUTTON_FILL)
            pygame.draw.rect(surface, _BUTTON_FRAME, frame, width=4)
        else:
            self._fill(surface, rect, _DISABLED_FILL)
            pygame.draw.rect(surface, _DISABLED_FRAME, frame, width=4)
        pygame.draw.circle(surface, self._icons[button.item_type], (rect.x + 50, rect.y + 50), 16)
        self._text(surface, button.name, 30, topleft=(rect.x + 100, rect.y + 16))
        self._text(surface, button.description, 18, topleft=(rect.x + 102, rect.y + 60))
        self._text(surface, count, 50, midright=(rect.right - 20, rect.y + 50))


def _poll_controls() -> Controls | None:
    """Collect one frame of input; None when the window is closed."""
    released: set[str] = set()
    left_click = right_click = pause = resume = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return None
        if event.type == pygame.KEYUP and event.key in _KEY_DIRECTIONS:
            released.add(_KEY_DIRECTIONS[event.key])
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_e:
                pause = True
            elif event.key == pygame.K_SPACE:
                resume = True
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1:
                left_click = True
            elif event.button == 3:
                right_click = True
    pressed = pygame.key.get_pressed()
    held = frozenset(direction for key, direction in _KEY_DIRECTIONS.items() if pressed[key])
    return Controls(
        held=held,
        released=frozenset(released),
        left_click=left_click,
        right_click=right_click,
        pause=pause,
        resume=resume,
        mouse=tuple(float(v) for v in pygame.mouse.get_pos()),
    )


def main(argv=None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="hoardsurvivor", description="Survive the hoard.")
    parser.add_argument("--fps", type=int, default=FPS, help="frames per second")
    parser.add_argument("--seed", type=int, default=None, help="random seed for item drops")
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Hoard Survivor")
        clock = pygame.time.Clock()
        game = Game(SCREEN_SIZE, rng=random.Random(args.seed))
        while (controls := _poll_controls()) is not None:
            game.update(controls)
            game.draw(screen)
            pygame.display.flip()
            clock.tick(args.fps)
    finally:
        pygame.quit()
    return 0