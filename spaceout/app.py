"""The windowed front end: input, drawing and the main loop."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Sequence

import pygame

from spaceout.bodies import BodyKind
from spaceout.game import Game, SpaceScene
from spaceout.menu import MenuButton, MenuScreen
from spaceout.space import Camera
from spaceout.spaceship import Key
from spaceout.state import GameState, Interaction

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
DEFAULT_FPS = 60

CLEAR_COLOR = (43, 44, 47)
SHIP_LENGTH = 128.0

_KEYS = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
}

_BODY_LOOK = {
    BodyKind.BASE: ((60, 110, 200), 16.0),
    BodyKind.MOON: ((180, 180, 180), 16.0),
    BodyKind.SUN: ((250, 200, 40), 32.0),
}


def world_to_screen(
    camera: Camera, x: float, y: float, width: float, height: float
) -> tuple[float, float]:
    """Map a world point to window pixels; world y points up, screen y down."""
    if camera.scale <= 0.0:
        raise ValueError("camera scale must be positive")
    return (
        width / 2 + (x - camera.x) / camera.scale,
        height / 2 - (y - camera.y) / camera.scale,
    )


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"{text} is not a positive integer")
    return value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Read the command-line options."""
    parser = argparse.ArgumentParser(prog="spaceout", description="A small space game.")
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_HEIGHT)
    parser.add_argument("--fps", type=_positive_int, default=DEFAULT_FPS)
    parser.add_argument("--seed", type=int, default=None, help="seed for the starfield")
    parser.add_argument(
        "--frames", type=_positive_int, default=None, help="stop after this many frames"
    )
    return parser.parse_args(argv)


def _rgb(color: tuple[float, float, float]) -> tuple[int, int, int]:
    return tuple(round(max(0.0, min(1.0, c)) * 255) for c in color)


class _Renderer:
    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._fonts: dict[int, pygame.font.Font] = {}

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    def font(self, size: float) -> pygame.font.Font:
        key = round(size)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.Font(None, key)
        return self._fonts[key]

    def text(self, text, size, color, center) -> None:
        if not text:
            return
        image = self.font(size).render(text, True, color)
        self.surface.blit(image, image.get_rect(center=center))

    def splash(self, game: Game) -> None:
        width, height = self.size
        self.surface.fill((255, 255, 255))
        screen = game.splash
        if screen is None:
            return
        logo = pygame.Rect(0, 0, screen.logo_width, screen.logo_width)
        logo.center = (width // 2, height // 2 - 40)
        pygame.draw.rect(self.surface, (200, 200, 200), logo, border_radius=24)
        self.text(screen.text, screen.font_size * 1.5, (0, 0, 0), (width // 2, logo.bottom + 30))

    def menu(self, screen: MenuScreen, mouse, held) -> list[tuple[pygame.Rect, MenuButton]]:
        width, height = self.size
        self.surface.fill(_rgb(screen.background))
        y = 60
        for heading, size in zip(screen.headings, (80, 67)):
            self.text(heading, size, _rgb(screen.text_color), (width // 2, y + 40))
            y += 100
        hits: list[tuple[pygame.Rect, MenuButton]] = []
        choices = [b for b in screen.buttons if b.setting is not None]
        navigation = [b for b in screen.buttons if b.action is not None]
        if screen.label is not None:
            choice_width = 150 if len(choices) <= 3 else 30
            row_width = 260 + len(choices) * (choice_width + 40)
            x = (width - row_width) // 2
            self.text(screen.label, 33, _rgb(screen.text_color), (x + 130, y + 32))
            x += 260
            for button in choices:
                hits.append((pygame.Rect(x, y, choice_width, 65), button))
                x += choice_width + 40
            y += 105
        nav_width = 300 if screen.headings else 200
        for button in navigation:
            hits.append((pygame.Rect((width - nav_width) // 2, y, nav_width, 65), button))
            y += 105
        for rect, button in hits:
            interaction = Interaction.NONE
            if rect.collidepoint(mouse):
                interaction = Interaction.PRESSED if held else Interaction.HOVERED
            pygame.draw.rect(self.surface, _rgb(button.color(interaction)), rect)
            if button.icon is not None:
                icon = pygame.Rect(rect.x + 10, rect.centery - 15, 30, 30)
                pygame.draw.rect(self.surface, _rgb(screen.text_color), icon, 2)
            self.text(button.text, 33, _rgb(screen.text_color), rect.center)
        return hits

    def space(self, scene: SpaceScene) -> pygame.Rect | None:
        width, height = self.size
        camera = scene.camera
        self.surface.fill(CLEAR_COLOR)

        def to_screen(x, y):
            return world_to_screen(camera, x, y, width, height)

        for star in scene.stars:
            sx, sy = to_screen(star.x, star.y)
            side = max(1, round(star.size / camera.scale))
            pygame.draw.rect(self.surface, _rgb(star.color), (sx, sy, side, side))
        for body in (scene.base, scene.moon, scene.sun):
            color, radius = _BODY_LOOK[body.kind]
            center = to_screen(*body.position())
            world_radius = radius * body.transform.scale[0]
            pygame.draw.circle(
                self.surface, color, center, max(1, round(world_radius / camera.scale))
            )
            angle = body.transform.rotation
            edge = to_screen(
                body.transform.x + math.cos(angle) * world_radius,
                body.transform.y + math.sin(angle) * world_radius,
            )
            pygame.draw.line(self.surface, (0, 0, 0), center, edge, 2)
        self._ship(scene, to_screen)
        self._hud(scene)
        return self._action_menu(scene)

    def _ship(self, scene, to_screen) -> None:
        transform = scene.ship_transform
        fx, fy = transform.forward()
        half = SHIP_LENGTH / 2
        nose = (transform.x + fx * half, transform.y + fy * half)
        left = (transform.x - fx * half - fy * half / 2, transform.y - fy * half + fx * half / 2)
        right = (transform.x - fx * half + fy * half / 2, transform.y - fy * half - fx * half / 2)
        points = [to_screen(*p) for p in (nose, left, right)]
        pygame.draw.polygon(self.surface, (230, 230, 230), points)

    def _hud(self, scene: SpaceScene) -> None:
        panel = scene.hud
        if panel is None:
            return
        width, _ = self.size
        right = width - 24
        self.text(panel.speed_text, 24, (0, 0, 0), (right - 300, 48))
        y = 24
        for bar in panel.bars:
            left = right - bar.width
            self.text(bar.text, 24, (0, 0, 0), (left + 40, y + bar.height // 2))
            track = pygame.Rect(left + 98, y + 4, bar.track_width, bar.height - 8)
            pygame.draw.rect(self.surface, (80, 80, 80), track, 1)
            fill = pygame.Rect(track.x, track.y, round(bar.fill_width), track.height)
            pygame.draw.rect(self.surface, _rgb(bar.color), fill)
            y += round(bar.height) + 8

    def _action_menu(self, scene: SpaceScene) -> pygame.Rect | None:
        menu = scene.action_menu
        if not menu.is_open:
            return None
        width, height = self.size
        box = pygame.Rect(round(width * 0.4), round(height * 0.4), 320, 200)
        pygame.draw.rect(self.surface, (245, 245, 245), box)
        self.text(menu.title(), 28, (0, 0, 0), (box.centerx, box.y + 30))
        button = pygame.Rect(0, 0, 150, 65)
        button.center = (box.centerx, box.centery + 24)
        pygame.draw.rect(self.surface, _rgb(menu.style.background), button, border_radius=32)
        pygame.draw.rect(self.surface, _rgb(menu.style.border), button, 5, border_radius=32)
        self.text(menu.button_text, 33, (230, 230, 230), button.center)
        return button


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the game until it is quit."""
    args = parse_args(argv)
    pygame.display.init()
    pygame.font.init()
    try:
        surface = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("spaceout")
        game = Game(rng=random.Random(args.seed))
        renderer = _Renderer(surface)
        clock = pygame.time.Clock()
        frame = 0
        while not game.exit_requested and (args.frames is None or frame < args.frames):
            clicked = None
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    clicked = event.pos
            keys = pygame.key.get_pressed()
            pressed = {key for code, key in _KEYS.items() if keys[code]}
            mouse = pygame.mouse.get_pos()
            held = pygame.mouse.get_pressed()[0]
            dt = clock.tick(args.fps) / 1000.0
            game.update(dt, pressed)

            if game.state is GameState.SPLASH:
                renderer.splash(game)
            elif game.state is GameState.MENU:
                screen = game.menu.screen()
                if screen is None:
                    surface.fill(CLEAR_COLOR)
                else:
                    hits = renderer.menu(screen, mouse, held)
                    if clicked is not None:
                        for rect, button in hits:
                            if rect.collidepoint(clicked):
                                game.press_menu_button(button)
                                break
            elif game.state is GameState.SPACE and game.space is not None:
                dock = renderer.space(game.space)
                if dock is not None:
                    if clicked is not None and dock.collidepoint(clicked):
                        game.press_dock()
                    else:
                        hovered = dock.collidepoint(mouse)
                        game.space.action_menu.interact(
                            Interaction.HOVERED if hovered else Interaction.NONE
                        )
            else:
                surface.fill(CLEAR_COLOR)
            pygame.display.flip()
            frame += 1
        return 0
    finally:
        pygame.quit()