"""Game flow (menu, playing, game over) and the window that shows it."""

from __future__ import annotations

import argparse
import random
from enum import Enum, auto
from typing import Callable, Optional

from spaceshoot.entities import (
    EFFECT_VOLUME,
    MUSIC,
    MUSIC_VOLUME,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Clock,
    Player,
    TextureRect,
    resources_dir,
    texture_sheet_path,
)
from spaceshoot.scene import Key, Scene

WINDOW_TITLE = "Space Shoot"
FRAMERATE = 60
FONT_NAME = "VeniteAdoremus-rgRBA.ttf"
MUSIC_NAME = "Battle in the Stars.ogg"

TITLE_TEXT = "SPACE SHOOT v0.2.0"
TITLE_SIZE = 24
TITLE_COLOR = (254, 101, 1)

PRESS_START_TEXT = "Press SPACE for start"
PRESS_START_SIZE = 20
PRESS_START_COLOR = (100, 12, 171)

GAME_OVER_TEXT = "GAME OVER"
GAME_OVER_SIZE = 24
GAME_OVER_COLOR = (179, 45, 69)

HUD_SIZE = 12
HUD_FINAL_SIZE = 24
HUD_COLOR = (255, 255, 255)
BACKGROUND = (0, 0, 0)
PLAYER_SCALE = 2


class Phase(Enum):
    """Which screen the game is showing."""

    MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class GameState:
    """The player, the current scene and the phase of the game."""

    def __init__(
        self,
        *,
        rng: Optional[random.Random] = None,
        clock_factory: Callable[[], Clock] = Clock,
        on_destroy: Optional[Callable[[], None]] = None,
    ) -> None:
        self._rng = rng
        self._clock_factory = clock_factory
        self._on_destroy = on_destroy
        self.phase = Phase.MENU
        self.player = Player(40.0, 40.0)
        self.enemies_timer = clock_factory()
        self.bullets_timer = clock_factory()
        self.scene = self._new_scene()

    def _new_scene(self) -> Scene:
        return Scene(
            self.player,
            rng=self._rng,
            clock_factory=self._clock_factory,
            on_destroy=self._on_destroy,
        )

    @property
    def points_text(self) -> str:
        return f"Points: {self.player.points}"

    @property
    def health_text(self) -> str:
        return f"Health: {self.player.health}"

    def handle_key(self, key: Key) -> None:
        """React to one key press according to the current phase."""
        if self.phase is Phase.PLAYING:
            self.scene.handle_player(key)
        elif self.phase is Phase.GAME_OVER:
            if key is Key.SPACE:
                self.phase = Phase.PLAYING
                self.player.points = 0
                self.player.health = Player.START_HEALTH
                self.scene = self._new_scene()
                self.enemies_timer.restart()
                self.bullets_timer.restart()
        elif key is Key.SPACE:
            self.phase = Phase.PLAYING

    def update(self) -> None:
        """Advance one frame: end the game on zero health, else move the scene."""
        if self.phase is not Phase.PLAYING:
            return
        if self.player.health <= 0:
            self.phase = Phase.GAME_OVER
            return
        self.scene.update_scene(self.bullets_timer, self.enemies_timer)


def _translate_key(pygame, code: int) -> Key:
    mapping = {
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_ESCAPE: Key.ESCAPE,
    }
    return mapping.get(code, Key.OTHER)


class _Renderer:
    """Draws a GameState onto a pygame surface."""

    def __init__(self, pygame, screen) -> None:
        self._pg = pygame
        self._screen = screen
        try:
            self._sheet = pygame.image.load(str(texture_sheet_path())).convert_alpha()
        except (pygame.error, FileNotFoundError):
            self._sheet = None
        self._images: dict[tuple[TextureRect, int], object] = {}
        self._fonts: dict[int, object] = {}

    def _font(self, size: int):
        if size not in self._fonts:
            path = resources_dir() / "fonts" / FONT_NAME
            try:
                self._fonts[size] = self._pg.font.Font(str(path), size)
            except (self._pg.error, FileNotFoundError, OSError):
                self._fonts[size] = self._pg.font.Font(None, size)
        return self._fonts[size]

    def _text(self, text: str, size: int, color):
        return self._font(size).render(text, True, color)

    def _image(self, rect: TextureRect, scale: int = 1):
        key = (rect, scale)
        if key not in self._images:
            image = None
            if self._sheet is not None:
                try:
                    image = self._sheet.subsurface(self._pg.Rect(*rect))
                except ValueError:
                    image = None
                if image is not None and scale != 1:
                    image = self._pg.transform.scale(
                        image, (rect.width * scale, rect.height * scale)
                    )
            self._images[key] = image
        return self._images[key]

    def _blit_rect(self, rect: TextureRect, position, scale: int = 1) -> None:
        image = self._image(rect, scale)
        if image is not None:
            self._screen.blit(image, position)

    def draw(self, state: GameState) -> None:
        screen = self._screen
        screen.fill(BACKGROUND)
        press_start = self._text(PRESS_START_TEXT, PRESS_START_SIZE, PRESS_START_COLOR)
        press_x = (WINDOW_WIDTH - press_start.get_width()) / 2
        press_y = (WINDOW_HEIGHT - PRESS_START_SIZE) / 2

        if state.phase is Phase.PLAYING:
            screen.blit(self._text(state.points_text, HUD_SIZE, HUD_COLOR), (0, 0))
            screen.blit(self._text(state.health_text, HUD_SIZE, HUD_COLOR), (0, 15))
            scene = state.scene
            for star in scene.stars:
                self._blit_rect(star.texture_rect, star.position)
            for effect in scene.effects:
                self._blit_rect(effect.texture_rect, effect.position)
            self._blit_rect(scene.player.texture_rect, scene.player.position, PLAYER_SCALE)
            for bullet in scene.bullets:
                self._blit_rect(bullet.texture_rect, bullet.position)
            for bullet in scene.enemies_bullets:
                self._blit_rect(bullet.texture_rect, bullet.position)
            for enemy in scene.enemies:
                self._blit_rect(enemy.texture_rect, enemy.position)
        elif state.phase is Phase.GAME_OVER:
            over = self._text(GAME_OVER_TEXT, GAME_OVER_SIZE, GAME_OVER_COLOR)
            screen.blit(
                over,
                (
                    (WINDOW_WIDTH - over.get_width()) / 2,
                    (WINDOW_HEIGHT - GAME_OVER_SIZE) / 4,
                ),
            )
            points = self._text(state.points_text, HUD_FINAL_SIZE, HUD_COLOR)
            screen.blit(points, (press_x, press_y))
            screen.blit(press_start, (press_x, press_y + 50))
        else:
            title = self._text(TITLE_TEXT, TITLE_SIZE, TITLE_COLOR)
            screen.blit(
                title,
                (
                    (WINDOW_WIDTH - title.get_width()) / 2,
                    (WINDOW_HEIGHT - TITLE_SIZE) / 4,
                ),
            )
            screen.blit(press_start, (press_x, press_y))


def _run() -> int:
    import pygame

    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)
    pygame.key.set_repeat(200, 30)
    frame_clock = pygame.time.Clock()

    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(str(resources_dir() / "sounds" / MUSIC_NAME))
    except (pygame.error, FileNotFoundError):
        return -1
    pygame.mixer.music.set_volume(MUSIC_VOLUME / 100.0)

    destroy_sound = None
    try:
        sound_path = resources_dir() / "sounds" / "Hit 1.mp3"
        destroy_sound = pygame.mixer.Sound(str(sound_path))
        destroy_sound.set_volume(EFFECT_VOLUME / 100.0)
    except (pygame.error, FileNotFoundError):
        destroy_sound = None

    def play_destroy_sound() -> None:
        if destroy_sound is not None:
            destroy_sound.play()

    state = GameState(on_destroy=play_destroy_sound)
    renderer = _Renderer(pygame, screen)

    if MUSIC:
        pygame.mixer.music.play(loops=-1)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                state.handle_key(_translate_key(pygame, event.key))
        if not running:
            break
        state.update()
        renderer.draw(state)
        pygame.display.flip()
        frame_clock.tick(FRAMERATE)
    return 0


def main(argv=None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="spaceshoot", description="Vertical space shooter.")
    parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        return _run()
    finally:
        pygame.quit()