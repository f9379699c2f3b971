"""Game objects: the player ship, enemies, bullets, background stars and effects."""

from __future__ import annotations

import random
import time
from pathlib import Path
from typing import Callable, NamedTuple

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 480
MUSIC = True
MUSIC_VOLUME = 3.0
EFFECT_VOLUME = 4.0

TEXTURE_SHEET_NAME = "M484VerticalShmupSet1.png"


def resources_dir() -> Path:
    """Directory holding textures, sounds and fonts, relative to the working directory."""
    return Path.cwd() / "resources"


def texture_sheet_path() -> Path:
    """Full path of the sprite sheet every entity takes its image from."""
    return resources_dir() / "textures" / TEXTURE_SHEET_NAME


class TextureRect(NamedTuple):
    """Region of the sprite sheet: left, top, width, height in pixels."""

    left: int
    top: int
    width: int
    height: int


class Clock:
    """Stopwatch measuring time since creation or the last restart."""

    def __init__(self, time_source: Callable[[], float] = time.monotonic) -> None:
        self._now = time_source
        self._start = self._now()

    def elapsed_ms(self) -> float:
        """Milliseconds since the clock was started or restarted."""
        return (self._now() - self._start) * 1000.0

    def restart(self) -> float:
        """Restart the clock and return the milliseconds that had elapsed."""
        now = self._now()
        elapsed = (now - self._start) * 1000.0
        self._start = now
        return elapsed


class Star:
    """Background star falling down the screen and wrapping to the top."""

    SPEED = 2.0
    TEXTURE_RECT = TextureRect(892, 189, 4, 4)

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.w = 4.5
        self.h = 4.5
        self.speed = self.SPEED
        self.texture_rect = self.TEXTURE_RECT

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def move(self) -> None:
        """Fall by one step; wrap to the top once below the window."""
        self.y += self.speed
        if self.y > WINDOW_HEIGHT:
            self.y = 0.0


class Bullet:
    """Projectile moving straight up (player) or down (enemy)."""

    PLAYER_SPEED = -7.0
    ENEMY_SPEED = 7.0
    PLAYER_TEXTURE_RECT = TextureRect(807, 236, 5, 10)
    ENEMY_TEXTURE_RECT = TextureRect(875, 161, 5, 10)

    def __init__(self, x: float, y: float, is_player: bool = True) -> None:
        self.x = float(x)
        self.y = float(y)
        self.is_player = is_player
        if is_player:
            self.speed = self.PLAYER_SPEED
            self.texture_rect = self.PLAYER_TEXTURE_RECT
        else:
            self.speed = self.ENEMY_SPEED
            self.texture_rect = self.ENEMY_TEXTURE_RECT

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def move(self) -> None:
        """Advance one step along the vertical axis."""
        self.y += self.speed


ENEMY_TEXTURE_RECTS = (
    TextureRect(610, 50, 26, 20),
    TextureRect(610, 90, 26, 20),
    TextureRect(650, 50, 26, 20),
    TextureRect(650, 90, 26, 20),
)


class Enemy:
    """Enemy ship that fires a bullet every cooldown period."""

    BULLET_COOLDOWN_MS = 2000.0
    DEFAULT_DAMAGE = 20

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        w: float = 40.0,
        h: float = 40.0,
        *,
        rng: random.Random | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.x = float(x)
        self.y = float(y)
        self.w = float(w)
        self.h = float(h)
        self.damage = self.DEFAULT_DAMAGE
        self.bullet_cooldown = self.BULLET_COOLDOWN_MS
        self.texture_rect = (rng or random).choice(ENEMY_TEXTURE_RECTS)
        self._bullet_timer = clock if clock is not None else Clock()

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def new_bullet(self) -> bool:
        """Return True, and restart the cooldown, when the enemy may fire."""
        if self._bullet_timer.elapsed_ms() >= self.bullet_cooldown:
            self._bullet_timer.restart()
            return True
        return False

    def move(self) -> None:
        """Enemies currently hold their position."""


class Player:
    """The player's ship."""

    START_X = 295.0
    START_Y = 430.0
    SPEED = 15.0
    START_HEALTH = 60
    SCALE = 2.0
    TEXTURE_RECT = TextureRect(800, 256, 20, 20)

    def __init__(self, width: float = 40.0, height: float = 40.0) -> None:
        self.x = self.START_X
        self.y = self.START_Y
        self.w = float(width)
        self.h = float(height)
        self.speed = self.SPEED
        self.health = self.START_HEALTH
        self.points = 0
        self.texture_rect = self.TEXTURE_RECT

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def apply_damage(self, damage: int) -> None:
        self.health -= damage

    def move_up(self) -> None:
        self.y -= self.speed

    def move_down(self) -> None:
        self.y += self.speed

    def move_left(self) -> None:
        self.x -= self.speed

    def move_right(self) -> None:
        self.x += self.speed

    def add_points(self, points: int) -> None:
        self.points += points


DESTROY_EFFECT_FRAMES = (
    TextureRect(972, 113, 20, 20),
    TextureRect(954, 111, 20, 20),
    TextureRect(933, 109, 20, 20),
    TextureRect(908, 108, 20, 20),
    TextureRect(883, 106, 20, 20),
)


class DestroyEffect:
    """Explosion animation stepping through its frames at a fixed rate."""

    FRAME_DELTA_MS = 25.0

    def __init__(self, x: float, y: float, *, clock: Clock | None = None) -> None:
        self.x = float(x)
        self.y = float(y)
        self.frames = DESTROY_EFFECT_FRAMES
        self.frame_index = 0
        self._clock = clock if clock is not None else Clock()

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def texture_rect(self) -> TextureRect:
        """Frame currently shown; the last one stays once the animation ends."""
        return self.frames[min(self.frame_index, len(self.frames) - 1)]

    def set_next_sprite(self) -> None:
        """Advance one frame if the frame delay has passed."""
        if self._clock.elapsed_ms() > self.FRAME_DELTA_MS:
            self.frame_index += 1
            self._clock.restart()

    def has_next_sprite(self) -> bool:
        return self.frame_index < len(self.frames)