"""The playing field: stars, bullets, enemies and effects around the player."""

from __future__ import annotations

import random
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Union

from spaceshoot.entities import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Bullet,
    Clock,
    DestroyEffect,
    Enemy,
    Player,
    Star,
    resources_dir,
    texture_sheet_path,
)

STARS_COUNT = 200
MAX_ENEMIES = 5
ENEMY_SPAWN_INTERVAL_MS = 2000.0
PLAYER_FIRE_INTERVAL_MS = 500.0
ENEMY_WIDTH = 40.0
ENEMY_HEIGHT = 30.0
KILL_POINTS = 50
ENEMY_BULLET_DAMAGE = 20
BORDER_MARGIN = 32.0
DESTROY_SOUND_NAME = "Hit 1.mp3"

_Target = Union[Enemy, Player]


class Key(Enum):
    """Keys the game reacts to."""

    W = "w"
    A = "a"
    S = "s"
    D = "d"
    SPACE = "space"
    ESCAPE = "escape"
    OTHER = "other"


def _hits(bullet: Bullet, target: _Target) -> bool:
    """True when the bullet lies strictly inside the target's box."""
    return (
        target.x < bullet.x < target.x + target.w
        and target.y < bullet.y < target.y + target.h
    )


class Scene:
    """All moving objects of one game and the rules that tie them together."""

    def __init__(
        self,
        player: Player,
        *,
        rng: Optional[random.Random] = None,
        clock_factory: Callable[[], Clock] = Clock,
        on_destroy: Optional[Callable[[], None]] = None,
    ) -> None:
        self.player = player
        self._rng = rng if rng is not None else random.Random()
        self._clock_factory = clock_factory
        self._on_destroy = on_destroy
        self.texture_file: Path = texture_sheet_path()
        self.destroy_sound_path: Path = resources_dir() / "sounds" / DESTROY_SOUND_NAME
        self.stars: list[Star] = [
            Star(20 + self._rng.randrange(640), self._rng.randrange(400))
            for _ in range(STARS_COUNT)
        ]
        self.bullets: list[Bullet] = []
        self.enemies_bullets: list[Bullet] = []
        self.enemies: list[Enemy] = []
        self.effects: list[DestroyEffect] = []

    def handle_player(self, key: Key) -> None:
        """Move the player one step for a movement key, staying inside the window."""
        player = self.player
        if key is Key.W and player.y > BORDER_MARGIN:
            player.move_up()
        elif key is Key.A and player.x > BORDER_MARGIN:
            player.move_left()
        elif key is Key.S and player.y < WINDOW_HEIGHT - BORDER_MARGIN:
            player.move_down()
        elif key is Key.D and player.x < WINDOW_WIDTH - BORDER_MARGIN:
            player.move_right()

    def update_scene(self, bullets_timer: Clock, enemies_timer: Clock) -> None:
        """Advance the whole scene by one frame."""
        for star in self.stars:
            star.move()

        if bullets_timer.elapsed_ms() > PLAYER_FIRE_INTERVAL_MS:
            self.bullets.append(Bullet(self.player.x + 17.0, self.player.y - 20.0))
            bullets_timer.restart()

        self._handle_enemies(enemies_timer)
        self._handle_bullets()
        self._handle_effects()

    def _handle_enemies(self, enemies_timer: Clock) -> None:
        if (
            enemies_timer.elapsed_ms() > ENEMY_SPAWN_INTERVAL_MS
            and len(self.enemies) < MAX_ENEMIES
        ):
            x = self._rng.randrange(500)
            y = self._rng.randrange(100)
            self.enemies.append(
                Enemy(
                    x,
                    y,
                    ENEMY_WIDTH,
                    ENEMY_HEIGHT,
                    rng=self._rng,
                    clock=self._clock_factory(),
                )
            )
            enemies_timer.restart()

        for enemy in self.enemies:
            if enemy.new_bullet():
                self.enemies_bullets.append(Bullet(enemy.x, enemy.y + 4.0, False))

    def _destroy_enemy(self, enemy: Enemy) -> None:
        self.enemies.remove(enemy)
        self.effects.append(
            DestroyEffect(enemy.x, enemy.y, clock=self._clock_factory())
        )
        self.player.add_points(KILL_POINTS)
        if self._on_destroy is not None:
            self._on_destroy()

    def _handle_bullets(self) -> None:
        remaining: list[Bullet] = []
        for bullet in self.bullets:
            bullet.move()
            target = next((e for e in self.enemies if _hits(bullet, e)), None)
            if target is not None:
                self._destroy_enemy(target)
            elif bullet.y >= 0.0:
                remaining.append(bullet)
        self.bullets = remaining

        remaining = []
        for bullet in self.enemies_bullets:
            collided = _hits(bullet, self.player)
            bullet.move()
            if collided:
                self.player.apply_damage(ENEMY_BULLET_DAMAGE)
            elif bullet.y <= WINDOW_HEIGHT:
                remaining.append(bullet)
        self.enemies_bullets = remaining

    def _handle_effects(self) -> None:
        remaining: list[DestroyEffect] = []
        for effect in self.effects:
            if effect.has_next_sprite():
                effect.set_next_sprite()
                remaining.append(effect)
        self.effects = remaining