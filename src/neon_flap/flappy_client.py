#!/usr/bin/env python3
"""
flappy_client.py

Pygame frontend: frame clock, input mapping and rendering.
All game rules live in GameLoop; this module only reads snapshots.
"""

import argparse
import logging
import math
import random
from typing import List, Optional, Sequence, Tuple

import pygame

from .constants import (
    BACKGROUND, BIRD_HEIGHT, BIRD_WIDTH, NEON_CYAN, NEON_MAGENTA, NEON_RED,
    PIPE_FILL, PIPE_GAP, PIPE_WIDTH, RENDER_FPS, SCREEN_HEIGHT, SCREEN_WIDTH,
    STAR_COUNT, STAR_SEED, TICK_TIME
)
from .data_models import GameSnapshot, SessionState
from .game_loop import GameLoop
from .logging_setup import setup_logging
from .score_db import DB_FILE, ScoreDatabase, ScoreLogger

logger = logging.getLogger(__name__)

PARTICLE_RGB = {"magenta": NEON_MAGENTA, "cyan": NEON_CYAN}
FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP)


def make_star_field(seed: int = STAR_SEED, count: int = STAR_COUNT) -> List[Tuple[float, float, float, int]]:
    """Fixed star layout as (x fraction, y fraction, radius, alpha); same seed, same sky."""
    rng = random.Random(seed)
    return [
        (rng.random(), rng.random(), rng.random() * 1.5, int(rng.random() * 0.5 * 255))
        for _ in range(count)
    ]


class FlappyClient:
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 score_logger: Optional[ScoreLogger] = None):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Neon Flap")

        self.score_logger = score_logger
        on_game_over = score_logger.submit if score_logger else None
        self.game = GameLoop(screen_height=height, on_game_over=on_game_over)

        self.clock = pygame.time.Clock()
        self.tick_timer = 0.0
        self.elapsed = 0.0
        self.stars = make_star_field()

        self.score_font = pygame.font.Font(None, 96)
        self.title_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 28)
        self.small_font = pygame.font.Font(None, 22)

    def run(self):
        """The main client execution loop."""
        running = True
        while running:
            frame_time = self.clock.tick(RENDER_FPS) / 1000.0
            self.elapsed += frame_time

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif (event.type == pygame.KEYDOWN and event.key in FLAP_KEYS) or event.type == pygame.MOUSEBUTTONDOWN:
                    self.game.apply_impulse()
                elif event.type == pygame.VIDEORESIZE:
                    self.game.set_screen_height(event.h)

            # --- Simulation (Fixed Timestep, paused unless running) ---
            if self.game.running:
                self.tick_timer += frame_time
                while self.tick_timer >= TICK_TIME and self.game.running:
                    self.tick_timer -= TICK_TIME
                    self.game.advance(TICK_TIME)
            else:
                self.tick_timer = 0.0

            self._draw_game(self.game.snapshot())

        if self.score_logger:
            self.score_logger.join(timeout=2.0)
        pygame.quit()

    # ----------------- Rendering -----------------

    def _to_screen(self, x: float, y: float) -> Tuple[float, float]:
        w, h = self.screen.get_size()
        return (x + 1) * (w / 2), (y + 1) * (h / 2)

    def _draw_game(self, snap: GameSnapshot):
        self._draw_background()
        self._draw_particles(snap)
        self._draw_pipes(snap)
        self._draw_bird(snap)

        if snap.state is SessionState.RUNNING:
            self._blit_centered(self.score_font, str(snap.score), (255, 255, 255), 100)
        else:
            self._draw_overlay(snap)

        pygame.display.flip()

    def _draw_background(self):
        screen = self.screen
        w, h = screen.get_size()
        screen.fill(BACKGROUND)

        # Stars
        sky = pygame.Surface((w, h), pygame.SRCALPHA)
        for fx, fy, radius, alpha in self.stars:
            pygame.draw.circle(sky, (255, 255, 255, alpha), (fx * w, fy * h), max(1, round(radius)))
        screen.blit(sky, (0, 0))

        # Sun
        sun_x, sun_y = self._to_screen(0, -0.6)
        glow = pygame.Surface((320, 320), pygame.SRCALPHA)
        pygame.draw.circle(glow, (255, 140, 0, 60), (160, 160), 150)
        screen.blit(glow, (sun_x - 160, sun_y - 160))
        pygame.draw.circle(screen, (230, 90, 20), (int(sun_x), int(sun_y)), 100)

        # Perspective grid below the horizon
        horizon = h * 0.7
        grid = pygame.Surface((w, h), pygame.SRCALPHA)
        line = NEON_CYAN + (50,)
        for i in range(10):
            y = horizon + (i / 10) ** 2 * (h - horizon)
            pygame.draw.line(grid, line, (0, y), (w, y))
        for i in range(-5, 16):
            x_top = w / 2 + (i - 5) * 20
            x_bottom = w / 2 + (i - 5) * 100
            pygame.draw.line(grid, line, (x_top, horizon), (x_bottom, h))
        screen.blit(grid, (0, 0))

    def _draw_particles(self, snap: GameSnapshot):
        for p in snap.particles:
            size = max(1, int(6 * p.life))
            alpha = int(255 * max(0.0, min(1.0, p.life)))
            dot = pygame.Surface((size * 2, size * 2), pygame.SRCALPHA)
            pygame.draw.circle(dot, PARTICLE_RGB.get(p.color, NEON_CYAN) + (alpha,), (size, size), size)
            px, py = self._to_screen(p.x, p.y)
            self.screen.blit(dot, (px - size, py - size))

    def _draw_pipes(self, snap: GameSnapshot):
        screen = self.screen
        h = screen.get_height()
        for x, gap_top in snap.obstacles:
            left = self._to_screen(x, 0)[0] - PIPE_WIDTH / 2
            bottom_y = gap_top + PIPE_GAP
            for rect in (pygame.Rect(left, 0, PIPE_WIDTH, gap_top),
                         pygame.Rect(left, bottom_y, PIPE_WIDTH, max(0, h - bottom_y))):
                pygame.draw.rect(screen, PIPE_FILL, rect, border_radius=12)
                pygame.draw.rect(screen, NEON_MAGENTA, rect, width=3, border_radius=12)

    def _draw_bird(self, snap: GameSnapshot):
        bird = pygame.Surface((BIRD_WIDTH, BIRD_HEIGHT), pygame.SRCALPHA)
        pygame.draw.rect(bird, NEON_CYAN, bird.get_rect(), border_radius=10)
        pygame.draw.circle(bird, (255, 255, 255), (BIRD_WIDTH - 12, 10), 4)
        pygame.draw.rect(bird, (255, 255, 255, 128), (5, BIRD_HEIGHT - 15, 15, 10), border_radius=5)

        # pygame rotates counter-clockwise; positive rotation tilts the nose down
        rotated = pygame.transform.rotate(bird, -math.degrees(snap.actor_rotation))
        center = self._to_screen(0, snap.actor_y)
        self.screen.blit(rotated, rotated.get_rect(center=center))

    def _draw_overlay(self, snap: GameSnapshot):
        w, h = self.screen.get_size()
        panel = pygame.Rect(0, 0, 300, 240 if snap.state is SessionState.OVER else 160)
        panel.center = (w // 2, h // 2)
        shade = pygame.Surface(panel.size, pygame.SRCALPHA)
        pygame.draw.rect(shade, (255, 255, 255, 20), shade.get_rect(), border_radius=24)
        pygame.draw.rect(shade, (255, 255, 255, 40), shade.get_rect(), width=1, border_radius=24)
        self.screen.blit(shade, panel.topleft)

        y = panel.top + 40
        if snap.state is SessionState.OVER:
            self._blit_centered(self.title_font, "TERMINATED", NEON_RED, y)
            y += 50
            self._blit_centered(self.font, f"SCORE: {snap.score}", (255, 255, 255), y)
            y += 30
            self._blit_centered(self.small_font, f"BEST: {snap.best_score}", (160, 160, 160), y)
            y += 50
        else:
            self._blit_centered(self.title_font, "NEON FLAP", NEON_CYAN, y)
            y += 70

        pulse = 0.5 + 0.5 * math.sin(self.elapsed * math.pi)
        level = int(150 + 105 * pulse)
        self._blit_centered(self.font, "TAP TO BOOT", (level, level, level), y)

    def _blit_centered(self, font: pygame.font.Font, text: str, color, y: float):
        surf = font.render(text, True, color)
        self.screen.blit(surf, (self.screen.get_width() // 2 - surf.get_width() // 2, y - surf.get_height() // 2))


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="neon-flap", description="Synthwave flappy bird.")
    parser.add_argument("--username", help="save scores under this user")
    parser.add_argument("--password", default="", help="password for --username")
    parser.add_argument("--db", default=DB_FILE, help="score database file")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--quiet", action="store_true", help="only log warnings")
    parser.add_argument("--basic_debug", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None):
    args = parse_args(argv)
    setup_logging(args)

    score_logger = None
    if args.username:
        db = ScoreDatabase(args.db)
        user_id = db.authenticate(args.username, args.password)
        if user_id is None:
            logger.warning("Login failed; scores will not be saved.")
        else:
            logger.info("Logged in as %s", args.username)
        score_logger = ScoreLogger(db, user_id)

    client = FlappyClient(args.width, args.height, score_logger=score_logger)
    try:
        client.run()
    finally:
        if score_logger and score_logger.db:
            score_logger.db.close()


if __name__ == "__main__":
    main()
