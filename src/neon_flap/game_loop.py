"""
game_loop.py: The single-player simulation owning all mutable game state.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .constants import SCREEN_HEIGHT
from .data_models import Actor, GameSnapshot, Obstacle, Particle, SessionState
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class GameLoop:
    """
    Advances the world once per frame while a session is running.
    Mutation only happens in advance(), apply_impulse() and reset();
    the renderer reads snapshot().
    """
    screen_height: float = SCREEN_HEIGHT
    rng: random.Random = field(default_factory=random.Random)
    on_game_over: Optional[Callable[[int], None]] = None
    core: PhysicsCore = field(default_factory=PhysicsCore)

    state: SessionState = SessionState.NOT_STARTED
    score: int = 0
    best_score: int = 0
    tick_count: int = 0
    actor: Actor = field(default_factory=Actor)
    obstacles: List[Obstacle] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)

    def __post_init__(self):
        self.reset()

    def reset(self):
        """Restores the initial session. The best score is kept."""
        self.state = SessionState.NOT_STARTED
        self.score = 0
        self.tick_count = 0
        self.actor = Actor()
        self.obstacles = self.core.initial_obstacles()
        self.particles = []

    def apply_impulse(self):
        """The player's only input: start or restart, then flap."""
        if self.state is SessionState.OVER:
            self.reset()
            self._start()
        elif self.state is SessionState.NOT_STARTED:
            self._start()
        self.actor.velocity = self.core.flap()

    def advance(self, dt: float):
        """Steps the simulation by dt seconds. No-op unless running."""
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        if self.state is not SessionState.RUNNING:
            return

        self.tick_count += 1
        core = self.core
        actor = self.actor

        # 1. Gravity and movement
        actor.y, actor.velocity = core.apply_gravity_and_movement(actor.y, actor.velocity, dt)
        actor.rotation = core.rotation(actor.velocity)

        # 2. Trail particles
        particle = core.maybe_spawn_particle(actor.y, self.rng)
        if particle is not None:
            self.particles.append(particle)
        self.particles = core.step_particles(self.particles, dt)

        # 3. Pipes (recycling is the only scoring event)
        self.score += core.step_obstacles(self.obstacles, dt, self.rng)

        # 4. Collision check
        if core.check_collision(actor.y, self.obstacles, self.screen_height):
            self._end()

    def set_screen_height(self, screen_height: float):
        self.screen_height = screen_height

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            actor_y=self.actor.y,
            actor_rotation=self.actor.rotation,
            obstacles=tuple((o.x, o.gap_top) for o in self.obstacles),
            particles=tuple(
                Particle(p.x, p.y, p.vx, p.vy, p.life, p.color) for p in self.particles
            ),
            state=self.state,
            score=self.score,
            best_score=self.best_score,
        )

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    def _start(self):
        self.state = SessionState.RUNNING
        logger.info("Session started (best=%d)", self.best_score)

    def _end(self):
        self.state = SessionState.OVER
        if self.score > self.best_score:
            self.best_score = self.score
        logger.info("Session over after %d ticks: score=%d best=%d",
                    self.tick_count, self.score, self.best_score)
        if self.on_game_over is not None:
            try:
                self.on_game_over(self.score)
            except Exception:
                logger.exception("Score hand-off failed for score %d", self.score)
