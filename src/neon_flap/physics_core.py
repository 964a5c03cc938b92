"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

import random
from typing import List, Optional

from .constants import (
    ACTOR_X, GRAVITY_ACCEL, JUMP_IMPULSE, LOWER_BOUND_Y, MAX_TILT,
    PARTICLE_COLORS, PARTICLE_DECAY, PARTICLE_DRIFT, PARTICLE_MIN_SPEED,
    PARTICLE_OFFSET_X, PARTICLE_SPAWN_CHANCE, PARTICLE_SPEED_RANGE,
    PIPE_GAP, PIPE_HEIGHT_RANGE, PIPE_HIT_HALF_SPAN, PIPE_MIN_HEIGHT,
    PIPE_SPEED, PIPE_START_HEIGHTS, PIPE_START_X, PIPE_WRAP_DISTANCE,
    PIPE_WRAP_X, ROTATION_GAIN, UPPER_BOUND_Y
)
from .data_models import Obstacle, Particle


class PhysicsCore:
    """
    Stateless physics used by the game loop.
    Constants are class attributes so a subclass can retune them.
    """

    GRAVITY = GRAVITY_ACCEL
    JUMP = JUMP_IMPULSE
    UPPER_BOUND = UPPER_BOUND_Y
    LOWER_BOUND = LOWER_BOUND_Y
    GAP = PIPE_GAP

    def apply_gravity_and_movement(self, y: float, velocity: float, dt: float) -> tuple[float, float]:
        """
        Calculates new position and velocity after one timestep.
        Velocity is integrated first (semi-implicit Euler).
        """
        velocity += self.GRAVITY * dt
        y += velocity * dt
        return y, velocity

    def flap(self) -> float:
        """Returns the instantaneous velocity after a flap."""
        return self.JUMP

    def rotation(self, velocity: float) -> float:
        """Visual tilt for a given velocity; has no physical effect."""
        return max(-MAX_TILT, min(MAX_TILT, velocity * ROTATION_GAIN))

    # -------- Particles --------

    def maybe_spawn_particle(self, y: float, rng: random.Random) -> Optional[Particle]:
        """Rolls the per-tick spawn chance for a trail particle behind the actor."""
        if rng.random() >= PARTICLE_SPAWN_CHANCE:
            return None
        return Particle(
            x=ACTOR_X + PARTICLE_OFFSET_X,
            y=y,
            vx=-PARTICLE_MIN_SPEED - rng.random() * PARTICLE_SPEED_RANGE,
            vy=(rng.random() - 0.5) * 2 * PARTICLE_DRIFT,
            life=1.0,
            color=rng.choice(PARTICLE_COLORS),
        )

    def step_particles(self, particles: List[Particle], dt: float) -> List[Particle]:
        """Moves and ages particles. Returns the survivors."""
        for p in particles:
            p.x += p.vx * dt
            p.y += p.vy * dt
            p.life -= PARTICLE_DECAY * dt
        return [p for p in particles if p.life > 0]

    # -------- Pipes --------

    def initial_obstacles(self) -> List[Obstacle]:
        return [Obstacle(x=x, gap_top=h) for x, h in zip(PIPE_START_X, PIPE_START_HEIGHTS)]

    def random_gap_top(self, rng: random.Random) -> float:
        return PIPE_MIN_HEIGHT + rng.random() * PIPE_HEIGHT_RANGE

    def step_obstacles(self, obstacles: List[Obstacle], dt: float, rng: random.Random) -> int:
        """
        Scrolls pipes left and recycles the ones that left the screen.
        Returns the number of pipes recycled (each one is worth a point).
        """
        wrapped = 0
        for pipe in obstacles:
            pipe.x -= PIPE_SPEED * dt
            if pipe.x < PIPE_WRAP_X:
                pipe.x += PIPE_WRAP_DISTANCE
                pipe.gap_top = self.random_gap_top(rng)
                wrapped += 1
        return wrapped

    # -------- Collision --------

    def to_pixel_y(self, y: float, screen_height: float) -> float:
        """Converts a normalized y into pixels from the top of the screen."""
        return (y + 1) * (screen_height / 2)

    def out_of_bounds(self, y: float) -> bool:
        return y > self.UPPER_BOUND or y < self.LOWER_BOUND

    def hits_pipe(self, y: float, pipe: Obstacle, screen_height: float) -> bool:
        """Pipes outside the actor's horizontal span never collide."""
        if not (ACTOR_X - PIPE_HIT_HALF_SPAN < pipe.x < ACTOR_X + PIPE_HIT_HALF_SPAN):
            return False
        pixel_y = self.to_pixel_y(y, screen_height)
        return pixel_y < pipe.gap_top or pixel_y > pipe.gap_top + self.GAP

    def check_collision(self, y: float, obstacles: List[Obstacle], screen_height: float) -> bool:
        """Checks for collisions with floor, ceiling, or pipes."""
        if self.out_of_bounds(y):
            return True
        return any(self.hits_pipe(y, pipe, screen_height) for pipe in obstacles)
