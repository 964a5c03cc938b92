"""
data_models.py: Data structures for the game state.
"""

import enum
from dataclasses import asdict, dataclass
from typing import Tuple

from .constants import RESPAWN_Y


class SessionState(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


@dataclass
class Actor:
    """The player-controlled bird. Only its vertical motion is simulated."""
    y: float = RESPAWN_Y
    velocity: float = 0.0
    rotation: float = 0.0


@dataclass
class Obstacle:
    """A pipe pair: normalized center x and the top pipe height in pixels."""
    x: float
    gap_top: float


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float = 1.0
    color: str = "cyan"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of one frame, handed to the renderer."""
    actor_y: float
    actor_rotation: float
    obstacles: Tuple[Tuple[float, float], ...]
    particles: Tuple[Particle, ...]
    state: SessionState
    score: int
    best_score: int

    def to_dict(self):
        """Prepares a minimal state dictionary for logging."""
        return {
            "y": round(self.actor_y, 4),
            "rotation": round(self.actor_rotation, 4),
            "pipes": [
                {"x": round(x, 4), "gap_top": round(gap_top, 2)}
                for x, gap_top in self.obstacles
            ],
            "particles": [asdict(p) for p in self.particles],
            "state": self.state.value,
            "score": self.score,
            "best": self.best_score,
        }
