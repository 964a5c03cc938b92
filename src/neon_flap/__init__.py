"""Neon Flap: a synthwave flappy bird clone."""

from .data_models import GameSnapshot, SessionState
from .game_loop import GameLoop

__all__ = ["GameLoop", "GameSnapshot", "SessionState"]
