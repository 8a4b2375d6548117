"""
Flappy Trials: a single-player gap-dodging arcade game with a top-3 leaderboard.
"""

from .constants import DIFFICULTIES, Difficulty, get_difficulty
from .data_models import Actor, GameSnapshot, LeaderboardEntry, Obstacle, RoundState
from .leaderboard import Leaderboard
from .obstacles import ObstacleManager
from .physics_core import PhysicsCore
from .round_controller import RoundController
from .session import SessionTracker, sanitize_name

__all__ = [
    "Actor", "DIFFICULTIES", "Difficulty", "GameSnapshot", "Leaderboard",
    "LeaderboardEntry", "Obstacle", "ObstacleManager", "PhysicsCore",
    "RoundController", "RoundState", "SessionTracker", "get_difficulty",
    "sanitize_name",
]
