"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .constants import ACTOR_X, ACTOR_START_Y, ACTOR_WIDTH, ACTOR_HEIGHT, OBSTACLE_WIDTH


class RoundState(Enum):
    IDLE = "idle"
    COUNTDOWN = "countdown"
    ACTIVE = "active"
    ENDED = "ended"


@dataclass
class Actor:
    """The controlled entity. Only y and velocity change during play."""
    x: float = ACTOR_X
    y: float = ACTOR_START_Y
    w: float = ACTOR_WIDTH
    h: float = ACTOR_HEIGHT
    velocity: float = 0.0

    def to_snapshot(self) -> "ActorSnapshot":
        return ActorSnapshot(x=self.x, y=self.y, w=self.w, h=self.h, velocity=self.velocity)


@dataclass
class Obstacle:
    """A column with a vertical gap between gap_top and gap_bottom."""
    x: float
    gap_top: float
    gap_bottom: float
    width: float = OBSTACLE_WIDTH
    passed: bool = False

    @property
    def gap_size(self) -> float:
        return self.gap_bottom - self.gap_top

    @property
    def right(self) -> float:
        return self.x + self.width

    def to_snapshot(self) -> "ObstacleSnapshot":
        return ObstacleSnapshot(
            x=self.x, gap_top=self.gap_top, gap_bottom=self.gap_bottom,
            width=self.width, passed=self.passed)


@dataclass(frozen=True)
class LeaderboardEntry:
    """Single leaderboard row. An empty name means no name was recorded."""
    score: int
    name: str = ""


# -------- Read-only views for the renderer --------

@dataclass(frozen=True)
class ActorSnapshot:
    x: float
    y: float
    w: float
    h: float
    velocity: float


@dataclass(frozen=True)
class ObstacleSnapshot:
    x: float
    gap_top: float
    gap_bottom: float
    width: float
    passed: bool


@dataclass(frozen=True)
class GameSnapshot:
    """Everything a renderer needs to draw one frame."""
    state: RoundState
    actor: ActorSnapshot
    obstacles: Tuple[ObstacleSnapshot, ...]
    score: int
    countdown: int
    attempts_left: int
    last_round_score: Optional[int]
    session_scores: Tuple[int, ...]
    pending_total: Optional[int]
    leaderboard: Tuple[LeaderboardEntry, ...]
