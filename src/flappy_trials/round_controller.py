"""
round_controller.py: The round state machine and the per-frame tick contract.

The controller never schedules anything itself. A driver calls `tick()` once
per frame and `countdown_tick()` on a coarse timer; inputs arrive through
`start()`, `jump()` and `reset_player()`. All calls are expected on a single
thread, one at a time.
"""

import random
from typing import Optional, Union

from .constants import (
    ATTEMPT_LIMIT, COUNTDOWN_START, DEFAULT_DIFFICULTY, FIELD_HEIGHT, FIELD_WIDTH,
    Difficulty, get_difficulty
)
from .data_models import Actor, GameSnapshot, RoundState
from .leaderboard import Leaderboard
from .obstacles import ObstacleManager
from .physics_core import PhysicsCore
from .session import SessionTracker


class RoundController:
    """Orchestrates countdown, play and end of round for one local player."""

    def __init__(self, difficulty: Union[Difficulty, str] = DEFAULT_DIFFICULTY,
                 leaderboard: Optional[Leaderboard] = None,
                 attempt_limit: int = ATTEMPT_LIMIT,
                 rng: Optional[random.Random] = None,
                 field_width: float = FIELD_WIDTH,
                 field_height: float = FIELD_HEIGHT):
        if isinstance(difficulty, str):
            difficulty = get_difficulty(difficulty)
        self.difficulty = difficulty
        self.field_width = field_width
        self.field_height = field_height

        self.physics = PhysicsCore(
            gravity=difficulty.gravity, jump_impulse=difficulty.jump_impulse,
            field_height=field_height)
        self.obstacles = ObstacleManager(
            gap_min=difficulty.gap_min, gap_max=difficulty.gap_max,
            spawn_spacing=difficulty.spawn_spacing, field_height=field_height, rng=rng)
        self.leaderboard = leaderboard if leaderboard is not None else Leaderboard()
        self.session = SessionTracker(self.leaderboard, attempt_limit=attempt_limit)

        self.actor = Actor()
        self.state = RoundState.IDLE
        self.score = 0
        self.countdown = 0
        self.last_round_score: Optional[int] = None

    @property
    def attempts_left(self) -> int:
        return self.session.attempts_left

    # -------- Inputs --------

    def start(self) -> bool:
        """Begins the countdown for the next attempt."""
        if self.state is not RoundState.IDLE or self.session.is_session_over():
            return False
        self.countdown = COUNTDOWN_START
        self.state = RoundState.COUNTDOWN
        return True

    def jump(self) -> bool:
        if self.state is not RoundState.ACTIVE:
            return False
        self.physics.jump(self.actor)
        return True

    def reset_player(self) -> bool:
        """Hands the game to the next player."""
        if self.state not in (RoundState.IDLE, RoundState.ENDED):
            return False
        self.session.reset_session()
        self._reset_round()
        self.last_round_score = None
        self.state = RoundState.IDLE
        return True

    def submit_name(self, name: Optional[str]):
        """Completes a pending leaderboard entry with the name from the prompt."""
        return self.session.complete_qualifying_entry(name)

    # -------- Scheduler hooks --------

    def countdown_tick(self) -> bool:
        """One step of the coarse countdown timer. Play begins when it reaches zero."""
        if self.state is not RoundState.COUNTDOWN:
            return False
        self.countdown -= 1
        if self.countdown <= 0:
            self.countdown = 0
            self._begin_round()
        return True

    def tick(self) -> bool:
        """Runs one frame of play. Returns False when no frame ran."""
        if self.state is not RoundState.ACTIVE:
            return False
        self.physics.apply_gravity(self.actor)
        if self.physics.hit_floor(self.actor):
            self._end_round()
            return True

        self.obstacles.maybe_spawn(self.field_width)
        self.obstacles.advance(self.difficulty.speed)
        self.obstacles.prune()

        if self.obstacles.check_collision(self.actor):
            self._end_round()
            return True

        self.score += self.obstacles.check_scoring(self.actor)
        return True

    # -------- Transitions --------

    def _reset_round(self):
        self.physics.reset(self.actor)
        self.obstacles.clear()
        self.score = 0

    def _begin_round(self):
        self._reset_round()
        self.state = RoundState.ACTIVE

    def _end_round(self):
        self.state = RoundState.ENDED
        self.last_round_score = self.score
        self.session.record_attempt(self.score)
        if not self.session.is_session_over():
            self.state = RoundState.IDLE

    # -------- Renderer view --------

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            state=self.state,
            actor=self.actor.to_snapshot(),
            obstacles=tuple(o.to_snapshot() for o in self.obstacles.obstacles),
            score=self.score,
            countdown=self.countdown,
            attempts_left=self.attempts_left,
            last_round_score=self.last_round_score,
            session_scores=tuple(self.session.scores),
            pending_total=self.session.pending_total,
            leaderboard=tuple(self.leaderboard.top_n()),
        )
