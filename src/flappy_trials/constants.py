"""
constants.py: Centralized configuration for the simulation and the front end.
"""

from dataclasses import dataclass

# -------- Game World Config --------
FIELD_WIDTH = 400
FIELD_HEIGHT = 600

# -------- Actor Config --------
ACTOR_X = 50                    # Fixed actor X position
ACTOR_START_Y = 300.0
ACTOR_WIDTH = 30
ACTOR_HEIGHT = 30

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 50
GAP_MARGIN = 50                 # Minimum distance between a gap and the field edges
SPAWN_SPACING = 200             # Newest obstacle must be this far in before the next spawns

# -------- Round / Session Config --------
COUNTDOWN_START = 3
COUNTDOWN_INTERVAL_MS = 700     # Coarse timer period during the countdown
ATTEMPT_LIMIT = 3
LEADERBOARD_SIZE = 3
PLACEHOLDER_NAME = "Anonymous"

# -------- Front End Config --------
RENDER_FPS = 60
ACTOR_FRAMES = 4                # Wing-flap animation frames
ACTOR_FRAME_FPS = 10


@dataclass(frozen=True)
class Difficulty:
    """One named set of rules. Per-tick units (pixels/tick, pixels/tick^2)."""
    name: str
    gap_min: int
    gap_max: int
    speed: float
    gravity: float = 0.5
    jump_impulse: float = -9.0
    spawn_spacing: float = SPAWN_SPACING

    def __post_init__(self):
        if self.gap_min > self.gap_max:
            raise ValueError(
                f"Difficulty {self.name!r}: gap_min {self.gap_min} > gap_max {self.gap_max}")
        if self.gap_max + 2 * GAP_MARGIN > FIELD_HEIGHT:
            raise ValueError(
                f"Difficulty {self.name!r}: gap {self.gap_max} does not fit the field")
        if self.jump_impulse >= 0:
            raise ValueError(f"Difficulty {self.name!r}: jump_impulse must be negative")


DIFFICULTIES = {
    "normal": Difficulty(name="normal", gap_min=150, gap_max=230, speed=3.0),
    "easy": Difficulty(name="easy", gap_min=170, gap_max=170, speed=2.0, jump_impulse=-8.0),
}
DEFAULT_DIFFICULTY = "normal"


def get_difficulty(name: str) -> Difficulty:
    """Looks up a preset by name (case-insensitive)."""
    try:
        return DIFFICULTIES[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown difficulty {name!r}; expected one of {sorted(DIFFICULTIES)}") from None
