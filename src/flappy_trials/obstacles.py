"""
obstacles.py: Spawning, scrolling, recycling and hit-testing of gap obstacles.
"""

import random
from typing import List, Optional

from .constants import FIELD_HEIGHT, GAP_MARGIN, OBSTACLE_WIDTH, SPAWN_SPACING
from .data_models import Actor, Obstacle


class ObstacleManager:
    """
    Owns the obstacles in spawn order (oldest, leftmost first).
    Randomness comes from the injected `rng` so runs can be replayed from a seed.
    """

    def __init__(self, gap_min: int, gap_max: int,
                 spawn_spacing: float = SPAWN_SPACING,
                 field_height: float = FIELD_HEIGHT,
                 width: float = OBSTACLE_WIDTH,
                 margin: float = GAP_MARGIN,
                 rng: Optional[random.Random] = None):
        if gap_min > gap_max:
            raise ValueError(f"gap_min {gap_min} > gap_max {gap_max}")
        if gap_max + 2 * margin > field_height:
            raise ValueError(
                f"gap {gap_max} with margin {margin} does not fit a field of height {field_height}")
        self.gap_min = gap_min
        self.gap_max = gap_max
        self.spawn_spacing = spawn_spacing
        self.field_height = field_height
        self.width = width
        self.margin = margin
        self.rng = rng if rng is not None else random.Random()
        self.obstacles: List[Obstacle] = []

    def _spawn(self, field_width: float) -> Obstacle:
        """Generates a new obstacle at the right edge of the field."""
        gap = self.rng.randint(self.gap_min, self.gap_max)
        # Whole-pixel offsets keep gap_bottom - gap_top equal to the drawn gap
        top = self.rng.randint(int(self.margin), int(self.field_height - gap - self.margin))
        obstacle = Obstacle(
            x=float(field_width), gap_top=float(top), gap_bottom=float(top + gap), width=self.width)
        self.obstacles.append(obstacle)
        return obstacle

    def maybe_spawn(self, field_width: float) -> Optional[Obstacle]:
        """Spawns at most one obstacle once the newest has moved far enough in."""
        if not self.obstacles or self.obstacles[-1].x < field_width - self.spawn_spacing:
            return self._spawn(field_width)
        return None

    def advance(self, speed: float):
        for obstacle in self.obstacles:
            obstacle.x -= speed

    def prune(self):
        """Drops obstacles whose right edge has left the field."""
        self.obstacles = [o for o in self.obstacles if o.right >= 0]

    def check_collision(self, actor: Actor) -> bool:
        for o in self.obstacles:
            overlaps = actor.x < o.right and actor.x + actor.w > o.x
            if overlaps and (actor.y < o.gap_top or actor.y + actor.h > o.gap_bottom):
                return True
        return False

    def check_scoring(self, actor: Actor) -> int:
        """Marks every newly cleared obstacle as passed and returns how many there were."""
        cleared = 0
        for o in self.obstacles:
            if not o.passed and o.right < actor.x:
                o.passed = True
                cleared += 1
        return cleared

    def clear(self):
        self.obstacles = []
