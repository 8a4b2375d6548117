"""
physics_core.py: Deterministic per-tick kinematics for the actor.
"""

from .constants import ACTOR_START_Y, FIELD_HEIGHT
from .data_models import Actor


class PhysicsCore:
    """
    Integrates gravity and jump impulses in per-tick units.
    The ceiling is soft (position clamped, velocity kept); the floor is terminal
    and only reported, never clamped.
    """

    def __init__(self, gravity: float = 0.5, jump_impulse: float = -9.0,
                 field_height: float = FIELD_HEIGHT):
        self.gravity = gravity
        self.jump_impulse = jump_impulse
        self.field_height = field_height

    def apply_gravity(self, actor: Actor):
        """Advances the actor by one tick."""
        actor.velocity += self.gravity
        actor.y += actor.velocity
        if actor.y < 0:
            actor.y = 0

    def jump(self, actor: Actor):
        actor.velocity = self.jump_impulse

    def hit_floor(self, actor: Actor) -> bool:
        """True once the actor's bottom edge is past the floor."""
        return actor.y + actor.h > self.field_height

    def reset(self, actor: Actor):
        actor.y = ACTOR_START_Y
        actor.velocity = 0.0
