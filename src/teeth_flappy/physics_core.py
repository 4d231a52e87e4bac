"""
physics_core.py: The frame-coupled kinematics and world-bounds check for the bird.
"""

from .constants import GRAVITY, LIFT, PLAY_BOTTOM, BIRD_X, RESPAWN_Y
from .data_models import Player


class PhysicsCore:
    """
    Per-tick bird physics shared by the engine and its tests.

    One call to apply_gravity_and_movement is one frame; nothing here
    knows about wall-clock time.
    """

    GRAVITY = GRAVITY
    PLAY_BOTTOM = PLAY_BOTTOM

    def apply_gravity_and_movement(self, player: Player):
        """Velocity gains GRAVITY, then position moves by the new velocity."""
        player.velocity += self.GRAVITY
        player.y += player.velocity

    def flap(self) -> float:
        """Returns the velocity the bird takes on a flap."""
        return LIFT

    def is_out_of_bounds(self, player: Player) -> bool:
        """
        True once any part of the bird crosses the ground line or the top edge.

        Touching counts, the circle need not be fully outside: a bird resting
        half in the ground band would otherwise keep flying through it.
        """
        return player.y + player.radius > self.PLAY_BOTTOM or player.y - player.radius < 0

    def respawn(self, player: Player):
        player.x = BIRD_X
        player.y = RESPAWN_Y
        player.velocity = 0.0
