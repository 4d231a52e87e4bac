"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum, auto

from .constants import BIRD_RADIUS, BIRD_X, RESPAWN_Y


class GamePhase(Enum):
    """Lifecycle of one run."""
    NOT_STARTED = auto()
    RUNNING = auto()
    GAME_OVER = auto()


@dataclass
class Player:
    """The bird. Only y and velocity change during a run."""
    x: float = BIRD_X
    y: float = RESPAWN_Y
    velocity: float = 0.0
    radius: float = BIRD_RADIUS

    @property
    def center(self):
        return (self.x, self.y)


@dataclass(frozen=True)
class Triangle:
    """A tooth. x values are local to the owning column."""
    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float

    def translated(self, dx: float):
        """Returns the three vertices shifted horizontally by dx."""
        return (
            (self.x1 + dx, self.y1),
            (self.x2 + dx, self.y2),
            (self.x3 + dx, self.y3),
        )
