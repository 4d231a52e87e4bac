"""
Teeth Flappy: a single-screen flappy game with toothed columns.
"""

from .game_engine import GameEngine
from .data_models import GamePhase, Player
from .obstacles import TeethColumn

__all__ = ["GameEngine", "GamePhase", "Player", "TeethColumn"]
