"""
game_engine.py: The game state machine advanced once per frame.
"""

import logging
import random
from typing import List, Optional
from dataclasses import dataclass, field

from .audio import BackgroundTrack, SilentTrack
from .constants import SPAWN_INTERVAL, MUSIC_VOLUME, check_config
from .data_models import GamePhase, Player
from .obstacles import TeethColumn
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class GameEngine(PhysicsCore):
    """
    Owns the bird, the columns, the score and the run lifecycle.
    Inherits bird kinematics and bounds checks from PhysicsCore.
    """
    audio: BackgroundTrack = field(default_factory=SilentTrack)
    rng: random.Random = field(default_factory=random.Random)
    player: Player = field(default_factory=Player)
    columns: List[TeethColumn] = field(default_factory=list)
    phase: GamePhase = GamePhase.NOT_STARTED
    score: int = 0
    frames_since_spawn: int = 0
    tick_count: int = 0

    def __post_init__(self):
        check_config()

    @property
    def running(self) -> bool:
        return self.phase is GamePhase.RUNNING

    @property
    def game_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    # -------- Input --------

    def on_flap_input(self):
        if not self.running:
            return
        self.player.velocity = self.flap()

    def on_restart_input(self):
        """Starts a fresh run from any phase and (re)starts the music."""
        self.respawn(self.player)
        self.columns = []
        self.score = 0
        self.frames_since_spawn = 0
        self.tick_count = 0
        self.phase = GamePhase.RUNNING

        if self.audio.is_playing():
            self.audio.stop()
        self.audio.loop_start(MUSIC_VOLUME)
        logger.info("Run started")

    # -------- Simulation --------

    def _spawn_column(self):
        """Adds a new column at the right edge."""
        column = TeethColumn.spawn(self.rng)
        self.columns.append(column)
        self.frames_since_spawn = 0
        logger.debug(f"Spawned column gap_y={column.gap_y:.1f} gap_height={column.gap_height}")

    def _hits_column(self) -> bool:
        center = self.player.center
        radius = self.player.radius
        for column in self.columns:
            if column.overlaps_horizontally(self.player.x, radius) and column.collides_with_circle(center, radius):
                return True
        return False

    def tick(self):
        """
        The main simulation step.
        Mutates the bird, the column list, the score and the phase.
        """
        if not self.running:
            return
        self.tick_count += 1

        # 1. Bird physics
        self.apply_gravity_and_movement(self.player)

        # 2. Spawn
        self.frames_since_spawn += 1
        if self.frames_since_spawn >= SPAWN_INTERVAL:
            self._spawn_column()

        # 3. Move columns and score the ones the bird has cleared
        for column in self.columns:
            column.advance()
            if not column.scored and column.right_edge < self.player.x:
                column.scored = True
                self.score += 1

        # 4. Cull
        self.columns = [c for c in self.columns if not c.is_offscreen()]

        # 5-6. Collisions
        if self.is_out_of_bounds(self.player) or self._hits_column():
            self._end_run()

    def _end_run(self):
        self.phase = GamePhase.GAME_OVER
        if self.audio.is_playing():
            self.audio.stop()
        logger.info(f"Game over at tick {self.tick_count} with score {self.score}")

    # -------- Queries --------

    def next_gap_center_y(self) -> Optional[float]:
        """Gap centre of the nearest column still ahead of the bird."""
        ahead = [c for c in self.columns if c.x > self.player.x]
        if not ahead:
            return None
        return min(ahead, key=lambda c: c.x).gap_center_y
