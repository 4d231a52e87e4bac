import os
import random

import pytest

# Headless pygame for rendering tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from teeth_flappy.game_engine import GameEngine  # noqa: E402


class RecordingTrack:
    """Background track fake that counts calls."""

    def __init__(self):
        self.playing = False
        self.starts = []
        self.stops = 0

    def loop_start(self, volume):
        self.starts.append(volume)
        self.playing = True

    def stop(self):
        self.stops += 1
        self.playing = False

    def is_playing(self):
        return self.playing


@pytest.fixture
def track():
    return RecordingTrack()


@pytest.fixture
def engine(track):
    return GameEngine(audio=track, rng=random.Random(1234))


@pytest.fixture
def running_engine(engine):
    engine.on_restart_input()
    return engine
