"""
audio.py: The looped background track the engine starts and stops.
"""

import logging
from pathlib import Path
from typing import Optional, Protocol

import pygame

logger = logging.getLogger(__name__)


class BackgroundTrack(Protocol):
    def loop_start(self, volume: float) -> None: ...

    def stop(self) -> None: ...

    def is_playing(self) -> bool: ...


class SilentTrack:
    """Tracks play state without a sound device."""

    def __init__(self):
        self._playing = False
        self.volume = 0.0

    def loop_start(self, volume: float) -> None:
        self.volume = volume
        self._playing = True

    def stop(self) -> None:
        self._playing = False

    def is_playing(self) -> bool:
        return self._playing


class MixerTrack:
    """A pygame.mixer sound played on an endless loop."""

    def __init__(self, sound: pygame.mixer.Sound):
        self._sound = sound
        self._channel: Optional[pygame.mixer.Channel] = None

    @classmethod
    def load(cls, path: Path) -> Optional["MixerTrack"]:
        """Initializes the mixer and loads path; None when either fails."""
        if not path.is_file():
            logger.warning(f"Music file not found: {path}")
            return None
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            sound = pygame.mixer.Sound(str(path))
        except pygame.error as e:
            logger.error(f"Failed to initialize audio: {e}")
            return None
        logger.info(f"Loaded background music {path.name}")
        return cls(sound)

    def loop_start(self, volume: float) -> None:
        self._sound.set_volume(volume)
        self._channel = self._sound.play(loops=-1)

    def stop(self) -> None:
        self._sound.stop()
        self._channel = None

    def is_playing(self) -> bool:
        return self._channel is not None and self._channel.get_busy()
