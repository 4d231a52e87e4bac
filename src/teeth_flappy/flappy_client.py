"""
flappy_client.py

Frame driver: pygame window, input dispatch and the render pass.
The game rules live in GameEngine; this module only feeds it and draws it.
"""

import logging
from pathlib import Path
from typing import Optional

import pygame

from .audio import BackgroundTrack, MixerTrack, SilentTrack
from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_HEIGHT, PLAY_BOTTOM, RENDER_FPS,
    BIRD_SPRITE_WIDTH, BACKGROUND_COLOR, GROUND_COLOR, GUIDE_COLOR,
    OVERLAY_COLOR, BIRD_FALLBACK_COLOR, TEXT_COLOR
)
from .game_engine import GameEngine
from .data_models import GamePhase

logger = logging.getLogger(__name__)

GUIDE_DASH = 12
GUIDE_STEP = 18
GUIDE_WIDTH = 2
FLAP_BUTTONS = (1, 2, 3)


def velocity_to_tilt(velocity: float) -> float:
    """Maps velocity -8..8 linearly onto -20..20 degrees (not clamped)."""
    return (velocity + 8) / 16 * 40 - 20


def load_bird_sprite(path: Optional[Path]) -> Optional[pygame.Surface]:
    """Loads and scales the bird image; None means draw the fallback circle."""
    if path is None:
        return None
    if not path.is_file():
        logger.warning(f"Bird sprite not found: {path}")
        return None
    image = pygame.image.load(str(path)).convert_alpha()
    scale = BIRD_SPRITE_WIDTH / image.get_width()
    size = (BIRD_SPRITE_WIDTH, round(image.get_height() * scale))
    return pygame.transform.smoothscale(image, size)


class FlappyClient:
    def __init__(self, sprite_path: Optional[Path] = None, music_path: Optional[Path] = None,
                 fps: int = RENDER_FPS):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Flappy")
        self.fps = fps

        audio: Optional[BackgroundTrack] = None
        if music_path is not None:
            audio = MixerTrack.load(music_path)
        if audio is None:
            logger.info("Running without background music")
            audio = SilentTrack()

        # --- Game Logic ---
        self.engine = GameEngine(audio=audio)
        self.bird_sprite = load_bird_sprite(sprite_path)

        # --- Rendering ---
        self.clock = pygame.time.Clock()
        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 28)
        self.overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)

    def run(self):
        """The main client execution loop."""
        running = True
        while running:
            self.clock.tick(self.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self._handle_key(event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self._handle_mouse(event.button)

            # One fixed tick per rendered frame
            self.engine.tick()
            self._draw_game()

        self.engine.audio.stop()
        pygame.quit()

    def _handle_key(self, key: int) -> bool:
        """Dispatches a key press; returns False when the player quits."""
        if key == pygame.K_ESCAPE:
            return False
        if key in (pygame.K_SPACE, pygame.K_w):
            self.engine.on_flap_input()
        elif key == pygame.K_r:
            self.engine.on_restart_input()
        return True

    def _handle_mouse(self, button: int):
        """Left, middle or right click flaps; wheel buttons (4, 5) are ignored."""
        if button in FLAP_BUTTONS:
            self.engine.on_flap_input()

    # ----------------- Rendering -----------------

    def _draw_game(self):
        """Renders the current engine state."""
        screen = self.screen
        engine = self.engine
        screen.fill(BACKGROUND_COLOR)
        pygame.draw.rect(screen, GROUND_COLOR, (0, PLAY_BOTTOM, SCREEN_WIDTH, GROUND_HEIGHT))

        self.overlay.fill((0, 0, 0, 0))
        self._draw_guide(engine.next_gap_center_y())

        if engine.phase is GamePhase.NOT_STARTED:
            screen.blit(self.overlay, (0, 0))
            self._draw_bird()
            self._draw_centered("Press R to start (music plays)", self.font, SCREEN_HEIGHT // 2 - 18)
            self._draw_centered("SPACE / click to flap", self.font, SCREEN_HEIGHT // 2 + 12)
            pygame.display.flip()
            return

        screen.blit(self.overlay, (0, 0))
        for column in engine.columns:
            column.draw(screen)
        self._draw_bird()

        # HUD
        self._draw_centered(str(engine.score), self.large_font, 60)
        if engine.game_over:
            self.overlay.fill(OVERLAY_COLOR)
            screen.blit(self.overlay, (0, 0))
            self._draw_centered("Game Over", self.large_font, SCREEN_HEIGHT // 2 - 26)
            self._draw_centered("Press R to restart", self.font, SCREEN_HEIGHT // 2 + 10)

        pygame.display.flip()

    def _draw_guide(self, guide_y: Optional[float]):
        """Dashed line at the height of the next gap's centre."""
        if guide_y is None:
            return
        y = int(guide_y)
        for x in range(0, SCREEN_WIDTH, GUIDE_STEP):
            pygame.draw.line(self.overlay, GUIDE_COLOR, (x, y), (x + GUIDE_DASH, y), GUIDE_WIDTH)

    def _draw_bird(self):
        player = self.engine.player
        center = (int(player.x), int(player.y))
        if self.bird_sprite is None:
            pygame.draw.circle(self.screen, BIRD_FALLBACK_COLOR, center, int(player.radius))
            return
        # pygame rotates counter-clockwise, the tilt is clockwise-positive
        rotated = pygame.transform.rotate(self.bird_sprite, -velocity_to_tilt(player.velocity))
        self.screen.blit(rotated, rotated.get_rect(center=center))

    def _draw_centered(self, text: str, font: pygame.font.Font, y: int):
        surf = font.render(text, True, TEXT_COLOR)
        self.screen.blit(surf, surf.get_rect(center=(SCREEN_WIDTH // 2, y)))
