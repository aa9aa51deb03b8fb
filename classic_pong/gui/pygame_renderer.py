"""
PyGame drawing surface for Classic Pong
"""

import logging

import pygame

from classic_pong.core.interfaces.renderer import Color
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class PygameSurface:
    """PyGame-backed implementation of the drawing surface"""

    def __init__(self, config: GameConfig | None = None):
        """Initialize PyGame and open the game window"""
        config = config or game_config
        self.width = config.SURFACE_WIDTH
        self.height = config.SURFACE_HEIGHT

        pygame.init()

        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(config.WINDOW_TITLE)

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        # Fonts are created lazily, one per size
        self._fonts: dict[int, pygame.font.Font] = {}

        logger.info("Opened %dx%d window", self.width, self.height)

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def fill_background(self, color: Color) -> None:
        self.screen.fill(color)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        pygame.draw.rect(self.screen, color, pygame.Rect(int(x), int(y), int(width), int(height)))

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        pygame.draw.circle(self.screen, color, (int(x), int(y)), int(radius))

    def draw_text(self, x: float, y: float, text: str, color: Color, font_size: int) -> None:
        text_surface = self._font(font_size).render(text, True, color)
        text_rect = text_surface.get_rect()
        text_rect.centerx = int(x)
        text_rect.bottom = int(y)
        self.screen.blit(text_surface, text_rect)

    def present(self) -> None:
        """Present the rendered frame to the screen"""
        pygame.display.flip()

    def tick(self, fps: int) -> None:
        """Wait out the rest of the frame"""
        self.clock.tick(fps)

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
