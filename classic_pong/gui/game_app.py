"""
Main game application with PyGame GUI
"""

import argparse
import logging
import sys
from typing import Any

import pygame

from classic_pong.core.match import MatchState
from classic_pong.core.match import update
from classic_pong.core.render import render
from classic_pong.gui.headless_renderer import HeadlessSurface
from classic_pong.gui.input import InputManager
from classic_pong.gui.pygame_renderer import PygameSurface
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config
from classic_pong.utils.config import load_config_from_file

logger = logging.getLogger(__name__)

CONTROLS_HELP = """CONTROLS:
  Player 1 (Top): A / D
  Player 2 (Bottom): Left / Right arrows
  SPACE: Restart after a win"""


class PongApp:
    """Owns the match and drives the update-then-render frame loop"""

    def __init__(
        self,
        config: GameConfig | None = None,
        surface: PygameSurface | HeadlessSurface | None = None,
        headless: bool = False,
    ) -> None:
        """
        Initialize the application

        Args:
            config: Display configuration, the global one if omitted
            surface: Surface to draw on, created from the config if omitted
            headless: Skip window creation and event polling
        """
        self.config = config or game_config
        self.headless = headless
        if surface is None:
            surface = HeadlessSurface() if headless else PygameSurface(self.config)
        self.surface = surface

        self.state = MatchState.new(self.config.SURFACE_WIDTH, self.config.SURFACE_HEIGHT)
        self.input_manager = InputManager(self.state.inputs)
        self.running = True
        self.frame_count = 0

    def process_events(self) -> None:
        """Drain the pygame event queue into the input flags"""
        for event in pygame.event.get():
            if self.input_manager.handle_event(event) == "quit":
                self.running = False

    def step(self) -> dict[str, Any]:
        """Run one update-then-render pass"""
        events = update(self.state)
        render(self.state, self.surface, self.config)
        self.surface.present()
        self.frame_count += 1
        return events

    def run(self, max_frames: int | None = None) -> int:
        """
        Run the frame loop until the window is closed or max_frames is reached

        Returns:
            int: Number of frames played
        """
        logger.info("Starting frame loop at %d FPS", self.config.FPS)
        try:
            while self.running:
                if max_frames is not None and self.frame_count >= max_frames:
                    break
                if not self.headless:
                    self.process_events()
                self.step()
                self.surface.tick(self.config.FPS)
        finally:
            self.surface.cleanup()

        logger.info("Frame loop stopped after %d frames", self.frame_count)
        return self.frame_count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-player Pong")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument(
        "--frames", type=int, default=None, help="Stop after this many frames"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point of the classic-pong command"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.config is not None:
        load_config_from_file(args.config)

    if args.headless and args.frames is None:
        print("--headless needs --frames, there is no window to close", file=sys.stderr)
        return 2

    print("=== PONG ===")
    print()
    print(CONTROLS_HELP)
    print()

    app = PongApp(game_config, headless=args.headless)
    app.run(max_frames=args.frames)
    return 0
