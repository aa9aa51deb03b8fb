"""
Tests for the frame loop driver, run headless
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402

from classic_pong.gui.game_app import PongApp, main  # noqa: E402
from classic_pong.gui.headless_renderer import HeadlessSurface  # noqa: E402
from classic_pong.gui.pygame_renderer import PygameSurface  # noqa: E402
from classic_pong.utils.config import GameConfig  # noqa: E402


class TestPongApp:
    """Tests for PongApp"""

    def test_step_updates_then_renders(self):
        """Test one step advances the ball and draws the new position"""
        app = PongApp(GameConfig(), headless=True)

        events = app.step()

        assert events["point"] is None
        assert app.state.ball.position.to_tuple() == (400.0, 404.0)
        assert ("fill_circle", 400.0, 404.0, 25.0, (255, 255, 255)) in app.surface.calls
        assert app.surface.frames_presented == 1

    def test_run_stops_after_max_frames(self):
        """Test the loop honours the frame limit and cleans up"""
        surface = HeadlessSurface()
        app = PongApp(GameConfig(), surface=surface, headless=True)

        frames = app.run(max_frames=10)

        assert frames == 10
        assert surface.frames_presented == 10
        assert app.state.ball.position.y == 440.0
        assert surface.calls == []

    def test_surface_size_from_config(self):
        """Test the match is laid out on the configured surface"""
        app = PongApp(GameConfig(SURFACE_WIDTH=640, SURFACE_HEIGHT=480), headless=True)
        assert app.state.ball.position.to_tuple() == (320.0, 240.0)
        assert app.state.ball.radius == 20.0

    def test_quit_event_stops_loop(self):
        """Test closing the window ends the loop"""
        surface = PygameSurface(GameConfig(SURFACE_WIDTH=200, SURFACE_HEIGHT=200))
        app = PongApp(GameConfig(SURFACE_WIDTH=200, SURFACE_HEIGHT=200), surface=surface)
        pygame.event.post(pygame.event.Event(pygame.QUIT))

        frames = app.run(max_frames=100)

        assert frames == 1
        assert app.running is False


class TestMain:
    """Tests for the command line entry point"""

    def test_headless_run(self, capsys):
        """Test a short headless run"""
        assert main(["--headless", "--frames", "5"]) == 0
        assert "CONTROLS" in capsys.readouterr().out

    def test_headless_needs_frame_limit(self, capsys):
        """Test headless mode refuses to run forever"""
        assert main(["--headless"]) == 2
        assert "--frames" in capsys.readouterr().err
