"""
Unit tests for the render step, drawn onto a recording surface
"""

import pytest

from classic_pong.core.match import WIN_SCORE, MatchState, update
from classic_pong.core.render import render
from classic_pong.gui.headless_renderer import HeadlessSurface
from classic_pong.utils.config import GameConfig

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def render_once(state: MatchState) -> HeadlessSurface:
    surface = HeadlessSurface()
    render(state, surface, GameConfig())
    return surface


class TestRender:
    """Test what a frame draws"""

    def test_playing_frame(self):
        """Test background, scores, paddles and ball"""
        state = MatchState.new(800, 800)
        surface = render_once(state)

        assert surface.calls[0] == ("fill_background", BLACK)
        assert surface.calls_named("draw_text") == [
            ("draw_text", 150, 200, "0", WHITE, 100),
            ("draw_text", 600, 675, "0", WHITE, 100),
        ]
        assert len(surface.calls_named("fill_rect")) == 2
        assert surface.calls_named("fill_circle") == [("fill_circle", 400.0, 400.0, 25.0, WHITE)]

    def test_paddle_rect_is_centred(self):
        """Test paddles are drawn from their top-left corner"""
        state = MatchState.new(800, 800)
        surface = render_once(state)

        _, x, y, w, h, color = surface.calls_named("fill_rect")[0]
        assert x == pytest.approx(400 - 800 / 6)
        assert y == 25.0
        assert w == pytest.approx(800 / 3)
        assert h == 50.0
        assert color == WHITE

    def test_scores_drawn(self):
        """Test the current scores are shown"""
        state = MatchState.new(800, 800)
        state.player1_score = 3
        state.player2_score = 1
        assert render_once(state).texts() == ["3", "1"]

    def test_win_banner_hides_ball(self):
        """Test the winner banner replaces the ball once the match is won"""
        state = MatchState.new(800, 800)
        state.player2_score = WIN_SCORE
        update(state)

        surface = render_once(state)

        assert surface.texts() == ["0", "5", "Player 2 wins!", "Press space to restart"]
        banner, prompt = surface.calls_named("draw_text")[2:]
        assert banner[1:3] == (400.0, 400.0)
        assert banner[5] == 80
        assert prompt[1:3] == (400.0, 500.0)
        assert prompt[5] == 40
        assert surface.calls_named("fill_circle") == []

    def test_render_does_not_change_state(self):
        """Test the state transition is left to the update step"""
        state = MatchState.new(800, 800)
        state.player1_score = WIN_SCORE

        surface = render_once(state)

        assert state.playing is True
        assert "Player 1 wins!" in surface.texts()

    def test_custom_colors(self):
        """Test colors come from the configuration"""
        state = MatchState.new(800, 800)
        surface = HeadlessSurface()
        config = GameConfig(BACKGROUND_COLOR=(10, 20, 30), FOREGROUND_COLOR=(200, 0, 0))

        render(state, surface, config)

        assert surface.calls[0] == ("fill_background", (10, 20, 30))
        assert all(call[-1] == (200, 0, 0) for call in surface.calls_named("fill_rect"))
