"""
Per-frame render step
"""

from classic_pong.core.entities import Ball
from classic_pong.core.entities import Paddle
from classic_pong.core.interfaces.renderer import Color
from classic_pong.core.interfaces.renderer import DrawingSurface
from classic_pong.core.match import MatchState
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config

# Score anchors, offsets from the top-left and bottom-right corners
PLAYER1_SCORE_ANCHOR = (150, 200)
PLAYER2_SCORE_OFFSET = (200, 125)

RESTART_PROMPT = "Press space to restart"
PROMPT_LINE_OFFSET = 100


def draw_paddle(surface: DrawingSurface, paddle: Paddle, color: Color) -> None:
    surface.fill_rect(*paddle.get_rect(), color)


def draw_ball(surface: DrawingSurface, ball: Ball, color: Color) -> None:
    surface.fill_circle(ball.position.x, ball.position.y, ball.radius, color)


def draw_win_banner(
    surface: DrawingSurface, state: MatchState, winner: int, config: GameConfig
) -> None:
    """Draw the winner line with the restart prompt below it"""
    center_x = state.surface_width / 2
    center_y = state.surface_height / 2
    color = config.FOREGROUND_COLOR

    surface.draw_text(center_x, center_y, f"Player {winner} wins!", color, config.BANNER_FONT_SIZE)
    surface.draw_text(
        center_x,
        center_y + PROMPT_LINE_OFFSET,
        RESTART_PROMPT,
        color,
        config.PROMPT_FONT_SIZE,
    )


def render(state: MatchState, surface: DrawingSurface, config: GameConfig | None = None) -> None:
    """
    Draws one frame of the match.

    The ball is hidden while the winner banner is up. Rendering never changes
    the match state.
    """
    config = config or game_config
    color = config.FOREGROUND_COLOR

    surface.fill_background(config.BACKGROUND_COLOR)

    surface.draw_text(
        *PLAYER1_SCORE_ANCHOR, str(state.player1_score), color, config.SCORE_FONT_SIZE
    )
    surface.draw_text(
        state.surface_width - PLAYER2_SCORE_OFFSET[0],
        state.surface_height - PLAYER2_SCORE_OFFSET[1],
        str(state.player2_score),
        color,
        config.SCORE_FONT_SIZE,
    )

    draw_paddle(surface, state.paddle1, color)
    draw_paddle(surface, state.paddle2, color)

    winner = state.winner()
    if winner:
        draw_win_banner(surface, state, winner, config)

    if state.playing:
        draw_ball(surface, state.ball, color)
