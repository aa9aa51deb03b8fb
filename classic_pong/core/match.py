"""
Match state and the per-frame update step
"""

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import Any

from classic_pong.core.entities import Ball
from classic_pong.core.entities import Paddle

logger = logging.getLogger(__name__)

WIN_SCORE = 5


@dataclass
class InputFlags:
    """Logical inputs, each True while the bound key is held"""

    left1: bool = False
    right1: bool = False
    left2: bool = False
    right2: bool = False
    restart: bool = False


@dataclass
class MatchState:
    """Complete state of a two-player match"""

    surface_width: float
    surface_height: float
    paddle1: Paddle
    paddle2: Paddle
    ball: Ball
    player1_score: int = 0
    player2_score: int = 0
    playing: bool = True
    inputs: InputFlags = field(default_factory=InputFlags)

    @classmethod
    def new(cls, surface_width: float, surface_height: float) -> "MatchState":
        """Creates a match with paddles at the top and bottom and the ball serving down"""
        paddle1 = Paddle(surface_width / 2, surface_height / 16, surface_width, surface_height)
        paddle2 = Paddle(
            surface_width / 2, surface_height * 15 / 16, surface_width, surface_height
        )
        ball = Ball(surface_width / 2, surface_height / 2, surface_width, surface_height)
        ball.set_direction(0, 1)
        return cls(surface_width, surface_height, paddle1, paddle2, ball)

    @property
    def score(self) -> tuple[int, int]:
        return (self.player1_score, self.player2_score)

    def winner(self) -> int:
        """Returns the winning player (1 or 2), or 0 while nobody has won"""
        if self.player1_score >= WIN_SCORE:
            return 1
        elif self.player2_score >= WIN_SCORE:
            return 2
        return 0

    def award_point(self, player: int) -> None:
        if player == 1:
            self.player1_score += 1
        elif player == 2:
            self.player2_score += 1
        else:
            raise ValueError(f"Unknown player: {player}")

    def restart(self) -> None:
        """Starts a new match, keeping the ball where the last point left it"""
        self.player1_score = 0
        self.player2_score = 0
        self.paddle1.reset_to_origin()
        self.paddle2.reset_to_origin()
        # Manual restarts always serve downwards, only scored points alternate
        self.ball.set_direction(0, 1)
        self.playing = True


def horizontal_direction(left: bool, right: bool) -> int:
    """Maps two opposing keys to -1, 0 or 1; holding both cancels out"""
    if left and not right:
        return -1
    elif right and not left:
        return 1
    return 0


def update(state: MatchState) -> dict[str, Any]:
    """
    Advances the match by one frame.

    Physics is frame-count based: every call moves each entity by exactly
    one step, whatever the time elapsed since the previous frame.

    Args:
        state: Match to advance, mutated in place

    Returns:
        Dict with the frame's events:
        {
            "point": player credited with a point this frame, or None,
            "winner": winning player (1 or 2), or 0,
            "restarted": True if a new match started this frame
        }
    """
    events: dict[str, Any] = {"point": None, "winner": 0, "restarted": False}
    inputs = state.inputs

    state.paddle1.set_direction(horizontal_direction(inputs.left1, inputs.right1), 0)
    state.paddle2.set_direction(horizontal_direction(inputs.left2, inputs.right2), 0)

    if state.playing:
        state.ball.move(state.paddle1, state.paddle2)
        scorer = state.ball.scored_by
        if scorer:
            state.award_point(scorer)
            events["point"] = scorer
            logger.info("Point for player %d, score %d-%d", scorer, *state.score)
    elif inputs.restart:
        state.restart()
        events["restarted"] = True
        logger.info("Match restarted")

    # Paddles stay controllable while the winner banner is shown
    state.paddle1.move()
    state.paddle2.move()

    winner = state.winner()
    if winner:
        if state.playing:
            logger.info("Player %d wins %d-%d", winner, *state.score)
        state.playing = False
        events["winner"] = winner

    return events
