"""
Core module of Classic Pong game
"""

from classic_pong.core.entities import Ball
from classic_pong.core.entities import CollisionTag
from classic_pong.core.entities import Entity
from classic_pong.core.entities import Paddle
from classic_pong.core.geometry import Vector2D
from classic_pong.core.match import WIN_SCORE
from classic_pong.core.match import InputFlags
from classic_pong.core.match import MatchState
from classic_pong.core.match import update
from classic_pong.core.render import render

__all__ = [
    "Ball",
    "CollisionTag",
    "Entity",
    "Paddle",
    "Vector2D",
    "WIN_SCORE",
    "InputFlags",
    "MatchState",
    "update",
    "render",
]
