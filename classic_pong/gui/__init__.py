"""
Graphical interface of Classic Pong game
"""

from classic_pong.gui.game_app import PongApp
from classic_pong.gui.game_app import main

__all__ = ["PongApp", "main"]
