"""
Utility module of Classic Pong game
"""

from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import game_config
from classic_pong.utils.config import load_config_from_file

__all__ = ["game_config", "GameConfig", "load_config_from_file"]
