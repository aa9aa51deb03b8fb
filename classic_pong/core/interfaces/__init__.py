"""
Interfaces to the collaborators of the core game logic
"""

from classic_pong.core.interfaces.renderer import Color
from classic_pong.core.interfaces.renderer import DrawingSurface

__all__ = ["Color", "DrawingSurface"]
