"""
Classic Pong: two-player real-time Pong
"""

__version__ = "1.0.0"
