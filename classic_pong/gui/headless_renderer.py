"""
Headless drawing surface that records draw calls instead of producing pixels
"""

from typing import Any

from classic_pong.core.interfaces.renderer import Color


class HeadlessSurface:
    """Drawing surface that keeps the calls of the current frame"""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.frames_presented = 0

    def fill_background(self, color: Color) -> None:
        # A background fill starts a new frame
        self.calls = [("fill_background", color)]

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        self.calls.append(("fill_rect", x, y, width, height, color))

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        self.calls.append(("fill_circle", x, y, radius, color))

    def draw_text(self, x: float, y: float, text: str, color: Color, font_size: int) -> None:
        self.calls.append(("draw_text", x, y, text, color, font_size))

    def present(self) -> None:
        self.frames_presented += 1

    def texts(self) -> list[str]:
        """Texts drawn in the current frame"""
        return [call[3] for call in self.calls if call[0] == "draw_text"]

    def calls_named(self, name: str) -> list[tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == name]

    def tick(self, fps: int) -> None:
        """No frame pacing without a display"""

    def cleanup(self) -> None:
        self.calls = []
